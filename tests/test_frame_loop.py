# MIT License (see LICENSE)
import pytest

from gravity_sandbox.app import FrameLoop
from gravity_sandbox.audio import AudioManager, DEFAULT_PRESETS, RecordingAudioBackend, SUN_COLLISION
from gravity_sandbox.config import SimulationConfig
from gravity_sandbox.renderer import BufferedRenderer
from gravity_sandbox.simulation import GravitySimulation
from gravity_sandbox.viewport import Viewport


@pytest.fixture
def rig(clock, still_config):
    sim = GravitySimulation(config=still_config, clock=clock)
    viewport = Viewport.from_config(800, 600, still_config)
    renderer = BufferedRenderer()
    backend = RecordingAudioBackend()
    loop = FrameLoop(sim, viewport, renderer, AudioManager(backend))
    return sim, loop, renderer, backend


def test_frames_are_rate_limited(rig, clock, still_config):
    sim, loop, renderer, _ = rig

    assert loop.tick() is True
    assert loop.tick() is False
    clock.advance(still_config.draw_interval_ms)
    assert loop.tick() is False
    clock.advance(1)
    assert loop.tick() is True

    assert loop.frames == 2
    assert sim.steps == 2
    assert len(renderer.frames) == 2


def test_collision_cue_once_per_activation(rig, clock):
    sim, loop, renderer, backend = rig
    rumble = DEFAULT_PRESETS[SUN_COLLISION]

    sim.add_body(1.0, 0.0, 0.0, 0.0)
    loop.tick()
    assert backend.played == [rumble]
    assert renderer.frames[-1]["effect"] == [1.0, 0.0]

    # second hit while the effect is still showing: moves it, no new cue
    clock.advance(71)
    sim.add_body(0.0, 1.0, 0.0, 0.0)
    loop.tick()
    assert backend.played == [rumble]
    assert renderer.frames[-1]["effect"] == [0.0, 1.0]

    # effect expires inside step(), then a new hit starts it again
    clock.advance(110)
    sim.add_body(1.0, 1.0, 0.0, 0.0)
    loop.tick()
    assert backend.played == [rumble, rumble]

    assert renderer.released == [1, 2, 3]


def test_renderer_released_on_every_removal(rig, clock):
    sim, loop, renderer, _ = rig
    for i in range(sim.config.max_bodies):
        sim.add_body(-40.0 + 8 * i, 30.0, 0.0, 0.0)
    loop.tick()
    assert renderer.live_ids == {p.id for p in sim.get_planets()}

    # eviction
    sim.add_body(20.0, -20.0, 0.0, 0.0)
    assert renderer.released == [1]

    # boundary exit: viewport bounds are (66.7 + 20, 50 + 20)
    sim.add_body(0.0, 75.0, 0.0, 0.0)
    clock.advance(100)
    loop.tick()
    assert renderer.released == [1, 2, 12]
    assert [r.body_id for r in loop.last_removals] == [12]
    assert renderer.live_ids == {p.id for p in sim.get_planets()}


def test_close_detaches_renderer(clock):
    cfg = SimulationConfig(time_scale=1.0, max_bodies=1)
    sim = GravitySimulation(config=cfg, clock=clock)
    renderer = BufferedRenderer()
    loop = FrameLoop(sim, Viewport(100, 100), renderer, AudioManager())
    loop.close()

    sim.add_body(10.0, 10.0, 0.0, 0.0)
    sim.add_body(20.0, 10.0, 0.0, 0.0)
    assert renderer.released == []
