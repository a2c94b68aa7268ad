from gravity_sandbox.config import SimulationConfig
from gravity_sandbox.simulation import GravitySimulation
from gravity_sandbox.timers import Cooldown
from gravity_sandbox.types import Body


def test_trail_starts_full_of_spawn_position():
    b = Body(position=(3.0, -4.0), trail_length=6)
    assert len(b.trail) == 6
    assert all(p == (3.0, -4.0) for p in b.trail)


def test_sample_trail_keeps_length_most_recent_first():
    b = Body(position=(0.0, 0.0), velocity=(1.0, 0.0), trail_length=3)
    for _ in range(5):
        b.integrate(0.0, 0.0, 1.0)
        b.sample_trail()
    assert list(b.trail) == [(5.0, 0.0), (4.0, 0.0), (3.0, 0.0)]


def test_trails_follow_cooldown(clock):
    cfg = SimulationConfig()
    sim = GravitySimulation(config=cfg, clock=clock)
    sim.add_body(20.0, 0.0, 0.0, 1e-12)
    spawn = (20.0, 0.0)

    # A fresh simulation samples on its first step.
    assert sim.step() is True
    p = sim.get_planets()[0]
    assert len(p.trail) == cfg.trail_length
    assert p.trail[0] == (p.x, p.y)
    assert all(q == spawn for q in p.trail[1:])

    # Cooldown not elapsed: body moves, trail does not.
    sampled = p.trail
    clock.advance(10)
    assert sim.step() is False
    p = sim.get_planets()[0]
    assert p.y != sampled[0][1]
    assert p.trail == sampled

    # Exactly the interval is not enough; the gap must be strictly larger.
    clock.advance(cfg.trail_interval_ms - 10)
    assert sim.step() is False
    assert sim.get_planets()[0].trail == sampled

    clock.advance(1)
    assert sim.step() is True
    p = sim.get_planets()[0]
    assert len(p.trail) == cfg.trail_length
    assert p.trail[0] == (p.x, p.y)
    assert p.trail[1] == sampled[0]
    assert p.trail[2:] == sampled[1:-1]


def test_trail_cooldown_resets_when_it_fires():
    cd = Cooldown(35.0)
    assert cd.ready(0.0)
    assert not cd.ready(35.0)
    assert cd.ready(35.5)
    assert not cd.ready(70.0)
    assert cd.ready(71.0)
