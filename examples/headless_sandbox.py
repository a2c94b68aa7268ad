"""
Drive the full sandbox without a window: scripted drag gestures, a
rate-limited frame loop, a text renderer and a recording audio backend.

Run:
  python examples/headless_sandbox.py
"""
import logging
import time

from gravity_sandbox import AudioManager, FrameLoop, GestureInput, GravitySimulation, Viewport
from gravity_sandbox.audio import RecordingAudioBackend
from gravity_sandbox.io import resolve_config
from gravity_sandbox.renderer import DebugRenderer

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

config = resolve_config()
sim = GravitySimulation(config=config)
viewport = Viewport.from_config(800, 600, config)
backend = RecordingAudioBackend()
audio = AudioManager(backend)
gesture = GestureInput(sim, viewport, audio)
loop = FrameLoop(sim, viewport, DebugRenderer(verbose=False), audio)

# (press x, press y, release x, release y) in pixels
drags = [
    (520, 300, 520, 180),
    (280, 300, 280, 420),
    (400, 120, 520, 120),
    (400, 330, 400, 330),  # no drag: falls straight in
]

for x0, y0, x1, y1 in drags:
    gesture.pointer_down(x0, y0)
    gesture.pointer_move(x1, y1)
    gesture.pointer_up()

deadline = time.monotonic() + 3.0
while time.monotonic() < deadline:
    loop.tick()
    time.sleep(0.005)

print("frames:", loop.frames, "planets:", sim.get_planet_count())
print("cues:", [p.frequency for p in backend.played])
