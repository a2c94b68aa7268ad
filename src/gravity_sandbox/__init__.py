# MIT License (see LICENSE)
"""
gravity_sandbox - An interactive 2D gravity sandbox engine.

Bodies spawned by user gestures orbit a fixed central mass under a
simplified N-body model until they leave the viewport or fall into the
center.

Main entry points:
    - GravitySimulation: The engine; owns bodies, steps and removes them.
    - SimulationConfig: Tunables (constants, capacity, cooldowns).
    - BodySnapshot / Removal: What collaborators receive.
    - FrameLoop, Viewport, GestureInput, AudioManager: Collaborator wiring.

Submodules:
    - core: Force model, integrator and diagnostics.
    - io: JSON configuration load/save.
    - renderer: Optional visualization adapters.

Example:
    from gravity_sandbox import GravitySimulation

    sim = GravitySimulation()
    sim.add_body(30.0, 0.0, 0.0, 1.5e-12)
    sim.step()
    sim.remove_out_of_range(120.0, 70.0)
"""
import logging

from .config import SimulationConfig
from .simulation import GravitySimulation
from .types import Body, BodySnapshot, CentralMass, Removal, RemovalReason
from .effects import CollisionEffectState, EffectPhase
from .viewport import Viewport
from .audio import AudioManager, SoundPreset
from .input import GestureInput
from .app import FrameLoop

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core simulation
    "GravitySimulation",
    "SimulationConfig",
    "Body",
    "BodySnapshot",
    "CentralMass",
    "Removal",
    "RemovalReason",
    "CollisionEffectState",
    "EffectPhase",
    # Collaborators
    "Viewport",
    "AudioManager",
    "SoundPreset",
    "GestureInput",
    "FrameLoop",
]
