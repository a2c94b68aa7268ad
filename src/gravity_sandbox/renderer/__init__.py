# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames and resource releases.

The physics engine has no rendering dependency; these adapters are optional.

Typical usage:
    from gravity_sandbox.renderer import DebugRenderer

    renderer = DebugRenderer()
    sim.add_removal_listener(renderer.on_removal)
    renderer.render_simulation(sim, time_ms)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
