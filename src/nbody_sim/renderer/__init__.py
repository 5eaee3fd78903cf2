# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for playback or inspection.

A pygame window lives in nbody_sim.renderer.pygame_view and needs the
optional `viewer` extra; it is not imported here.

Typical usage:
    from nbody_sim.renderer import DebugRenderer

    DebugRenderer().render_simulation(sim)
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
