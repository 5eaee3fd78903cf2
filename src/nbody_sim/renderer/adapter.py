# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

The physics core has no rendering dependency. A renderer only ever sees
RenderItem snapshots (id, position, radius, color), read once per frame;
the frame rate is independent of the simulation step.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import RenderItem

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(sim.time)
        for item in sim.render_items():
            renderer.draw_item(item)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time.
        """
        ...

    @abstractmethod
    def draw_item(self, item: RenderItem) -> None:
        """Draw a single body snapshot."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_simulation(self, sim: "Simulation") -> None:
        """Draw every body of the simulation as one frame."""
        self.begin_frame(sim.time)
        for item in sim.render_items():
            self.draw_item(item)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame t=0.0156 ===
        [1] r=40.00 @ (199.99, 1.56) #ffcc00
        [2] r=40.00 @ (-199.99, -1.56) #3399ff
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_item(self, item: RenderItem) -> None:
        x, y = item.position
        r, g, b = item.color
        self.output.write(f"[{item.id}] r={item.radius:.2f} @ ({x:.2f}, {y:.2f}) #{r:02x}{g:02x}{b:02x}\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer, for headless runs and benchmarks.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_item(self, item: RenderItem) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames for later playback or inspection.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(frame["time"], len(frame["items"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "items": [],
        }

    def draw_item(self, item: RenderItem) -> None:
        if self._current_frame is None:
            return
        self._current_frame["items"].append(item)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def trajectory(self, body_id: int) -> list[tuple[float, float]]:
        """Recorded positions of one body, one per frame it appears in."""
        return [
            item.position
            for frame in self.frames
            for item in frame["items"]
            if item.id == body_id
        ]

    def clear(self) -> None:
        self.frames.clear()
