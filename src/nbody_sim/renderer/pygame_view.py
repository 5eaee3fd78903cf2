# MIT License (see LICENSE)
"""
Pygame window for watching a simulation.

Requires the optional `viewer` extra (pygame). The window is black-cleared
each frame and every body is drawn as a filled circle in its color. Physics
is driven by a FixedStepScheduler, so the simulation advances in constant
dt steps whatever the frame rate.

Controls:
    SPACE   pause / resume
    wheel   zoom
    ESC     quit
"""
from __future__ import annotations

import pygame

from ..types import RenderItem
from ..scheduler import FixedStepScheduler
from ..simulation import Simulation
from .adapter import RendererAdapter

BACKGROUND_COLOR = (0, 0, 0)
COM_COLOR = (255, 60, 60)


class PygameRenderer(RendererAdapter):
    """
    Draws RenderItems onto a pygame surface.

    World coordinates are centered on the surface with +y pointing up.
    """

    def __init__(self, surface: "pygame.Surface", scale: float = 1.0, min_pixel_radius: int = 2):
        self.surface = surface
        self.scale = scale
        self.min_pixel_radius = min_pixel_radius
        self.offset = (0.0, 0.0)

    def to_screen(self, position: tuple[float, float]) -> tuple[int, int]:
        w, h = self.surface.get_size()
        x = (position[0] + self.offset[0]) * self.scale + w / 2
        y = h / 2 - (position[1] + self.offset[1]) * self.scale
        return int(x), int(y)

    def begin_frame(self, time: float) -> None:
        self.surface.fill(BACKGROUND_COLOR)

    def draw_item(self, item: RenderItem) -> None:
        r = max(self.min_pixel_radius, int(item.radius * self.scale))
        pygame.draw.circle(self.surface, item.color, self.to_screen(item.position), r)

    def draw_marker(self, position, color=COM_COLOR, size: int = 4) -> None:
        x, y = self.to_screen(position)
        pygame.draw.line(self.surface, color, (x - size, y), (x + size, y))
        pygame.draw.line(self.surface, color, (x, y - size), (x, y + size))

    def end_frame(self) -> None:
        pygame.display.flip()


def run_viewer(
    sim: Simulation,
    window_size: tuple[int, int] = (900, 900),
    scale: float = 1.0,
    fps: int = 60,
    title: str = "N-body Simulation",
) -> None:
    """
    Open a window and run the simulation until the window is closed.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        renderer = PygameRenderer(screen, scale=scale)
        scheduler = FixedStepScheduler(sim)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        scheduler.paused = not scheduler.paused
                elif event.type == pygame.MOUSEWHEEL:
                    renderer.scale *= 1.1 if event.y > 0 else 1 / 1.1

            scheduler.advance(clock.tick(fps) / 1000.0)

            renderer.begin_frame(sim.time)
            for item in sim.render_items():
                renderer.draw_item(item)
            if sim.center_of_mass is not None:
                renderer.draw_marker(sim.center_of_mass)
            renderer.end_frame()
    finally:
        pygame.quit()
