import logging

import pygame

from . import constants

logger = logging.getLogger("particle_sim.renderer")


class Window:
    """Maps world state to a pygame window and reports close requests."""

    def __init__(self, width=constants.WIDTH, height=constants.HEIGHT, title=constants.TITLE, fps=constants.FPS):
        pygame.init()
        # pygame.error from set_mode is a fatal startup error for the caller
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        logger.info(f"Window '{title}' opened at {width}x{height}, {fps} FPS.")

    def poll_close_requested(self):
        """Drain pending events; True if any of them asks to close the window."""
        close = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close = True
        return close

    def clear(self, color=constants.BACKGROUND_COLOR):
        self.screen.fill(color)

    def draw_circle(self, pos, radius, color):
        x, y = pos
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def draw_world(self, world):
        """Helper to draw all bodies in the world."""
        for pos, radius, color in world.snapshot():
            self.draw_circle(pos, radius, color)

    def present_frame(self):
        """Show the frame and block until the frame budget has elapsed."""
        pygame.display.flip()
        return self.clock.tick(self.fps)

    def close(self):
        pygame.quit()
