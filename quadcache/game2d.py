"""Base class for small interactive `pygame` views."""
import functools
import sys

import pygame

from quadcache.log import log


class Game2D:
    """Base game class.

    Owns the window and the event loop, subclasses fill in the hooks.
    """

    WIDTH = 1000
    HEIGHT = 800

    _graphics = True
    _text = True
    _fps = 60

    @classmethod
    def is_rect_on_screen(cls, rx, ry, rw, rh):
        """Check if any part of the given rect is visible on the screen."""
        return rx < cls.WIDTH and ry < cls.HEIGHT and rx + rw > 0 and ry + rh > 0

    def __init__(self):
        """Initialize a window."""
        pygame.init()
        self.font = pygame.font.SysFont("dejavusansmono", 14)

        self.window_size = self.WIDTH, self.HEIGHT
        self.full_rect = 0, 0, self.WIDTH, self.HEIGHT
        self.screen = pygame.display.set_mode(self.window_size)
        self.black = pygame.Color(0, 0, 0, 255)
        self.clock = pygame.time.Clock()
        log(f"Opened {self.WIDTH}x{self.HEIGHT} window")

    def reset(self):
        """Override this to reset the view state from the main."""
        pass

    def render_text(self, lines, pos):
        """Display text split by lines at position `pos`."""
        if not self._text:
            return

        lines = [(text, color, self.font.size(text)) for text, color in lines]
        text_width, text_height = functools.reduce(
            lambda total, line: (max(total[0], line[2][0]), total[1] + line[2][1]), lines, (0, 0)
        )
        self.screen.fill(self.black, (pos[0], pos[1], text_width, text_height))

        for text, color, (_, height) in lines:
            text_surface = self.font.render(text, True, color)
            self.screen.blit(text_surface, dest=pos)
            pos = pos[0], pos[1] + height

    def handle_event(self, event):
        """Handle additional events."""
        pass

    def update(self):
        """Override this function to update global state in each tick."""
        pass

    def render(self):
        """Override this function to render global stuff in each tick."""
        pass

    def run(self):
        """Run the loop until the window is closed or `q` is pressed."""
        self._running = True

        while self._running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    if event.unicode == "q":
                        self._running = False
                    elif event.unicode == "t":
                        self._text = not self._text
                    elif event.unicode == "v":
                        self._graphics = not self._graphics
                    elif event.unicode == "-":
                        self._fps = max(1, self._fps - 10)
                    elif event.unicode == "+":
                        self._fps = min(self._fps + 10, 300)
                self.handle_event(event)

            self.update()

            if self._graphics:
                self.screen.fill(self.black, self.full_rect)
                self.render()
                pygame.display.flip()

            self.clock.tick(self._fps)

        log("Closing window")
        pygame.quit()
        sys.exit()
