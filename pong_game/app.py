import logging
from typing import Optional

import pygame

from .config import Config
from .controls import Keyboard
from .engine import initial_state, run_frames
from .render import Renderer

logger = logging.getLogger(__name__)


class PongGame:
    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or Config()
        pygame.init()
        self.screen = pygame.display.set_mode((self.cfg.width, self.cfg.height))
        pygame.display.set_caption("Pong")
        self.clock = pygame.time.Clock()
        self.keyboard = Keyboard(self.cfg)
        self.renderer = Renderer(self.cfg, self.screen)
        self.state = initial_state(self.cfg)
        self.running = False
        logger.debug("Config: %s", self.cfg)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                self.keyboard.release_all()
            else:
                self.keyboard.handle_event(event)

    def ticks(self):
        """One tick per display frame until the window is closed."""
        while self.running:
            self.clock.tick(self.cfg.fps)
            self.handle_events()
            if self.running:
                yield self.clock.get_time()

    def render(self, state):
        self.renderer.render(state)
        pygame.display.flip()

    def run(self):
        self.running = True
        logger.info("Starting %dx%d at %d fps", self.cfg.width, self.cfg.height, self.cfg.fps)
        try:
            self.state = run_frames(self.cfg, self.state, self.keyboard.read, self, self.ticks())
        finally:
            pygame.quit()
        logger.info("Closed at %d:%d", self.state.status.score_left, self.state.status.score_right)
