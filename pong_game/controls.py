from dataclasses import dataclass

import pygame

from .config import Config


@dataclass(frozen=True)
class Controls:
    """Input read once at the start of a frame."""

    left: tuple = (0, 0)     # (up, down)
    right: tuple = (0, 0)
    start: bool = False


class Keyboard:
    """Set of currently pressed keys, fed from pygame key events.

    Only the event pump writes to it and only the frame loop reads it, both on
    the main thread.
    """

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self.pressed = set()

    def handle_event(self, event) -> None:
        if event.type == pygame.KEYDOWN:
            self.pressed.add(event.key)
        elif event.type == pygame.KEYUP:
            self.pressed.discard(event.key)

    def key(self, k) -> int:
        return 1 if k in self.pressed else 0

    def left_controls(self):
        up, down = self.cfg.left_keys
        return self.key(up), self.key(down)

    def right_controls(self):
        up, down = self.cfg.right_keys
        return self.key(up), self.key(down)

    def start_pressed(self) -> bool:
        return self.key(self.cfg.start_key) == 1

    def read(self) -> Controls:
        return Controls(
            left=self.left_controls(),
            right=self.right_controls(),
            start=self.start_pressed(),
        )

    def release_all(self):
        # Key-up events are lost while the window is unfocused
        self.pressed.clear()
