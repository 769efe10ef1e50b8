import math
import sys
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class Config:
    width: int = 800
    height: int = 600
    fps: int = 60

    bg_color: tuple = (0, 0, 0)
    fg_color: tuple = (255, 255, 255)
    ball_color: tuple = (255, 255, 0)
    prompt_color: tuple = (0, 128, 0)

    paddle_w: float = 15.0
    paddle_h: float = 70.0
    paddle_margin: float = 10.0
    paddle_step: float = 5.0     # units/frame

    ball_size: float = 5.0
    ball_speed: float = 3.0      # units/frame at serve
    ball_acceleration: float = 0.005
    ball_speed_max: float = sys.float_info.max  # only guards against overflow

    # Max bounce off a paddle edge: 75°
    max_bounce_angle: float = 5 * math.pi / 12

    left_keys: tuple = (pygame.K_w, pygame.K_s)
    right_keys: tuple = (pygame.K_UP, pygame.K_DOWN)
    start_key: int = pygame.K_SPACE

    score_font: tuple = ("arial", 30)
    prompt_font: tuple = ("lucidaconsole", 40)
    prompt_text: str = "Press space to start"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"playfield must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.paddle_h <= 0 or self.paddle_h > self.height:
            raise ValueError(f"paddle height {self.paddle_h} does not fit playfield height {self.height}")
        if self.ball_speed <= 0 or self.ball_speed_max < self.ball_speed:
            raise ValueError("ball speed must be positive and not above ball_speed_max")
