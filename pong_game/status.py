from dataclasses import replace

from .config import Config
from .entities import Ball, GameStatus, Paddle
from .physics import Collision, check_collision


def check_game_status(cfg: Config, left: Paddle, right: Paddle, ball: Ball, status: GameStatus) -> GameStatus:
    """Award a point and stop the rally when the ball got past a paddle."""
    collision = check_collision(cfg, left, right, ball)
    if collision == Collision.LEFT:
        return replace(status, score_right=status.score_right + 1, active=False)
    if collision == Collision.RIGHT:
        return replace(status, score_left=status.score_left + 1, active=False)
    return status


def update_status(cfg: Config, start_pressed: bool, left: Paddle, right: Paddle, ball: Ball,
                  status: GameStatus) -> GameStatus:
    # Start is checked first: a miss in the same frame is not scored
    if start_pressed:
        return replace(status, active=True)
    return check_game_status(cfg, left, right, ball, status)
