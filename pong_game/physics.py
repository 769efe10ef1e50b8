"""Per-frame physics: paddle movement, collision, bounce angle and ball motion.

Every function here is pure. Entities are frozen, so each call returns a new
snapshot (or the same one when nothing changes).
"""
import math
from dataclasses import replace

from .config import Config
from .entities import Ball, Paddle


class Collision:
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"                  # missed by the left paddle
    RIGHT = "right"                # missed by the right paddle
    LEFT_PADDLE = "left_paddle"
    RIGHT_PADDLE = "right_paddle"


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def can_move(cfg: Config, direction, paddle: Paddle) -> bool:
    up, down = direction
    if up:
        return paddle.y > 0
    if down:
        return paddle.bottom() < cfg.height
    return False


def move_paddle(cfg: Config, direction, paddle: Paddle) -> Paddle:
    """Move a paddle one step for an (up, down) signal pair. Up wins over down."""
    if not can_move(cfg, direction, paddle):
        return paddle

    up, _ = direction
    dy = -cfg.paddle_step if up else cfg.paddle_step
    # A partial step never leaves the playfield
    y = clamp(paddle.y + dy, 0.0, cfg.height - paddle.height)
    return replace(paddle, y=y)


def _spans_overlap(paddle: Paddle, ball: Ball) -> bool:
    return ball.y <= paddle.bottom() and ball.y + ball.height >= paddle.y


def check_collision(cfg: Config, left: Paddle, right: Paddle, ball: Ball) -> str:
    """Classify the ball position into exactly one Collision outcome.

    Walls win over paddles and misses win over hits.
    """
    hit_top = ball.y <= 0
    hit_bottom = ball.y + ball.height >= cfg.height
    hit_left = ball.x <= left.x and not _spans_overlap(left, ball)
    hit_right = ball.x + ball.width >= right.x + right.width and not _spans_overlap(right, ball)
    hit_left_paddle = ball.x <= left.x + left.width and _spans_overlap(left, ball)
    hit_right_paddle = ball.x + ball.width >= right.x and _spans_overlap(right, ball)

    if hit_top:
        return Collision.TOP
    if hit_bottom:
        return Collision.BOTTOM
    if hit_left:
        return Collision.LEFT
    if hit_right:
        return Collision.RIGHT
    if hit_left_paddle:
        return Collision.LEFT_PADDLE
    if hit_right_paddle:
        return Collision.RIGHT_PADDLE
    return Collision.NONE


def normalized_intersection(paddle: Paddle, ball: Ball) -> float:
    """Where the ball struck: +1 at the paddle top, 0 at its centre, -1 at its bottom."""
    relative_intersect_y = paddle.center_y() - ball.y
    # A ball overlapping the paddle corner sits past its edge
    return clamp(relative_intersect_y / (paddle.height / 2), -1.0, 1.0)


def calculate_angle(cfg: Config, paddle: Paddle, ball: Ball, is_right: bool) -> float:
    n = normalized_intersection(paddle, ball)
    if is_right:
        if n == 0:
            return math.pi
        return math.pi - n * cfg.max_bounce_angle
    return n * cfg.max_bounce_angle


def bounce_angle(cfg: Config, collision: str, left: Paddle, right: Paddle, ball: Ball) -> float:
    """New travel angle of the ball for the given collision outcome."""
    if collision in (Collision.TOP, Collision.BOTTOM):
        return -ball.angle
    if collision == Collision.LEFT_PADDLE:
        return calculate_angle(cfg, left, ball, is_right=False)
    if collision == Collision.RIGHT_PADDLE:
        return calculate_angle(cfg, right, ball, is_right=True)
    # NONE, and misses: the ball keeps going so the status check sees the same miss
    return ball.angle


def collide(cfg: Config, left: Paddle, right: Paddle, ball: Ball) -> float:
    return bounce_angle(cfg, check_collision(cfg, left, right, ball), left, right, ball)


def move_ball(cfg: Config, angle: float, ball: Ball) -> Ball:
    return Ball(
        x=ball.x + ball.speed * math.cos(angle),
        y=ball.y + ball.speed * -math.sin(angle),
        width=ball.width,
        height=ball.height,
        speed=min(cfg.ball_speed_max, ball.speed + cfg.ball_acceleration),
        angle=angle,
    )
