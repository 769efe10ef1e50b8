from dataclasses import dataclass

from .config import Config


@dataclass(frozen=True)
class Paddle:
    x: float
    y: float
    width: float
    height: float

    def bottom(self) -> float:
        return self.y + self.height

    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class Ball:
    x: float
    y: float
    width: float
    height: float
    speed: float
    angle: float


@dataclass(frozen=True)
class GameStatus:
    score_left: int = 0
    score_right: int = 0
    active: bool = False


@dataclass(frozen=True)
class GameState:
    """Everything one frame hands to the next."""

    left: Paddle
    right: Paddle
    ball: Ball
    status: GameStatus


def initial_left_paddle(cfg: Config) -> Paddle:
    return Paddle(
        x=cfg.paddle_margin,
        y=cfg.height / 2 - cfg.paddle_h / 2,
        width=cfg.paddle_w,
        height=cfg.paddle_h,
    )


def initial_right_paddle(cfg: Config) -> Paddle:
    return Paddle(
        x=cfg.width - cfg.paddle_w - cfg.paddle_margin,
        y=cfg.height / 2 - cfg.paddle_h / 2,
        width=cfg.paddle_w,
        height=cfg.paddle_h,
    )


def initial_ball(cfg: Config, angle: float = 0.0) -> Ball:
    return Ball(
        x=cfg.width / 2,
        y=cfg.height / 2,
        width=cfg.ball_size,
        height=cfg.ball_size,
        speed=cfg.ball_speed,
        angle=angle,
    )
