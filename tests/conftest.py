import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from pong_game.config import Config  # noqa: E402
from pong_game.entities import Ball, Paddle  # noqa: E402


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def left():
    return Paddle(x=10.0, y=100.0, width=15.0, height=70.0)


@pytest.fixture
def right(cfg):
    return Paddle(x=cfg.width - 25.0, y=100.0, width=15.0, height=70.0)


def make_ball(x, y, angle=0.0, speed=3.0):
    return Ball(x=x, y=y, width=5.0, height=5.0, speed=speed, angle=angle)
