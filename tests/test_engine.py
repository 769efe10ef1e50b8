import math
from dataclasses import replace

import pytest

from conftest import make_ball
from pong_game.controls import Controls
from pong_game.engine import initial_state, run_frames, step
from pong_game.entities import GameStatus, Paddle, initial_ball, initial_left_paddle, initial_right_paddle

IDLE = Controls()
START = Controls(start=True)
BOTH_UP = Controls(left=(1, 0), right=(1, 0))


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, state):
        self.frames.append(state)


def active_state(cfg, **changes):
    state = initial_state(cfg)
    state = replace(state, status=GameStatus(active=True))
    return replace(state, **changes)


def test_initial_state(cfg):
    state = initial_state(cfg)
    assert state.status == GameStatus(0, 0, False)
    assert state.left == Paddle(10.0, 265.0, 15.0, 70.0)
    assert state.right == Paddle(775.0, 265.0, 15.0, 70.0)
    assert (state.ball.x, state.ball.y, state.ball.speed, state.ball.angle) == (400, 300, 3.0, 0.0)


def test_idle_resets_paddles(cfg):
    moved = Paddle(10.0, 0.0, 15.0, 70.0)
    state = replace(initial_state(cfg), left=moved, right=moved)
    nxt = step(cfg, state, Controls(left=(0, 1), right=(1, 0)))
    assert nxt.left == initial_left_paddle(cfg)
    assert nxt.right == initial_right_paddle(cfg)


def test_idle_toggles_serve_and_resets_ball(cfg):
    state = replace(initial_state(cfg), ball=make_ball(50, 60, speed=9.0))
    state = step(cfg, state, IDLE)
    assert state.ball == initial_ball(cfg, angle=math.pi)
    state = step(cfg, state, IDLE)
    assert state.ball == initial_ball(cfg, angle=0.0)
    assert not state.status.active


def test_start_then_play(cfg):
    state = step(cfg, initial_state(cfg), START)
    assert state.status.active
    before = state.ball
    state = step(cfg, state, Controls(left=(1, 0), right=(0, 1)))
    assert state.left.y == initial_left_paddle(cfg).y - 5
    assert state.right.y == initial_right_paddle(cfg).y + 5
    assert state.ball.x != before.x
    assert state.ball.speed == pytest.approx(before.speed + 0.005)


def test_acceleration_without_collision(cfg):
    state = active_state(cfg, ball=initial_ball(cfg, angle=0.0))
    for _ in range(20):
        state = step(cfg, state, IDLE)
    assert state.status.active
    assert state.ball.speed == pytest.approx(cfg.ball_speed + 0.005 * 20)
    assert state.ball.x == pytest.approx(400 + sum(3 + 0.005 * i for i in range(20)))


def test_miss_ends_rally(cfg):
    left = Paddle(10.0, 100.0, 15.0, 70.0)
    state = active_state(cfg, left=left, ball=make_ball(12, 50, angle=math.pi))
    nxt = step(cfg, state, IDLE)
    assert nxt.status == GameStatus(score_left=0, score_right=1, active=False)
    after = step(cfg, nxt, IDLE)
    assert after.left == initial_left_paddle(cfg)
    assert after.status == nxt.status


def test_scores_monotonic_over_long_run(cfg):
    # Both paddles hide at the top: serve, miss, serve again
    controls = iter([START if i % 300 == 0 else BOTH_UP for i in range(3000)])
    renderer = RecordingRenderer()
    run_frames(cfg, initial_state(cfg), lambda: next(controls), renderer, range(3000))
    assert len(renderer.frames) == 3000
    prev = GameStatus()
    for frame in renderer.frames:
        s = frame.status
        assert 0 <= s.score_left - prev.score_left <= 1
        assert 0 <= s.score_right - prev.score_right <= 1
        assert 0 <= frame.left.y <= cfg.height - frame.left.height
        prev = s
    assert prev.score_left + prev.score_right > 0


def test_run_frames_returns_last_state(cfg):
    state = run_frames(cfg, initial_state(cfg), lambda: START, None, range(3))
    assert state.status.active


def test_run_frames_logs_points(cfg, caplog):
    left = Paddle(10.0, 100.0, 15.0, 70.0)
    state = active_state(cfg, left=left, ball=make_ball(12, 50, angle=math.pi))
    with caplog.at_level("INFO", logger="pong_game"):
        run_frames(cfg, state, lambda: IDLE, None, range(1))
    assert "Point to right, score 0:1" in caplog.text
