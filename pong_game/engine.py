"""Frame orchestration.

``step`` derives the next :class:`GameState` from the previous one and the
controls read for this frame. ``run_frames`` is the frame loop itself; it is
driven by any iterable of ticks so it can run off a pygame clock or off a
plain ``range`` in tests.
"""
import logging
import math

from .config import Config
from .controls import Controls
from .entities import GameState, GameStatus, initial_ball, initial_left_paddle, initial_right_paddle
from .physics import collide, move_ball, move_paddle
from .status import update_status

logger = logging.getLogger(__name__)


def initial_state(cfg: Config) -> GameState:
    return GameState(
        left=initial_left_paddle(cfg),
        right=initial_right_paddle(cfg),
        ball=initial_ball(cfg),
        status=GameStatus(),
    )


def step(cfg: Config, state: GameState, controls: Controls) -> GameState:
    active = state.status.active

    if active:
        left = move_paddle(cfg, controls.left, state.left)
        right = move_paddle(cfg, controls.right, state.right)
        angle = collide(cfg, left, right, state.ball)
        ball = move_ball(cfg, angle, state.ball)
    else:
        left = initial_left_paddle(cfg)
        right = initial_right_paddle(cfg)
        # Serve direction alternates every idle frame
        ball = initial_ball(cfg, angle=math.pi if state.ball.angle == 0 else 0.0)

    status = update_status(cfg, controls.start, left, right, ball, state.status)
    return GameState(left=left, right=right, ball=ball, status=status)


def log_transition(before: GameStatus, after: GameStatus) -> None:
    if after.active and not before.active:
        logger.info("Rally started at %d:%d", after.score_left, after.score_right)
    elif (after.score_left, after.score_right) != (before.score_left, before.score_right):
        side = "left" if after.score_left > before.score_left else "right"
        logger.info("Point to %s, score %d:%d", side, after.score_left, after.score_right)


def run_frames(cfg: Config, state: GameState, read_controls, renderer, ticks) -> GameState:
    """Step and render once per tick; return the last state when ticks run out."""
    for _ in ticks:
        next_state = step(cfg, state, read_controls())
        log_transition(state.status, next_state.status)
        state = next_state
        if renderer is not None:
            renderer.render(state)
    return state
