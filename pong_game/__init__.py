from .config import Config
from .entities import Ball, GameState, GameStatus, Paddle
from .physics import Collision

__all__ = ["Ball", "Collision", "Config", "GameState", "GameStatus", "Paddle"]
