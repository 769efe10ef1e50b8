import logging

from .app import PongGame
from .logging_config import setup_logging

logger = logging.getLogger("pong_game")


def main():
    setup_logging()
    logger.debug("Logging at %s", logging.getLevelName(logger.level))
    try:
        PongGame().run()
    except Exception:
        logger.exception("Game crashed")
        raise


if __name__ == "__main__":
    main()
