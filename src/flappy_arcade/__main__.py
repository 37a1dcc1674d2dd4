"""
Entry point: python -m flappy_arcade

Environment:
    FLAPPY_ASSETS  directory with bird.png, ground.png and cloud.png
    FLAPPY_DEBUG   "true" for debug logging
"""

import logging
import os
import sys

from .constants import DEFAULT_ASSET_DIR


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def main() -> None:
    debug = os.getenv("FLAPPY_DEBUG", "false").lower() == "true"
    setup_logging(debug)
    logger = logging.getLogger(__name__)

    from .client import FlappyClient

    try:
        FlappyClient(asset_dir=os.getenv("FLAPPY_ASSETS", DEFAULT_ASSET_DIR)).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
