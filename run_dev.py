#!/usr/bin/env python3
"""Server runner for the message board."""

import logging
import sys

from dotenv import load_dotenv

from bulletin_board import create_app
from bulletin_board.configs import get_settings
from bulletin_board.errors import BoardError

logger = logging.getLogger("bulletin_board")


def main():
    """Load settings, build the app and start listening."""
    load_dotenv()
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )

    try:
        app = create_app(settings)
    except BoardError as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)

    logger.info("Server start!")
    logger.info(f"Listening on http://{settings.host}:{settings.port}")

    app.run(
        host=settings.host,
        port=settings.port,
        debug=settings.debug,
    )


if __name__ == "__main__":
    main()
