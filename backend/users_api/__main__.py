"""Entry point: ``python -m users_api`` or the ``users-api`` script."""
from __future__ import annotations

import sys

from dotenv import load_dotenv
from loguru import logger

from . import create_app
from .config import BaseConfig
from .errors import FatalStartupError
from .log import configure_logging


def main() -> None:
    load_dotenv()
    config = BaseConfig()
    configure_logging(config.LOG_LEVEL)
    try:
        app = create_app(config)
    except FatalStartupError as e:
        logger.critical("Refusing to start: {}", e)
        sys.exit(1)
    logger.info("Listening on {}:{}", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, threaded=True)


if __name__ == "__main__":
    main()
