"""Create the users table for a quick dev setup (NOT for production)."""
from __future__ import annotations

from dotenv import load_dotenv
from loguru import logger

from users_api import create_app
from users_api.db.base import Base
from users_api.db.models import user  # noqa: F401
from users_api.db.session import EXTENSION_KEY


def main() -> None:
    load_dotenv()
    app = create_app()
    engine = app.extensions[EXTENSION_KEY].engine
    Base.metadata.create_all(engine)
    logger.info("Tables created: {}", ", ".join(Base.metadata.tables))


if __name__ == "__main__":
    main()
