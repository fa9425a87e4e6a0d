"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from flask import Flask, current_app
from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..errors import FatalStartupError

EXTENSION_KEY = "users_api.db"


class Database:
    """Owns the connection pool and the per-thread session registry."""

    def __init__(self) -> None:
        self.engine = None
        self.Session = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        echo: bool = app.config.get("SQL_ECHO", False)

        engine_kwargs: dict = {"echo": echo, "future": True}
        if url.startswith("sqlite"):
            # One shared connection so in-memory databases survive across sessions.
            engine_kwargs.update(
                {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
            )
        else:
            engine_kwargs.update(
                {
                    "pool_size": app.config.get("POOL_SIZE", 10),
                    "max_overflow": app.config.get("MAX_OVERFLOW", 20),
                }
            )

        try:
            self.engine = create_engine(url, **engine_kwargs)
            self.ping()
        except SQLAlchemyError as e:
            logger.error("Database connection failed: {}", e)
            raise FatalStartupError(str(e)) from e

        logger.info("Connected to database {}", self.engine.url.render_as_string(hide_password=True))

        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False, future=True)
        )
        app.extensions[EXTENSION_KEY] = self

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()

    def ping(self) -> None:
        assert self.engine is not None, "Engine is not initialized"
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))


def get_db() -> Database:
    db = current_app.extensions.get(EXTENSION_KEY)
    assert db is not None and db.Session is not None, "DB session is not initialized"
    return db
