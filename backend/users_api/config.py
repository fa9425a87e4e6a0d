"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import quote_plus


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _mysql_url() -> str:
    # Missing credentials are not an error here; the connection attempt fails instead.
    return "mysql+pymysql://{}:{}@{}/{}".format(
        quote_plus(_env("DB_USER")),
        quote_plus(_env("DB_PASSWORD")),
        _env("DB_HOST"),
        _env("DB_NAME"),
    )


@dataclass
class BaseConfig:
    # Database
    DB_USER: str = field(default_factory=lambda: _env("DB_USER"))
    DB_PASSWORD: str = field(default_factory=lambda: _env("DB_PASSWORD"))
    DB_HOST: str = field(default_factory=lambda: _env("DB_HOST"))
    DB_NAME: str = field(default_factory=lambda: _env("DB_NAME"))
    DATABASE_URL: str = field(default_factory=lambda: _env("DATABASE_URL") or _mysql_url())
    SQL_ECHO: bool = field(default_factory=lambda: _env("SQL_ECHO", "false").lower() == "true")
    POOL_SIZE: int = field(default_factory=lambda: int(_env("POOL_SIZE", "10")))
    MAX_OVERFLOW: int = field(default_factory=lambda: int(_env("MAX_OVERFLOW", "20")))

    # Passwords
    BCRYPT_ROUNDS: int = field(default_factory=lambda: int(_env("BCRYPT_ROUNDS", "10")))

    # Server
    HOST: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: int(_env("PORT") or "3000"))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
