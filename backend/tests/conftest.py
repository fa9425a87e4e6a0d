from __future__ import annotations

import pytest

from users_api import create_app
from users_api.config import BaseConfig
from users_api.db.base import Base
from users_api.db.session import EXTENSION_KEY


@pytest.fixture()
def app():
    app = create_app(BaseConfig(DATABASE_URL="sqlite://", BCRYPT_ROUNDS=4))
    app.config["TESTING"] = True
    Base.metadata.create_all(app.extensions[EXTENSION_KEY].engine)
    yield app
    app.extensions[EXTENSION_KEY].engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def engine(app):
    return app.extensions[EXTENSION_KEY].engine

