"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask

from .config import BaseConfig
from .db.session import Database
from .api.health.routes import bp as health_bp
from .api.users.routes import bp as users_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .log import register_access_log


def create_app(config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Connects to the database before returning; a failed connection or ping
    raises ``FatalStartupError`` and no app is produced.
    """
    app = Flask(__name__)
    app.config.from_object(config or BaseConfig())
    app.json.sort_keys = False

    # The store is owned by this app instance and reached through app.extensions.
    Database().init_app(app)

    app.register_blueprint(health_bp, url_prefix="/health")
    app.register_blueprint(users_bp, url_prefix="/users")
    app.register_blueprint(docs_bp)

    register_error_handlers(app)
    register_access_log(app)
    return app
