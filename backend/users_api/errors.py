"""Error taxonomy, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(ApiError):
    status = 400


class NotFoundError(ApiError):
    status = 404


class DependencyError(ApiError):
    """A collaborator (hasher, database) failed; the message is passed through."""

    status = 500


class HashError(DependencyError):
    pass


class StoreError(DependencyError):
    pass


class FatalStartupError(Exception):
    """The database could not be reached before serving; the process must exit."""


def error(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def api_error(err: ApiError):  # type: ignore[override]
        if isinstance(err, DependencyError):
            logger.warning("{}: {}", type(err).__name__, err.message)
        return error(err.message, err.status)

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):  # type: ignore[override]
        return error(err.description or err.name, err.code or 500)

    @app.errorhandler(Exception)
    def internal(err: Exception):  # type: ignore[override]
        logger.exception("Unhandled error")
        return error(str(err), 500)


def ok(data: Any, status: int = 200):
    return jsonify(data), status
