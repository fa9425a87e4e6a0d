"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.users.schemas import ErrorOut, UserCreateIn, UserCreatedOut, UserOut

API_TITLE = "Users API"
API_VERSION = "1.0.0"


def _ref(name: str) -> Dict[str, str]:
    return {"$ref": f"#/components/schemas/{name}"}


def _json(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


def _error(description: str) -> Dict[str, Any]:
    return {"description": description, "content": _json(_ref("ErrorOut"))}


def _schemas() -> Dict[str, Any]:
    tpl = "#/components/schemas/{model}"
    return {
        "UserCreateIn": UserCreateIn.model_json_schema(ref_template=tpl),
        "UserCreatedOut": UserCreatedOut.model_json_schema(ref_template=tpl),
        "UserOut": UserOut.model_json_schema(ref_template=tpl, mode="serialization"),
        "ErrorOut": ErrorOut.model_json_schema(ref_template=tpl),
    }


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    return {
        "openapi": "3.0.3",
        "info": {"title": API_TITLE, "version": API_VERSION},
        "servers": [{"url": base_url}],
        "tags": [
            {"name": "Health"},
            {"name": "Users"},
        ],
        "paths": {
            "/health": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/users": {
                "get": {
                    "tags": ["Users"], "summary": "List users",
                    "responses": {
                        "200": {"description": "OK", "content": _json({"type": "array", "items": _ref("UserOut")})},
                        "500": _error("Database failure"),
                    },
                },
                "post": {
                    "tags": ["Users"], "summary": "Create user",
                    "requestBody": {"required": True, "content": _json(_ref("UserCreateIn"))},
                    "responses": {
                        "201": {"description": "Created", "content": _json(_ref("UserCreatedOut"))},
                        "400": _error("Malformed body"),
                        "500": _error("Hashing or database failure"),
                    },
                },
            },
            "/users/{user_id}": {
                "parameters": [{"name": "user_id", "in": "path", "required": True, "schema": {"type": "integer"}}],
                "get": {
                    "tags": ["Users"], "summary": "Get user by id",
                    "responses": {
                        "200": {"description": "OK", "content": _json(_ref("UserOut"))},
                        "404": _error("User not found"),
                        "500": _error("Database failure"),
                    },
                },
            },
        },
        "components": {"schemas": _schemas()},
    }
