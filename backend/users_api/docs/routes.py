"""Docs blueprint: the OpenAPI document and a Swagger UI page that renders it."""
from __future__ import annotations

from flask import Blueprint, Response, jsonify, render_template_string, url_for

from .openapi import API_TITLE, API_VERSION, build_openapi

bp = Blueprint("docs", __name__)

SWAGGER_UI_VERSION = "5"

_swagger_template = """<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>{{ title }} {{ version }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui.css" />
  <style>body{margin:0;} #swagger-ui{height:100vh;}</style>
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{{ ui_version }}/swagger-ui-bundle.js"></script>
  <script>window.ui = SwaggerUIBundle({ url: {{ spec_url|tojson }}, dom_id: '#swagger-ui' });</script>
</body>
</html>
"""


@bp.get("/openapi.json")
def openapi_json() -> Response:
    return jsonify(build_openapi())


@bp.get("/docs")
def swagger_ui() -> Response:
    html = render_template_string(
        _swagger_template,
        title=API_TITLE,
        version=API_VERSION,
        ui_version=SWAGGER_UI_VERSION,
        spec_url=url_for("docs.openapi_json"),
    )
    return Response(html, mimetype="text/html")
