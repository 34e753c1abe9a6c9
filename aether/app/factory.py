from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from aether.app.config import Config
from aether.app.extensions import db, migrate, cors
from aether.app.common.errors import ApiError, error_payload
from aether.app.common.request_context import current_request_id, init_request_id
from aether.app.api.register import register_blueprints
from aether.app.cli import cli_bp
from aether.modules.catalog.provider import CatalogSource, init_catalog


def create_app(config_object: type[Config] = Config, catalog_source: Optional[CatalogSource] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Catalog is read once, on the first page that needs it
    init_catalog(app, catalog_source)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    # Health endpoint (for Docker)
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_blueprints(app)

    # CLI (flask init-db, flask seed)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(current_request_id())), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape
        payload = error_payload("http_error", err.description, {"name": err.name}, current_request_id())
        return jsonify(payload), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = error_payload("internal_error", "Internal server error", {}, current_request_id())
        return jsonify(payload), 500

    return app
