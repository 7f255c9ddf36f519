"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from compound_calc import config
from compound_calc.app.api.routes import api_bp


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(format=config.LOG_FORMAT, level=level)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    configure_logging()

    app = Flask(__name__)
    app.config["CORS_ORIGINS"] = config.CORS_ORIGINS
    if overrides:
        app.config.update(overrides)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
