"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from interest_calculator.app.api.routes import api_bp
from interest_calculator.config import CORS_ORIGINS, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send the package's log records to stderr at ``level``."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> Flask:
    """Build the Flask app instance."""
    configure_logging()
    app = Flask(__name__)

    CORS(
        app,
        resources={r"/api/*": {"origins": CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
