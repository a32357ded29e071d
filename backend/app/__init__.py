"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.config import AppConfig
from backend.database import init_db
from backend.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or AppConfig.load()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.config["SIMULATOR"] = config
    app.config["DEBUG"] = config.debug

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origins}},
        supports_credentials=True,
    )

    init_db(config.db_path)
    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info("simulator api ready (env=%s, db=%s)", config.environment, config.db_path)
    return app
