"""
Application factory
"""

# Python Packages
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import build_api
from .config.urls import URLs
from .config.database import init_db, db
from .config.celery_app import celery_init_app
from .util.logger import init_app_logger





def create_app(config_overrides: dict = None):
    """
    Application Factory

    Args:
        config_overrides: Values applied to app.config before any extension
                          reads it (tests pass an in-memory database and
                          eager Celery here).
    """

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY

    if config_overrides:
        app.config.update(config_overrides)

    # Logging
    logger = init_app_logger(constants)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app)

    # Initialize Swagger
    api = build_api()
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces(api)

    # Background tasks
    celery_init_app(app)
    from .bot.tasks import message_tasks

    @app.route("/health")
    def health():
        return {"status": "ok", "service": constants.SWAGGER_APP_PROPS["name"]}, 200

    logger.info(f"🚀 {constants.SWAGGER_APP_PROPS['name']} ready ({constants.APP_ENV})")
    return app



if __name__ == "__main__":
    create_app().run(host = "0.0.0.0", port = 5000)
