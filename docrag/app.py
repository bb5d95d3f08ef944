"""
DocRAG application factory.

Run with `flask --app docrag.app run` or `python -m docrag.app`.
"""

# Python Packages
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
from loguru import logger

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db
from .util.logger import setup_logger
from .vendors.factory import validate_provider_settings


# Headroom over the file limit for the multipart envelope and the tags field
MULTIPART_OVERHEAD_BYTES = 1024 * 1024





def create_app(overrides: dict = None):
    """
    Args:
        overrides: Extra Flask config applied last
    """

    setup_logger()

    # Fails fast on a bad AI_PROVIDER or a missing provider key
    validate_provider_settings()

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY = constants.APP_SECRET_KEY,
        DEBUG = constants.APP_ENV == "development",
        MAX_CONTENT_LENGTH = constants.MAX_UPLOAD_SIZE_BYTES + MULTIPART_OVERHEAD_BYTES,
        RESTX_MASK_SWAGGER = False
    )

    if overrides:
        app.config.update(overrides)

    _register_extensions(app)

    logger.info(f"🚀 {constants.SWAGGER_APP_PROPS['name']} ready ({constants.APP_ENV}, provider={constants.AI_PROVIDER})")

    return app



def _register_extensions(app: Flask):
    # Database + migrations (models must be imported before Migrate sees the metadata)
    init_db(app)

    from . import models

    Migrate(app, db)

    CORS(app)

    # Swagger + routes
    api.init_app(app)
    URLs.add_namespaces()



# Module level instance for the Flask CLI and WSGI servers
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000, threaded = True)
