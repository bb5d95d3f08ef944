""" SQLAlchemy setup for the document store... """

# Python Packages
from flask_sqlalchemy import SQLAlchemy

# Constants
from ..base import constants





class Database:
    """
    Connection settings.

    DATABASE_URL, when set, is used as-is (tests run on sqlite://).
    Otherwise a PostgreSQL URI is assembled from the DB_* variables.
    """

    def __init__(self, url: str = None):
        self.url = url if url is not None else constants.DATABASE_URL


    @property
    def uri(self) -> str:
        if self.url:
            return self.url

        return (
            f"postgresql://{constants.DB_USER}:{constants.DB_PASSWORD}"
            f"@{constants.DB_HOST}:{constants.DB_PORT}/{constants.DB_NAME}"
        )


    @property
    def is_sqlite(self) -> bool:
        return self.uri.startswith("sqlite")


    def engine_options(self) -> dict:
        # Server databases drop idle connections; sqlite has no pool to check
        if self.is_sqlite:
            return {}

        return {"pool_pre_ping": True, "pool_recycle": 1800}



# Shared by every model and store
db = SQLAlchemy()


def init_db(app, database: Database = None):
    database = database or Database()

    app.config.setdefault("SQLALCHEMY_DATABASE_URI", database.uri)
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", database.engine_options())
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    db.init_app(app)
