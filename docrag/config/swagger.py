""" flask-restx Api; namespaces are attached in config/urls.py... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





def docs_path():
    """ Swagger UI path, or False to disable it in production... """

    return False if constants.APP_ENV == "production" else "/swagger/"



api = Api(
    title = constants.SWAGGER_APP_PROPS["name"],
    version = constants.SWAGGER_APP_PROPS["version"],
    description = constants.SWAGGER_APP_PROPS["description"],
    doc = docs_path(),
    catch_all_404s = True
)
