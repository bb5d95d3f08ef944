"""
System Handler
Health and statistics endpoints, mounted at the API root.
"""

# Python Packages
from flask_restx import Namespace, Resource

# Controller
from .controller import SystemController

# Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespace
system_namespace = Namespace("system", description = "Health and statistics", path = "/")





# ── GET /health ───────────────────────────────────────────────────────────────
@system_namespace.route("/health")
class Health(Resource):

    def get(self):
        """ Service banner and configured models... """

        return {"status": "success", "data": SystemController().health()}, 200



# ── GET /stats ────────────────────────────────────────────────────────────────
@system_namespace.route("/stats")
class Stats(Resource):

    def get(self):
        """ Document totals and current rate-limit window... """

        try:
            return {"status": "success", "data": SystemController().stats()}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
