"""
Query Handler
API endpoint for asking questions against the stored documents.
"""

# Python Packages
from flask import request
from flask_restx import Namespace, Resource, fields

# Validations
from .validations.query_validation import QueryValidation

# Controller
from .controller import QueryController

# Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespace
query_namespace = Namespace("query", description = "Question answering over selected documents")


query_model = query_namespace.model("QueryRequest", {
    "prompt":                fields.String(required = True, description = "The question"),
    "documentIds":           fields.List(fields.String, description = "Specific document IDs to query against"),
    "documentNames":         fields.List(fields.String, description = "Document names or sources (partial, case-insensitive)"),
    "tags":                  fields.List(fields.String, description = "Query documents with any of these tags"),
    "useAllDocuments":       fields.Boolean(default = False, description = "Use all available documents for context"),
    "rankBySimilarity":      fields.Boolean(default = False, description = "Keep only the selected documents most similar to the prompt"),
    "outputFormatDirective": fields.String(description = "How the answer must be formatted"),
})





# ── POST /query ───────────────────────────────────────────────────────────────
@query_namespace.route("")
class Query(Resource):

    @query_namespace.expect(query_model, validate = False)
    def post(self):
        """
        Ask a question.

        Request:
        {
            "prompt": "What is revenue?",
            "tags":   ["financial"],
            "outputFormatDirective": "One line, number only"
        }

        Provider failures still return 200 with outcome "degraded"
        and confidence 0.
        """

        try:
            data = request.get_json(silent = True)

            QueryValidation.validate(data)

            result = QueryController().ask(data)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
