"""
Query Controller
Orchestrates between handler and service layer.
"""

# Services
from .services.query_service import QueryRequest, QueryService





class QueryController:

    def __init__(self, query_service: QueryService = None):
        self.query_service = query_service or QueryService()


    def ask(self, payload: dict) -> dict:
        """
        Answer a validated /query body.

        Args:
            payload: {"prompt", "documentIds"?, "documentNames"?, "tags"?,
                      "useAllDocuments"?, "rankBySimilarity"?, "outputFormatDirective"?}

        Returns:
            Dict with the answer and document selection details.
        """

        return self.query_service.answer(QueryRequest.from_payload(payload))
