"""
Documents Controller

Handles:
    - Orchestration between handler and service layer
"""

# Services
from .services.upload_document_service import UploadDocumentService
from .services.add_documents_service import AddDocumentsService
from .services.list_documents_service import ListDocumentsService
from .services.delete_document_service import DeleteDocumentService





class DocumentsController:

    def upload_document(self, args: dict) -> dict:
        """
        Upload one file and store it as a document

        Args:
            args (dict):
                {
                    "file": FileStorage,
                    "content": bytes,
                    "tags": list[str]
                }
        """

        return UploadDocumentService().upload(args)



    def add_documents(self, data: dict) -> dict:
        """
        Add a JSON batch of documents

        Args:
            data (dict): {"documents": [...]}
        """

        return AddDocumentsService().add_documents(data["documents"])



    def list_documents(self) -> dict:
        return ListDocumentsService().list_documents()



    def view_documents(self) -> dict:
        return ListDocumentsService().view_documents()



    def get_document(self, document_id: str) -> dict:
        return ListDocumentsService().get_document(document_id)



    def delete_document(self, document_id: str) -> dict:
        return DeleteDocumentService().delete_document(document_id)



    def clear_documents(self) -> dict:
        return DeleteDocumentService().clear_documents()
