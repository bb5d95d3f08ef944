"""
File: Document Routes

Handles:
    - Upload Document (multipart)
    - Add Documents (JSON batch)
    - List / View / Get Documents
    - Delete Document / Clear Documents
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource, fields

# Request
from .requests.upload_document_request import UploadDocumentRequest

# Validations
from .validations.upload_document_validation import UploadDocumentValidation
from .validations.add_documents_validation import AddDocumentsValidation

# Controller
from .controller import DocumentsController

# Errors & Exceptions
from ..util import messages
from ..util.exceptions import AppException, InternalServerException

# Namespaces
documents_namespace = Namespace('documents', description = 'Document Management APIs')


document_metadata_model = documents_namespace.model("DocumentMetadata", {
    "source": fields.String(required = True, description = "Document name / source label"),
    "tags":   fields.List(fields.String, description = "Tags used for selection")
})

document_model = documents_namespace.model("DocumentInput", {
    "id":       fields.String(description = "Optional id; generated when omitted"),
    "content":  fields.String(required = True),
    "metadata": fields.Nested(document_metadata_model, required = True)
})

add_documents_model = documents_namespace.model("AddDocumentsRequest", {
    "documents": fields.List(fields.Nested(document_model), required = True)
})





@documents_namespace.route('/upload')
class UploadDocument(Resource):

    @UploadDocumentRequest.apply(documents_namespace)
    def post(self):
        """
        Upload a file (txt, md, csv, pdf, doc, docx) with optional tags
        """

        try:
            # Args
            args = UploadDocumentRequest.get_data()

            # Validations
            UploadDocumentValidation().validate(args)

            # Controller
            result = DocumentsController().upload_document(args)

            return {
                "status": "success",
                "message": messages.SUCCESS["DOCUMENT_UPLOADED"].format(file_name = args["file"].filename),
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@documents_namespace.route('')
class Documents(Resource):

    def get(self):
        """
        Lightweight document list for choosing documentIds / documentNames / tags
        """

        try:
            result = DocumentsController().list_documents()

            return {
                "status": "success",
                "message": messages.SUCCESS["DOCUMENTS_LISTED"].format(count = result["totalDocuments"]),
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @documents_namespace.expect(add_documents_model, validate = False)
    def post(self):
        """
        Add documents as JSON; each one is embedded and stored
        """

        try:
            data = request.get_json(silent = True)

            AddDocumentsValidation().validate(data)

            result = DocumentsController().add_documents(data)

            return {
                "status": "success",
                "message": messages.SUCCESS["DOCUMENTS_ADDED"].format(count = result["documentsAdded"]),
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self):
        """
        Delete every document
        """

        try:
            result = DocumentsController().clear_documents()

            return {
                "status": "success",
                "message": result["message"],
                "data": {"deleted": result["deleted"]}
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@documents_namespace.route('/view')
class ViewDocuments(Resource):

    def get(self):
        """
        Every document with full file / content details and a summary
        """

        try:
            result = DocumentsController().view_documents()

            return {
                "status": "success",
                "message": messages.SUCCESS["DOCUMENTS_FOUND"].format(count = result["summary"]["total_documents"]),
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@documents_namespace.route('/<string:document_id>')
class DocumentById(Resource):

    def get(self, document_id):
        """
        One document, including its full content
        """

        try:
            result = DocumentsController().get_document(document_id)

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, document_id):
        """
        Delete one document and its stored file
        """

        try:
            result = DocumentsController().delete_document(document_id)

            return {
                "status": "success",
                "message": result["message"],
                "data": {"document_id": result["document_id"]}
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
