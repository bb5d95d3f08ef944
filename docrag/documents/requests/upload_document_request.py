"""
Upload Document Request Definition
Handles:
    - file (multipart upload)
    - tags (form-data; JSON array or comma separated list)
"""

# Python Packages
import json
from flask import request as flask_request
from werkzeug.exceptions import RequestEntityTooLarge

# Constants
from ...base import constants

# Exceptions
from ...util.exceptions import PayloadTooLargeException, ValidationException

# App Messages
from ...util import messages





class UploadDocumentRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)

            func = namespace.param(
                'file',
                'Document (txt, md, csv, pdf, doc, docx)',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            func = namespace.param(
                'tags',
                'Tags as a JSON array ["a","b"] or "a, b"',
                _in = 'formData',
                required = False
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        # Werkzeug enforces MAX_CONTENT_LENGTH while parsing the form
        try:
            file = flask_request.files.get("file")
            raw_tags = flask_request.form.get("tags")

        except RequestEntityTooLarge:
            raise PayloadTooLargeException(
                message = messages.ERROR["FILE_TOO_LARGE"].format(
                    max_mb = constants.MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
                )
            )

        return {
            "file": file,
            "tags": UploadDocumentRequest.parse_tags(raw_tags)
        }


    @staticmethod
    def parse_tags(raw):
        """
        JSON array first, comma separated list as the fallback

        Returns:
            list[str]
        """

        if raw is None or not raw.strip():
            return []

        try:
            tags = json.loads(raw)
        except ValueError:
            tags = raw.split(",")

        if isinstance(tags, str):
            tags = [tags]

        elif not isinstance(tags, list):
            # "2024" parses as a JSON number; treat it as a plain tag list
            tags = raw.split(",")

        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValidationException(
                error_code = "INVALID_TAGS",
                message = messages.ERROR["INVALID_TAGS"]
            )

        return [tag.strip() for tag in tags if tag.strip()]
