"""
Upload Document Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import PayloadTooLargeException, ValidationException





class UploadDocumentValidation:

    def validate(self, args):
        """
        Validate the uploaded file; reads its bytes once and stores them in args["content"]
        """

        file = args.get('file')

        # -----------------------------------------
        # 🔹 File Presence
        # -----------------------------------------

        if not file:
            raise ValidationException(
                error_code = "NO_FILE_UPLOADED",
                message = messages.ERROR['NO_FILE_UPLOADED']
            )

        filename = file.filename

        if not filename:
            raise ValidationException(
                message = messages.ERROR['INVALID_FILE_NAME']
            )

        # -----------------------------------------
        # 🔹 File Type (MIME type OR extension)
        # -----------------------------------------

        mime_type = (file.mimetype or "").lower()
        extension = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ""

        if mime_type not in constants.ALLOWED_MIME_TYPES and extension not in constants.ALLOWED_EXTENSIONS:
            raise ValidationException(
                error_code = "FILE_TYPE_NOT_SUPPORTED",
                message = messages.ERROR["FILE_TYPE_NOT_SUPPORTED"].format(
                    mime_type = mime_type or "unknown",
                    extension = extension or "none",
                    allowed = ", ".join(sorted(constants.ALLOWED_EXTENSIONS))
                )
            )

        # -----------------------------------------
        # 🔹 File Size
        # -----------------------------------------

        content = file.read()

        if len(content) > constants.MAX_UPLOAD_SIZE_BYTES:
            raise PayloadTooLargeException(
                message = messages.ERROR["FILE_TOO_LARGE"].format(
                    max_mb = constants.MAX_UPLOAD_SIZE_BYTES // (1024 * 1024)
                )
            )

        args["content"] = content

        return True
