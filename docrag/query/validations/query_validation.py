"""
Query validation for POST /query.

Everything here runs before any provider call.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages


STRING_LIST_FIELDS = ("documentIds", "documentNames", "tags")
BOOLEAN_FIELDS     = ("useAllDocuments", "rankBySimilarity")





class QueryValidation:

    @staticmethod
    def validate(data):
        """ Validate the complete request body... """

        QueryValidation.validate_body(data)
        QueryValidation.validate_prompt(data.get("prompt"))

        for field in STRING_LIST_FIELDS:
            QueryValidation.validate_string_list(field, data.get(field))

        for field in BOOLEAN_FIELDS:
            QueryValidation.validate_boolean(field, data.get(field))

        QueryValidation.validate_format_directive(data.get("outputFormatDirective"))

        return True


    @staticmethod
    def validate_body(data):
        if not data or not isinstance(data, dict):
            raise ValidationException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )


    @staticmethod
    def validate_prompt(prompt):
        if prompt is None:
            raise ValidationException(
                error_code = "MISSING_PROMPT",
                message = messages.ERROR["MISSING_PROMPT"]
            )

        if not isinstance(prompt, str) or len(prompt.strip()) == 0:
            raise ValidationException(
                error_code = "INVALID_PROMPT",
                message = messages.ERROR["INVALID_PROMPT"]
            )


    @staticmethod
    def validate_string_list(field, value):
        if value is None:
            return

        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValidationException(
                error_code = "INVALID_FIELD",
                message = messages.ERROR["INVALID_STRING_LIST"].format(field = field)
            )


    @staticmethod
    def validate_boolean(field, value):
        if value is not None and not isinstance(value, bool):
            raise ValidationException(
                error_code = "INVALID_FIELD",
                message = messages.ERROR["INVALID_BOOLEAN"].format(field = field)
            )


    @staticmethod
    def validate_format_directive(directive):
        if directive is not None and not isinstance(directive, str):
            raise ValidationException(
                error_code = "INVALID_FIELD",
                message = messages.ERROR["INVALID_FORMAT_DIRECTIVE"]
            )
