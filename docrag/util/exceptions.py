"""
Application exceptions.

Every handler catches AppException and returns to_dict() with status_code,
so each subclass fixes the HTTP status for one family of failures.
Provider failures during a query are NOT raised as these; they become a
degraded answer instead.
"""





class AppException(Exception):

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None
    ):
        """
        Args:
            error_code (str):  Machine readable code, e.g. FILE_TOO_LARGE
            message (str):     Safe to show to the caller
            status_code (int): HTTP status returned by the handler
            details (str):     Underlying error text, if any
        """

        super().__init__(message)

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details


    def to_dict(self) -> dict:
        body = {"status": "error", "error_code": self.error_code, "message": self.message}

        if self.details:
            body["details"] = self.details

        return body


    def __repr__(self):
        return f"{self.__class__.__name__}({self.error_code!r}, status={self.status_code})"





# --------------------------------------------
# 400 / 404 / 413
# --------------------------------------------

class ValidationException(AppException):
    """ Bad request body or upload; raised before any provider or storage call... """

    def __init__(self, message: str, details: str = None, error_code: str = "VALIDATION_ERROR"):
        super().__init__(error_code, message, status_code = 400, details = details)



class NotFoundException(AppException):

    def __init__(self, message: str = "Resource not found"):
        super().__init__("NOT_FOUND", message, status_code = 404)



class PayloadTooLargeException(AppException):

    def __init__(self, message: str):
        super().__init__("FILE_TOO_LARGE", message, status_code = 413)





# --------------------------------------------
# Service failures
# --------------------------------------------

class ServiceException(AppException):
    """
    A document operation failed in storage, extraction, embedding or the
    database. The status defaults to 400; callers pass 500/502 when the
    fault is on our side or upstream.
    """

    def __init__(self, error_code: str, message: str, details: str = None, status_code: int = 400):
        super().__init__(error_code, message, status_code = status_code, details = details)



class InternalServerException(AppException):
    """ Anything unexpected; the original error only travels in details... """

    def __init__(self, details: str = None):
        super().__init__(
            "INTERNAL_SERVER_ERROR",
            "Something went wrong. Please try again later.",
            status_code = 500,
            details = details
        )



class ConfigurationException(AppException):
    """ Settings that make the service unusable; raised while the app starts... """

    def __init__(self, error_code: str, message: str):
        super().__init__(error_code, message, status_code = 500)
