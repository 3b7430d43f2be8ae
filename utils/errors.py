# utils/errors.py


class APIError(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code = 500
    message = "Server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(APIError):
    """Request body missing fields or carrying the wrong JSON types."""

    status_code = 400
    message = "Invalid request body"


class NotFoundError(APIError):
    status_code = 404
    message = "Student not found"


class StorageError(APIError):
    """
    Any database-layer fault: connection failure, timeout, server error.

    The caller only ever sees the generic message; the driver exception
    is kept on `cause` for logging.
    """

    status_code = 500
    message = "Database error"

    def __init__(self, operation, cause=None):
        super().__init__()
        self.operation = operation
        self.cause = cause
        self.timed_out = bool(getattr(cause, "timeout", False))
