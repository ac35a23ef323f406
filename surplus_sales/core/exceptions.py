"""Error types raised by repositories and rendered by the API."""


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500

    def __init__(self, message="An internal error occurred", status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"detail": self.message}


class ValidationError(AppError):
    """Malformed or missing input, detected before any I/O."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message="Resource not found"):
        super().__init__(message)


class ConflictError(AppError):
    status_code = 409


class InternalError(AppError):
    """Database or transport failure."""
    status_code = 500
