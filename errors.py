class ContentError(Exception):
    """Base error; `status_code` is what the API answers with."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class ValidationError(ContentError):
    status_code = 400


class AuthError(ContentError):
    status_code = 401


class NotFoundError(ContentError):
    status_code = 404


class StorageError(ContentError):
    status_code = 500
