from typing import Optional


class AppError(Exception):
    status_code = 500
    code = "internal_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class ValidationError(AppError):
    status_code = 400
    code = "validation_error"


class Unauthorized(AppError):
    status_code = 401
    code = "unauthorized"


class InvalidTokenError(Unauthorized):
    code = "invalid_token"

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(Unauthorized):
    code = "token_expired"

    def __init__(self, message: str = "Token expired") -> None:
        super().__init__(message)


class Forbidden(AppError):
    status_code = 403
    code = "forbidden"


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class Conflict(AppError):
    status_code = 409
    code = "conflict"


class InternalConfigurationError(AppError):
    """Server secrets are missing; the caller only sees a generic message."""

    code = "server_misconfigured"

    def __init__(self, message: str = "Server configuration error") -> None:
        super().__init__(message)


class InternalStorageError(AppError):
    code = "storage_error"
