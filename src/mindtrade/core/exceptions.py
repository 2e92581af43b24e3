"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class AuthenticationError(AppError):
    """Raised when a write is attempted without a signed-in user."""

    status_code = 401

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class ConfigurationError(AppError):
    """Raised when a required secret or setting is missing."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class RemoteCallError(AppError):
    """Raised when an outbound call to a third-party API fails."""

    status_code = 502

    def __init__(self, service: str, detail: str):
        self.service = service
        super().__init__(f"{service} request failed: {detail}", code="REMOTE_CALL_FAILED")
