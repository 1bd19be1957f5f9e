"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InputValidationError(ApplicationError):
    """Raised when operator input fails a local check before any request."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message, code="VAL_INPUT_INVALID")


class AuthenticationError(ApplicationError):
    """Raised when a URL operation is attempted without a user identity."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class ConfigurationError(ApplicationError):
    """Raised when a configuration file is missing keys or has bad values."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIG_INVALID")
