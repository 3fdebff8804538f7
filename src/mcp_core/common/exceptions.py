"""
Common exception classes for the command core.

Concrete commands raise these from ``execute``; the command contract maps
any raised fault to a structured response. Each exception carries a
``status_code`` hint that commands may surface through their
``get_status_code`` override.
"""

from __future__ import annotations


class McpCoreError(Exception):
    """Base exception class for all command core errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        status_code: int | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            status_code: Optional status code hint for fault mapping
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code or 500
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "status_code", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class CommandValidationError(McpCoreError):
    """Raised when a command rejects its input during execution."""

    def __init__(
        self, message: str = "Validation failed", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, status_code=400, **kwargs)


class InvalidArgumentError(McpCoreError):
    """Raised when an option value is present but unusable."""

    def __init__(
        self,
        message: str = "Invalid argument",
        option_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=400, **kwargs)
        self.option_name = option_name


class CommandParseError(McpCoreError):
    """Raised when raw tokens cannot be parsed into a parse result."""

    def __init__(
        self,
        message: str = "Error parsing command",
        command_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=400, **kwargs)
        self.command_name = command_name


class AuthenticationError(McpCoreError):
    """Raised when credentials are missing or rejected."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=401, **kwargs)


class ResourceNotFoundError(McpCoreError):
    """Raised when a referenced resource does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=404, **kwargs)
        self.resource_name = resource_name


class ServiceUnavailableError(McpCoreError):
    """Raised when a downstream service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=503, **kwargs)


class ConfigurationError(McpCoreError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, status_code=400, **kwargs)
