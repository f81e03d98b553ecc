"""
Custom exceptions for the charge point E2E suite.

Validation rejections by the application are expected outcomes and are
asserted on directly; the exceptions here cover failures of the harness
itself (unexpected HTTP errors, failed lookups, bad configuration).
"""

from typing import Any, Optional


class ChargePointE2EError(Exception):
    """Base exception for all harness errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# API Exceptions
class ApiError(ChargePointE2EError):
    """Base exception for charge point API errors."""


class ApiResponseError(ApiError, AssertionError):
    """Raised when a call that must succeed gets a non-2xx response."""

    def __init__(
        self,
        method: str,
        url: str,
        status: int,
        body: Any = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize API response error.

        Args:
            method: HTTP method of the failed request.
            url: Requested URL.
            status: HTTP status code returned.
            body: Response body, if any was read.
            details: Optional dictionary with additional error details.
        """
        message = f"{method} {url} failed with status {status}"
        if body:
            message += f": {body}"
        super().__init__(message, details)
        self.method = method
        self.url = url
        self.status = status
        self.body = body


class ChargePointNotFoundError(ApiError):
    """Raised when no charge point has the requested serial number."""

    def __init__(
        self, serial_number: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"No charge point found with serial number '{serial_number}'",
            details,
        )
        self.serial_number = serial_number


# Configuration Exceptions
class ConfigurationError(ChargePointE2EError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason
