"""Core exception hierarchy for the intake management application.

Domain-specific exceptions raised by the prompt, configuration and SDK
layers so callers can tell static misconfiguration apart from HTTP faults.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "IntakeOffError",
    "ConfigurationError",
    "ServiceNotFoundError",
    "PromptError",
    "UnknownTemplateError",
    "SDKError",
    "APIRequestError",
    "APIConnectionError",
]


class IntakeOffError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:  # pragma: no cover – thin wrapper
        return self.message


class ConfigurationError(IntakeOffError):
    """Raised when configuration is invalid or missing."""


class ServiceNotFoundError(IntakeOffError):
    """Raised when a requested service is not registered in the container."""


class PromptError(IntakeOffError):
    """Base exception for prompt template errors."""


class UnknownTemplateError(PromptError):
    """Raised when a symbolic template name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown prompt template '{name}'",
            error_code="unknown_template",
            context={"name": name},
        )
        self.name = name


class SDKError(IntakeOffError):
    """Base exception for API client errors."""


class APIRequestError(SDKError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, *, url: Optional[str] = None) -> None:
        super().__init__(
            f"HTTP error! status: {status_code}",
            error_code="http_error",
            context={"status_code": status_code, "url": url},
        )
        self.status_code = status_code
        self.url = url


class APIConnectionError(SDKError):
    """Raised when the API cannot be reached at all."""
