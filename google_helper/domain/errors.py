"""Typed errors for the Google helper.

All errors inherit from GoogleHelperError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GoogleHelperError(Exception):
    """Base error for the helper.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConfigurationError(GoogleHelperError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class MissingApiKeyError(ConfigurationError):
    """No Google API key was supplied."""

    setting_name: str = "key"


@dataclass
class InvalidParametersError(ConfigurationError):
    """Address parameters are missing or empty."""

    setting_name: str = "params"


@dataclass
class GeocodingServiceError(GoogleHelperError):
    """The Geocoding API answered with a non-OK status.

    Attributes:
        status: Status code reported by the service (e.g. ZERO_RESULTS)
        error_message: Optional explanation sent along by the service
    """

    status: str = ""
    error_message: Optional[str] = None
