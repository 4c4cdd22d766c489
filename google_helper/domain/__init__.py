"""Domain layer - Value objects and errors.

No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GeocodingServiceError,
    GoogleHelperError,
    InvalidParametersError,
    MissingApiKeyError,
)
from .models import AddressQuery, StaticMapRequest

__all__ = [
    # Models
    "AddressQuery",
    "StaticMapRequest",
    # Errors
    "GoogleHelperError",
    "ConfigurationError",
    "MissingApiKeyError",
    "InvalidParametersError",
    "GeocodingServiceError",
]
