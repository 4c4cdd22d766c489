"""Helpers for the Google Maps Geocoding and Static Maps web services.

    from google_helper import Address
    Address.geo_code(API_KEY, ["1600 Amphitheatre Pkwy", "Mountain View", "CA"])
"""

from .address import Address
from .domain.errors import (
    ConfigurationError,
    GeocodingServiceError,
    GoogleHelperError,
    InvalidParametersError,
    MissingApiKeyError,
)

__all__ = [
    "Address",
    "GoogleHelperError",
    "ConfigurationError",
    "MissingApiKeyError",
    "InvalidParametersError",
    "GeocodingServiceError",
]
