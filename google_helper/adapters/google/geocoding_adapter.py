"""Google Maps Geocoding API adapter.

A thin pass-through: one blocking GET, JSON decoding, nothing else.
Status interpretation is left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from ...config import GoogleApiConfig, get_config
from ...domain.models import AddressQuery


@dataclass
class GoogleGeocoderAdapter:
    """Geocoder backed by the Google Maps Geocoding API.

    This adapter implements GeocoderPort. No timeout and no retry are
    applied; transport errors surface as requests exceptions.

    Attributes:
        config: Endpoint configuration
        session: HTTP session used for the request
    """

    config: GoogleApiConfig = field(default_factory=lambda: get_config().api)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def build_url(self, key: str, query: AddressQuery) -> str:
        """Full request URL.

        The query string is appended as-is: letting requests encode it
        would turn the "+" separators into literal plus signs.
        """
        return f"{self.config.geocode_url}?address={query.to_query_string()}&key={key}"

    def geocode(self, key: str, query: AddressQuery) -> Dict[str, Any]:
        """Look up an address.

        Args:
            key: Google API key.
            query: Address fragments.

        Returns:
            The decoded JSON body.

        Raises:
            requests.RequestException: On transport or decoding failure.
        """
        self._logger.debug(
            "Geocode request",
            extra={"address": query.to_query_string()},
        )

        response = self.session.get(self.build_url(key, query))
        result = response.json()

        status = result.get("status") if isinstance(result, dict) else None
        self._logger.debug(
            "Geocode response",
            extra={"http_status": response.status_code, "status": status},
        )
        return result
