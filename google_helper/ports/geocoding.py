"""Geocoding port - Abstraction over the geocoding web service.

Implementation: adapters/google/geocoding_adapter.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Protocol

if TYPE_CHECKING:
    from ..domain.models import AddressQuery


class GeocoderPort(Protocol):
    """Port for geocoding services."""

    def geocode(self, key: str, query: AddressQuery) -> Dict[str, Any]:
        """Look up an address and return the decoded service response.

        Args:
            key: API key of the service.
            query: Address fragments to look up.

        Returns:
            The decoded JSON body, whatever its status.
        """
        ...
