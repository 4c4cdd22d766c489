"""Address helpers for the Google Maps web services.

Usage:
    from google_helper import Address

    result = Address.geo_code(API_KEY, ["1600 Amphitheatre Pkwy", "Mountain View", "CA"])
    location = result["results"][0]["geometry"]["location"]

    Address.save_image_address(API_KEY, "Mountain View, CA", 640, 480, "map.jpg")

Status codes: https://developers.google.com/maps/documentation/geocoding/requests-geocoding#StatusCodes
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .adapters.google import GoogleGeocoderAdapter, GoogleStaticMapAdapter
from .config import get_config
from .domain.errors import GeocodingServiceError, MissingApiKeyError
from .domain.models import AddressQuery, StaticMapRequest
from .ports.geocoding import GeocoderPort
from .ports.map_image import MapImagePort

logger = logging.getLogger(__name__)

OK_STATUS = "OK"


class Address:
    """Static-style entry points over the geocoding and static map adapters.

    The adapters are class attributes so tests (or callers) can swap
    them with anything satisfying GeocoderPort / MapImagePort. The
    default adapters are created on first use and keep their HTTP
    session open for the life of the process; call close() to release
    them.
    """

    geocoder: Optional[GeocoderPort] = None
    map_images: Optional[MapImagePort] = None

    @classmethod
    def _geocoder(cls) -> GeocoderPort:
        if cls.geocoder is None:
            cls.geocoder = GoogleGeocoderAdapter()
        return cls.geocoder

    @classmethod
    def _map_images(cls) -> MapImagePort:
        if cls.map_images is None:
            cls.map_images = GoogleStaticMapAdapter()
        return cls.map_images

    @classmethod
    def close(cls) -> None:
        """Close the HTTP sessions of the adapters in use and forget them."""
        for adapter in (cls.geocoder, cls.map_images):
            closer = getattr(adapter, "close", None)
            if closer is not None:
                closer()
        cls.geocoder = None
        cls.map_images = None

    @staticmethod
    def prepare_query_string(
        params: Optional[Union[Iterable[str], Mapping[str, str]]],
    ) -> str:
        """Make a query string Google will accept.

        >>> Address.prepare_query_string(["1600 Amphitheatre Pkwy", "Mountain View", "CA"])
        '1600+Amphitheatre+Pkwy,+Mountain+View,+CA'

        Raises:
            InvalidParametersError: If params is empty or None.
        """
        return AddressQuery.from_params(params).to_query_string()

    @classmethod
    def geo_code(
        cls,
        key: Optional[str] = None,
        params: Optional[Union[Iterable[str], Mapping[str, str]]] = None,
        exception: bool = True,
    ) -> Dict[str, Any]:
        """Load address info based on basic address data.

        Args:
            key: Google API key.
            params: Address fragments such as street, city and zip.
            exception: Raise when the service status is not OK. When
                False the decoded response is returned whatever its status.

        Returns:
            The decoded response: "status", "results" with
            "address_components", "formatted_address", "geometry", ...

        Raises:
            MissingApiKeyError: If no key is given.
            InvalidParametersError: If params is empty.
            GeocodingServiceError: On a non-OK status with exception=True.
            requests.RequestException: If the request itself fails.
        """
        if not key:
            raise MissingApiKeyError("No Google API Key is set")

        query = AddressQuery.from_params(params)
        result = cls._geocoder().geocode(key, query)

        body = result if isinstance(result, dict) else {}
        status = body.get("status")
        if status != OK_STATUS and exception:
            error_message = body.get("error_message")
            logger.warning(
                "Geocoding API returned an error status",
                extra={"status": status, "error_message": error_message},
            )
            raise GeocodingServiceError(
                f"Google API Error: {status}, {error_message}"
                if error_message
                else f"Google API Error: {status}",
                status=str(status),
                error_message=error_message,
            )

        return result

    @classmethod
    def save_image_address(
        cls,
        api_key: str,
        address: str,
        width: int,
        height: int,
        destination: Union[str, Path],
        color: Optional[str] = None,
        zoom: Optional[int] = None,
        format: Optional[str] = None,
        map_type: Optional[str] = None,
    ) -> Union[str, Path, bool]:
        """Save a map image for an address with a marker.

        Styling arguments left to None fall back to the configured
        defaults (red marker, zoom 13, jpg, roadmap).

        Returns:
            destination on success, False if the image could not be saved.
        """
        defaults = get_config().static_map
        request = StaticMapRequest(
            address=address,
            width=width,
            height=height,
            color=color if color is not None else defaults.color,
            zoom=zoom if zoom is not None else defaults.zoom,
            format=format if format is not None else defaults.format,
            map_type=map_type if map_type is not None else defaults.map_type,
        )

        if not cls._map_images().download(api_key, request, Path(destination)):
            return False
        return destination
