"""Immutable value objects for Google Maps requests.

All models are frozen dataclasses with slots. The geocode response
itself is not modeled: it is handed back to callers as decoded JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .errors import InvalidParametersError


@dataclass(frozen=True, slots=True)
class AddressQuery:
    """Ordered address fragments such as street, city and zip.

    Attributes:
        fragments: The fragments in the order they should appear
    """

    fragments: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.fragments:
            raise InvalidParametersError("Error no valid parameters set")

    @classmethod
    def from_params(
        cls, params: Optional[Union[Iterable[str], Mapping[str, str]]]
    ) -> AddressQuery:
        """Build a query from any iterable of fragments.

        None and empty input are rejected. A mapping such as
        {"street": ..., "city": ...} contributes its values, in order.
        """
        if not params:
            raise InvalidParametersError("Error no valid parameters set")
        if isinstance(params, str):
            params = [params]
        elif isinstance(params, Mapping):
            params = params.values()
        return cls(fragments=tuple(str(p) for p in params))

    def to_query_string(self) -> str:
        """Join fragments with ", " and swap spaces for "+".

        Nothing else is escaped.
        """
        return ", ".join(self.fragments).replace(" ", "+")


@dataclass(frozen=True, slots=True)
class StaticMapRequest:
    """Parameters of a single Static Maps image with one marker.

    Attributes:
        address: Address the marker is placed on
        width: Image width in pixels
        height: Image height in pixels
        color: Marker color (red, blue, 0xFFAA00...)
        zoom: Zoom level
        format: Image format (jpg, png, gif...)
        map_type: roadmap, satellite, terrain or hybrid
    """

    address: str
    width: int
    height: int
    color: str = "red"
    zoom: int = 13
    format: str = "jpg"
    map_type: str = "roadmap"

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def markers(self) -> str:
        return f"color:{self.color}|{self.address}"

    def to_params(self, api_key: str) -> Dict[str, str]:
        """Query parameters for the staticmap endpoint."""
        return {
            "zoom": str(self.zoom),
            "size": self.size,
            "maptype": self.map_type,
            "format": self.format,
            "markers": self.markers,
            "key": api_key,
        }
