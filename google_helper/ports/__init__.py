"""Ports layer - Protocols between the helper and the outside world.

Adapters implementing these protocols can be swapped in tests or
pointed at another provider.
"""

from .geocoding import GeocoderPort
from .map_image import MapImagePort

__all__ = [
    "GeocoderPort",
    "MapImagePort",
]
