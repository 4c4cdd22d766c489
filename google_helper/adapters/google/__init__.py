"""Google Maps adapters - Implementations of the ports.

Available implementations:
- GoogleGeocoderAdapter: Geocoding API (GeocoderPort)
- GoogleStaticMapAdapter: Static Maps API (MapImagePort)
"""

from .geocoding_adapter import GoogleGeocoderAdapter
from .static_map_adapter import GoogleStaticMapAdapter

__all__ = ["GoogleGeocoderAdapter", "GoogleStaticMapAdapter"]
