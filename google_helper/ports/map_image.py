"""Map image port - Abstraction for downloading static map images.

Implementation: adapters/google/static_map_adapter.py
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import StaticMapRequest


class MapImagePort(Protocol):
    """Port for static map image downloads."""

    def download(self, key: str, request: StaticMapRequest, destination: Path) -> bool:
        """Save the image for a request to a local file.

        Args:
            key: API key of the service.
            request: What to draw.
            destination: File to write, replaced if it exists.

        Returns:
            True if the file was written, False otherwise.
        """
        ...
