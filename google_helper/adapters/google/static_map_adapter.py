"""Google Static Maps adapter.

Downloads a rendered map image straight to disk. Failures are logged
and reported through the return value instead of being raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import requests

from ...config import GoogleApiConfig, StaticMapConfig, get_config
from ...domain.models import StaticMapRequest


@dataclass
class GoogleStaticMapAdapter:
    """Static map downloader implementing MapImagePort.

    Attributes:
        config: Endpoint configuration
        map_config: Download settings (chunk size)
        session: HTTP session used for the download
    """

    config: GoogleApiConfig = field(default_factory=lambda: get_config().api)
    map_config: StaticMapConfig = field(
        default_factory=lambda: get_config().static_map
    )
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def download(self, key: str, request: StaticMapRequest, destination: Path) -> bool:
        """Save the image for a request to a local file.

        Any existing file at destination is removed first. The bytes are
        not checked to be an image.

        Args:
            key: Google API key.
            request: Map parameters.
            destination: Target file.

        Returns:
            True if the image was written, False otherwise.
        """
        destination = Path(destination)
        if destination.exists():
            destination.unlink()
            self._logger.debug(
                "Removed previous map image",
                extra={"destination": str(destination)},
            )

        self._logger.info(
            "Downloading static map",
            extra={
                "address": request.address,
                "size": request.size,
                "destination": str(destination),
            },
        )

        try:
            with self.session.get(
                self.config.staticmap_url,
                params=request.to_params(key),
                stream=True,
            ) as response:
                response.raise_for_status()
                with destination.open("wb") as fh:
                    for chunk in response.iter_content(
                        chunk_size=self.map_config.chunk_size
                    ):
                        fh.write(chunk)
        except (requests.RequestException, OSError) as e:
            self._logger.warning(
                "Static map download failed",
                extra={"destination": str(destination), "error": str(e)},
            )
            destination.unlink(missing_ok=True)
            return False

        return True
