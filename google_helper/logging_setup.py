"""Logging bootstrap for applications embedding the helper."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging configuration to the root logger.

    Args:
        config: Optional override, defaults to the global configuration.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
    logging.getLogger(__name__).debug(
        "Logging configured", extra={"level": config.level}
    )
