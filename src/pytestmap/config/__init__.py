"""Config module exports."""

from pytestmap.config.loader import PytestMapSettings, load_config
from pytestmap.config.models import (
    DiscoveryConfig,
    LoggingConfig,
    LogOutputConfig,
    PytestMapConfig,
)

__all__ = [
    "load_config",
    "PytestMapConfig",
    "PytestMapSettings",
    "DiscoveryConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
