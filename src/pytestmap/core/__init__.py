"""Core module exports."""

from pytestmap.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    PytestMapError,
)
from pytestmap.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "PytestMapError",
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
