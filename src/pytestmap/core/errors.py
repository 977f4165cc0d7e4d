"""pytestmap error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Discovery
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Discovery (7xxx)
    DISCOVERY_MALFORMED_SOURCE = 7001
    DISCOVERY_EMPTY_REQUIRED_FIELD = 7002
    DISCOVERY_REPORT_PARSE_ERROR = 7003
    DISCOVERY_JUNIT_PARSE_ERROR = 7004


@dataclass(frozen=True, slots=True)
class PytestMapError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PytestMapError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DiscoveryError(PytestMapError):
    """Whole-document failures while reading discovery or result reports.

    Per-test problems are never raised; they are collected as
    ``ParseFailure`` values by the normalizer.
    """

    @classmethod
    def report_parse_error(cls, source: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_REPORT_PARSE_ERROR,
            message=f"Failed to parse discovery report {source}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def junit_parse_error(cls, source: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_JUNIT_PARSE_ERROR,
            message=f"Failed to parse JUnit report {source}: {reason}",
            details={"source": source, "reason": reason},
        )
