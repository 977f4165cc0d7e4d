"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PYTESTMAP__SECTION__KEY)
3. Repo YAML (.pytestmap/config.yaml)
4. Global YAML (~/.config/pytestmap/config.yaml)
5. Built-in defaults (this file)

Examples:
    PYTESTMAP__LOGGING__LEVEL=DEBUG
    PYTESTMAP__DISCOVERY__IS_WORKSPACE=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from pytestmap.config.constants import PROJECT_EXECUTOR_URI, WORKSPACE_EXECUTOR_URI

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PYTESTMAP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG also logs each unmatched JUnit result.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiscoveryConfig(BaseModel):
    """Values attached verbatim to every normalized test case.

    Env vars:
        PYTESTMAP__DISCOVERY__IS_WORKSPACE: Discovery ran against an open folder
        PYTESTMAP__DISCOVERY__EXECUTOR_URI: Override the executor identity
    """

    is_workspace: bool = Field(
        default=False,
        description="True when tests come from an open folder rather than a project.",
    )
    executor_uri: str | None = Field(
        default=None,
        description="Executor identity. Derived from is_workspace when unset.",
    )

    @property
    def resolved_executor_uri(self) -> str:
        if self.executor_uri:
            return self.executor_uri
        return WORKSPACE_EXECUTOR_URI if self.is_workspace else PROJECT_EXECUTOR_URI


class PytestMapConfig(BaseModel):
    """Root configuration for pytestmap."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
