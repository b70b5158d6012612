"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (command-line flags)
2. Environment variables (COVNAV__SECTION__KEY)
3. Repo YAML (.covnav.yaml in the working directory)
4. Global YAML (~/.config/covnav/config.yaml)
5. Built-in defaults (this file)

Examples:
    COVNAV__LOGGING__LEVEL=DEBUG
    COVNAV__VIEWER__SORT_BY_COVERAGE=true
    COVNAV__VIEWER__PROFILE_FILENAME=cover.out
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        return str(Path(v).expanduser().resolve())


class LoggingConfig(BaseModel):
    """Logging configuration.

    The terminal belongs to the interactive viewer, so no output is
    configured by default and log records are discarded.

    Env vars:
        COVNAV__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=list)


class ViewerConfig(BaseModel):
    """Coverage viewer configuration.

    Env vars:
        COVNAV__VIEWER__PROFILE_FILENAME: Coverage profile to open
        COVNAV__VIEWER__SORT_BY_COVERAGE: Sort files by coverage instead of name
        COVNAV__VIEWER__SOURCE_EXTENSION: Extension of files kept from a diff
        COVNAV__VIEWER__STRIP_MODULE_PREFIX: Strip the go.mod module path from profile paths
    """

    profile_filename: str = Field(
        default="coverage.out",
        description="File name of coverage profile generated by go test -coverprofile.",
    )
    sort_by_coverage: bool = Field(
        default=False,
        description="Sort files by coverage (least covered first) instead of alphabetically.",
    )
    source_extension: str = Field(
        default=".go",
        description="Only diff entries for files with this extension produce line filters.",
    )
    strip_module_prefix: bool = Field(
        default=True,
        description="Rewrite profile paths relative to the module declared in go.mod.",
    )

    @field_validator("source_extension")
    @classmethod
    def validate_source_extension(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"Extension must start with '.', got {v!r}")
        return v


class CovNavConfig(BaseModel):
    """Root configuration for covnav."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    viewer: ViewerConfig = Field(default_factory=ViewerConfig)
