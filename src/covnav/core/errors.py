"""covnav error types with typed error codes.

Error code ranges:
- 1xxx: Profile
- 2xxx: Config
- 3xxx: Navigation
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Profile (1xxx)
    PROFILE_MALFORMED = 1001
    PROFILE_NOT_FOUND = 1002
    PROFILE_UNREADABLE = 1003

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Navigation (3xxx)
    NAVIGATION_OUT_OF_RANGE = 3001
    NAVIGATION_WRONG_MODE = 3002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CovNavError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PROFILE_MALFORMED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ProfileError(CovNavError):
    """Coverage profile could not be loaded or parsed.

    ``PROFILE_MALFORMED`` is fatal to startup and names the offending line.
    """

    @classmethod
    def malformed(cls, line_number: int, line: str, reason: str) -> "ProfileError":
        return cls(
            code=ErrorCode.PROFILE_MALFORMED,
            message=f"Malformed profile line {line_number}: {reason}: {line!r}",
            details={"line_number": line_number, "line": line, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ProfileError":
        return cls(
            code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Coverage profile not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ProfileError":
        return cls(
            code=ErrorCode.PROFILE_UNREADABLE,
            message=f"Failed to read coverage profile {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @property
    def line_number(self) -> int | None:
        return self.details.get("line_number")


class ConfigError(CovNavError):
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


class NavigationError(CovNavError):
    """Navigation contract violation.

    Raised when the front end asks for a transition the current state cannot
    perform. This indicates a caller bug, not a user-facing condition.
    """

    @classmethod
    def out_of_range(cls, index: int, size: int) -> "NavigationError":
        return cls(
            code=ErrorCode.NAVIGATION_OUT_OF_RANGE,
            message=f"File index {index} out of range for {size} file(s)",
            details={"index": index, "size": size},
        )

    @classmethod
    def wrong_mode(cls, operation: str, mode: str) -> "NavigationError":
        return cls(
            code=ErrorCode.NAVIGATION_WRONG_MODE,
            message=f"'{operation}' is not valid in {mode} mode",
            details={"operation": operation, "mode": mode},
        )
