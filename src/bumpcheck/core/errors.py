"""bumpcheck error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Registry / Scan
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
    CONFIG_FILE_NOT_FOUND = 2004

    # Registry / Scan (3xxx)
    REGISTRY_MISSING_SOURCE_FILE = 3001
    REGISTRY_UNKNOWN_MODULE = 3002
    SCAN_SOURCE_NOT_FOUND = 3101

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class BumpCheckError(Exception):
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
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(BumpCheckError):
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

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class RegistryError(BumpCheckError):
    """Registry contract violations. These indicate a scanner defect."""

    @classmethod
    def missing_source_file(cls, module: str) -> "RegistryError":
        return cls(
            code=ErrorCode.REGISTRY_MISSING_SOURCE_FILE,
            message=f"No source file mapped for module '{module}'",
            details={"module": module},
        )

    @classmethod
    def unknown_module(cls, module: str) -> "RegistryError":
        return cls(
            code=ErrorCode.REGISTRY_UNKNOWN_MODULE,
            message=f"Module not present in registry: {module}",
            details={"module": module},
        )


class ScanError(BumpCheckError):
    """Source tree scanning errors."""

    @classmethod
    def source_not_found(cls, path: str) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_SOURCE_NOT_FOUND,
            message=f"Source tree not found: {path}",
            details={"path": path},
        )


class InternalError(BumpCheckError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
