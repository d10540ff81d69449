"""Core module exports."""

from bumpcheck.core.errors import (
    BumpCheckError,
    ConfigError,
    ErrorCode,
    InternalError,
    RegistryError,
    ScanError,
)
from bumpcheck.core.logging import (
    clear_run_id,
    configure_logging,
    get_log_file_path,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "BumpCheckError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "RegistryError",
    "ScanError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_log_file_path",
    "get_run_id",
    "set_run_id",
]
