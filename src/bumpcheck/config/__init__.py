"""Config module exports."""

from bumpcheck.config.loader import load_config
from bumpcheck.config.models import (
    AnalysisConfig,
    BumpCheckConfig,
    LoggingConfig,
    LogOutputConfig,
    ScanConfig,
)

__all__ = [
    "load_config",
    "AnalysisConfig",
    "BumpCheckConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ScanConfig",
]
