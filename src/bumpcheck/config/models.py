"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (BUMPCHECK__SECTION__KEY)
3. Repo YAML (.bumpcheck.yaml)
4. Global YAML (~/.config/bumpcheck/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    BUMPCHECK__<SECTION>__<KEY>=<VALUE>

Examples:
    BUMPCHECK__LOGGING__LEVEL=DEBUG
    BUMPCHECK__ANALYSIS__DUPLICATE_STRATEGY=structural
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DuplicateStrategy = Literal["auto", "cross_file", "structural"]
ReportType = Literal["di", "system"]


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
        BUMPCHECK__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO adds run summaries; DEBUG logs every detected change.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class AnalysisConfig(BaseModel):
    """Comparison engine configuration.

    Env vars:
        BUMPCHECK__ANALYSIS__DUPLICATE_STRATEGY: auto | cross_file | structural
        BUMPCHECK__ANALYSIS__PROJECT_ROOT_MARKER: File marking the project root
    """

    duplicate_strategy: DuplicateStrategy = Field(
        default="auto",
        description="How added config fields are checked for duplicates. "
        "'auto' searches sibling schema files and falls back to the in-snapshot "
        "structural check when no sibling files are available.",
    )
    project_root_marker: str = Field(
        default="SECURITY.md",
        description="File whose presence marks the project root for the sibling search.",
    )
    schema_search_dirs: list[str] = Field(
        default_factory=lambda: ["app/code", "vendor"],
        description="Directories (relative to the project root) searched for sibling schema files.",
    )
    schema_file_name: str = Field(
        default="system.xml",
        description="File name of config schema files.",
    )
    class_file_extension: str = Field(
        default=".php",
        description="Extension appended when mapping a class name to a file path.",
    )
    fixture_markers: list[str] = Field(
        default_factory=lambda: ["_files"],
        description="Schema files whose path contains one of these markers skip duplicate detection.",
    )

    @field_validator("class_file_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if v and not v.startswith("."):
            raise ValueError(f"Extension must start with '.', got {v}")
        return v


class ScanConfig(BaseModel):
    """Source tree scanning configuration.

    Env vars:
        BUMPCHECK__SCAN__REPORT_TYPES: JSON list of report types to scan
    """

    report_types: list[ReportType] = Field(
        default_factory=lambda: ["di", "system"],
        description="Report types to scan and analyze.",
    )
    excluded_dirs: list[str] = Field(
        default_factory=lambda: [".git", ".svn", ".hg", "node_modules", "generated", "var"],
        description="Directory names never traversed while scanning.",
    )


class BumpCheckConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
