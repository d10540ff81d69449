"""Next-version computation from a report's highest severity."""

from __future__ import annotations

import re

from bumpcheck.analysis.operations import Severity
from bumpcheck.analysis.report import Report
from bumpcheck.core.errors import ConfigError

_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


def bump_version(version: str, part: str) -> str:
    """Bump the major, minor, or patch part of a semver string."""
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise ConfigError.invalid_value("current_version", version, "expected X.Y.Z")
    major, minor, patch = map(int, match.groups())
    if part == "major":
        return f"{major + 1}.0.0"
    if part == "minor":
        return f"{major}.{minor + 1}.0"
    if part == "patch":
        return f"{major}.{minor}.{patch + 1}"
    return f"{major}.{minor}.{patch}"


def next_version(current: str, report: Report) -> str:
    """Version to release after the changes in ``report``.

    An empty report leaves the version as is (normalized, without ``v``).
    """
    level: Severity | None = report.level()
    return bump_version(current, level.bump if level is not None else "none")
