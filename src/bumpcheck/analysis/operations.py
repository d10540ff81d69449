"""Severity levels and the catalogue of detected-change records.

An Operation is immutable: its code, severity and reason are fixed per
class, and instances only carry where the change was found (``location``)
and what it concerns (``target``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar


class Severity(IntEnum):
    """Ordinal change classification. Higher value wins."""

    PATCH = 1
    MINOR = 2
    MAJOR = 3
    BREAKING = 3  # alias of MAJOR

    @property
    def bump(self) -> str:
        """Version part this severity increments ("patch", "minor", "major")."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Operation:
    """One detected change."""

    location: str
    target: str

    code: ClassVar[str] = "M000"
    severity: ClassVar[Severity] = Severity.MAJOR
    reason: ClassVar[str] = "Unclassified change"

    @property
    def detail(self) -> str:
        return f"{self.target}: {self.reason}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "severity": self.severity.name,
            "location": self.location,
            "target": self.target,
            "reason": self.reason,
            "detail": self.detail,
        }


# ============================================================================
# di.xml
# ============================================================================


@dataclass(frozen=True, slots=True)
class VirtualTypeRemoved(Operation):
    code = "M200"
    severity = Severity.MAJOR
    reason = "Virtual Type was removed"


@dataclass(frozen=True, slots=True)
class VirtualTypeChanged(Operation):
    """A compared field of a virtual type changed. ``field_name`` names it."""

    field_name: str = ""

    code = "M201"
    severity = Severity.MAJOR
    reason = "Virtual Type was changed"

    @property
    def detail(self) -> str:
        return f"{self.target}/{self.field_name}: {self.reason}"

    def to_dict(self) -> dict[str, Any]:
        data = Operation.to_dict(self)
        data["field"] = self.field_name
        return data


@dataclass(frozen=True, slots=True)
class VirtualTypeToTypeChanged(Operation):
    code = "M202"
    severity = Severity.PATCH
    reason = "Virtual Type was changed to type"


# ============================================================================
# system.xml
# ============================================================================


@dataclass(frozen=True, slots=True)
class FileAdded(Operation):
    code = "M300"
    severity = Severity.MINOR
    reason = "System configuration file was added"


@dataclass(frozen=True, slots=True)
class FileRemoved(Operation):
    code = "M301"
    severity = Severity.MAJOR
    reason = "System configuration file was removed"


@dataclass(frozen=True, slots=True)
class SectionAdded(Operation):
    code = "M302"
    severity = Severity.MINOR
    reason = "A section node was added"


@dataclass(frozen=True, slots=True)
class SectionRemoved(Operation):
    code = "M303"
    severity = Severity.MAJOR
    reason = "A section node was removed"


@dataclass(frozen=True, slots=True)
class GroupAdded(Operation):
    code = "M304"
    severity = Severity.MINOR
    reason = "A group node was added"


@dataclass(frozen=True, slots=True)
class GroupRemoved(Operation):
    code = "M305"
    severity = Severity.MAJOR
    reason = "A group node was removed"


@dataclass(frozen=True, slots=True)
class FieldAdded(Operation):
    code = "M306"
    severity = Severity.MINOR
    reason = "A field node was added"


@dataclass(frozen=True, slots=True)
class FieldRemoved(Operation):
    code = "M307"
    severity = Severity.MAJOR
    reason = "A field node was removed"


@dataclass(frozen=True, slots=True)
class DuplicateFieldAdded(Operation):
    code = "M308"
    severity = Severity.MINOR
    reason = "A field duplicating an existing declaration was added"
