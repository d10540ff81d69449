"""Append-only accumulator of detected changes for one comparison run."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from bumpcheck.analysis.operations import Operation, Severity

# Domain tags
DOMAIN_DI = "di"
DOMAIN_SYSTEM = "system"


class Report:
    """Ordered sequence of ``(domain_tag, Operation)``.

    ``add`` is the only mutator. Insertion order is preserved globally and
    per domain, so renderers get stable output.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, Operation]] = []

    def add(self, domain: str, operation: Operation) -> None:
        self._entries.append((domain, operation))

    def entries(self) -> tuple[tuple[str, Operation], ...]:
        return tuple(self._entries)

    def domains(self) -> list[str]:
        """Domain tags in order of first appearance."""
        return list(dict.fromkeys(domain for domain, _ in self._entries))

    def operations(self, domain: str | None = None) -> list[Operation]:
        return [op for d, op in self._entries if domain is None or d == domain]

    def by_domain(self) -> dict[str, list[Operation]]:
        grouped: dict[str, list[Operation]] = {}
        for domain, op in self._entries:
            grouped.setdefault(domain, []).append(op)
        return grouped

    def level(self, domain: str | None = None) -> Severity | None:
        """Highest severity recorded (optionally for one domain), None if nothing was."""
        severities = [op.severity for op in self.operations(domain)]
        return max(severities) if severities else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, Operation]]:
        return iter(tuple(self._entries))

    def to_dict(self) -> dict[str, Any]:
        level = self.level()
        return {
            "level": level.name if level is not None else None,
            "domains": {
                domain: {
                    "level": max(op.severity for op in ops).name,
                    "operations": [op.to_dict() for op in ops],
                }
                for domain, ops in self.by_domain().items()
            },
        }
