"""Generic cross-snapshot pairing.

Pairs before/after nodes by unique key, per module. Set operations work on
keys only: two nodes sharing a key with different payloads are "common"
(and possibly changed), never "removed + added". Ordering follows the
snapshots' own iteration order so results are deterministic.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeVar

from bumpcheck.registry.models import Node
from bumpcheck.registry.registry import Registry

N = TypeVar("N", bound=Node)

KeyedNodes = Mapping[str, Mapping[str, N]]


@dataclass(frozen=True, slots=True)
class ModuleMatch:
    """Key-level pairing for one module present in both snapshots."""

    module: str
    added: tuple[str, ...]
    removed: tuple[str, ...]
    common: tuple[str, ...]

    @property
    def unchanged_keys(self) -> bool:
        return not self.added and not self.removed


@dataclass(frozen=True, slots=True)
class SnapshotMatch:
    added_modules: tuple[str, ...]
    removed_modules: tuple[str, ...]
    common_modules: tuple[ModuleMatch, ...]


def index_nodes(
    registry: Registry,
    variants: tuple[type[N], ...] | None = None,
) -> dict[str, dict[str, N]]:
    """Build module -> {unique_key -> node}, optionally keeping only some variants.

    Every module of the registry appears, even when none of its nodes
    survive the variant filter.
    """
    indexed: dict[str, dict[str, N]] = {}
    for module, nodes in registry.nodes().items():
        bucket: dict[str, N] = indexed.setdefault(module, {})
        for node in nodes:
            if variants is not None and not isinstance(node, variants):
                continue
            bucket[node.unique_key] = node  # type: ignore[assignment]
    return indexed


def match_modules(before: Mapping[str, N], after: Mapping[str, N], module: str = "") -> ModuleMatch:
    return ModuleMatch(
        module=module,
        added=tuple(key for key in after if key not in before),
        removed=tuple(key for key in before if key not in after),
        common=tuple(key for key in before if key in after),
    )


def match_snapshots(before: KeyedNodes[N], after: KeyedNodes[N]) -> SnapshotMatch:
    """Pair two module -> {key -> node} indexes.

    Modules only in ``after`` are added, only in ``before`` are removed;
    modules in both get a key-level ModuleMatch.
    """
    return SnapshotMatch(
        added_modules=tuple(m for m in after if m not in before),
        removed_modules=tuple(m for m in before if m not in after),
        common_modules=tuple(
            match_modules(before[m], after[m], module=m) for m in before if m in after
        ),
    )
