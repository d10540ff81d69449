"""di.xml analysis: breaking changes to virtual type declarations.

Per virtual type of the before snapshot:
1. Its module is gone from the after snapshot -> skipped (module removal
   is reported elsewhere).
2. Same name in the same module -> field diff.
3. Same name in any other module (first in after-snapshot order) -> field
   diff; a move is a change, not a removal.
4. Nowhere -> if a class file now exists where the name maps to,
   VirtualTypeToTypeChanged, otherwise VirtualTypeRemoved.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from bumpcheck.analysis.matcher import index_nodes, match_modules
from bumpcheck.analysis.operations import (
    Operation,
    VirtualTypeChanged,
    VirtualTypeRemoved,
    VirtualTypeToTypeChanged,
)
from bumpcheck.analysis.paths import FilePresenceOracle, FilesystemOracle, class_name_to_file_path
from bumpcheck.analysis.report import DOMAIN_DI, Report
from bumpcheck.registry.models import SCOPE_GLOBAL, VirtualType
from bumpcheck.registry.registry import Registry

log = structlog.get_logger(__name__)


def normalize_type(value: str | None) -> str:
    """Strip whitespace, then leading namespace separators."""
    return (value or "").strip().lstrip("\\")


def diff_virtual_type(before: VirtualType, after: VirtualType) -> list[str]:
    """Names of the compared fields that changed between two declarations.

    ``type`` is compared after normalization, ``scope`` verbatim. When the
    type is unchanged and the new scope is global, nothing is reported:
    widening to global scope is backward compatible.
    """
    same_type = normalize_type(before.type) == normalize_type(after.type)
    if same_type and after.scope == SCOPE_GLOBAL:
        return []

    changed: list[str] = []
    if not same_type:
        changed.append("type")
    if before.scope != after.scope:
        changed.append("scope")
    return changed


class VirtualTypeAnalyzer:
    """Compares virtual types of two di.xml registries."""

    domain = DOMAIN_DI

    def __init__(
        self,
        oracle: FilePresenceOracle | None = None,
        class_file_extension: str = ".php",
    ) -> None:
        self.oracle = oracle or FilesystemOracle()
        self.class_file_extension = class_file_extension

    def analyze(
        self,
        registry_before: Registry,
        registry_after: Registry,
        report: Report | None = None,
    ) -> Report:
        if report is None:
            report = Report()

        nodes_before = index_nodes(registry_before, (VirtualType,))
        nodes_after = index_nodes(registry_after, (VirtualType,))
        if nodes_before == nodes_after:
            return report

        first_by_name = _first_by_name(nodes_after)

        for module, module_nodes in nodes_before.items():
            if not registry_after.has_module(module):
                continue

            file_before = registry_before.source_file(module)
            file_after = registry_after.source_file(module)
            module_after = nodes_after[module]
            removed = set(match_modules(module_nodes, module_after, module=module).removed)

            for name, before in module_nodes.items():
                if name not in removed:
                    after = module_after[name]
                    if before != after:
                        self._report_changes(report, before, after, file_before)
                    continue

                moved = first_by_name.get(before.name)
                if moved is not None:
                    log.debug("virtual_type_moved", name=name, module=module)
                    self._report_changes(report, before, moved, file_before)
                    continue
                self._report_gone(report, before, file_before, file_after)

        return report

    def _report_changes(
        self,
        report: Report,
        before: VirtualType,
        after: VirtualType,
        file_before: str,
    ) -> None:
        for field_name in diff_virtual_type(before, after):
            log.debug("virtual_type_changed", name=before.name, field=field_name)
            report.add(
                self.domain,
                VirtualTypeChanged(location=file_before, target=before.name, field_name=field_name),
            )

    def _report_gone(
        self,
        report: Report,
        before: VirtualType,
        file_before: str,
        file_after: str,
    ) -> None:
        candidate = class_name_to_file_path(file_after, before.name, self.class_file_extension)
        operation: Operation
        if candidate is not None and self.oracle.exists(candidate):
            operation = VirtualTypeToTypeChanged(location=file_before, target=before.name)
        else:
            if candidate is None:
                log.info("class_path_unresolved", name=before.name, file=file_after)
            operation = VirtualTypeRemoved(location=file_before, target=before.name)
        report.add(self.domain, operation)


def _first_by_name(nodes: Mapping[str, Mapping[str, VirtualType]]) -> dict[str, VirtualType]:
    """name -> first declaration across modules, in iteration order."""
    first: dict[str, VirtualType] = {}
    for module_nodes in nodes.values():
        for node in module_nodes.values():
            first.setdefault(node.name, node)
    return first
