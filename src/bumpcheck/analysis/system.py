"""system.xml analysis.

Reports added and removed schema files, and added and removed
section / group / field nodes. Added nodes go through duplicate detection
first: an added field whose address already exists elsewhere is reported
as DuplicateFieldAdded rather than FieldAdded, and an added group found
elsewhere merges into that declaration and is not reported. Added nodes
whose path has no section/group/leaf address (sections, top-level groups)
are skipped and logged, except in fixture files, which are reported as is.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from bumpcheck.analysis.duplicates import (
    CrossFileDuplicateDetector,
    DuplicateDetector,
    DuplicateVerdict,
    FallbackDuplicateDetector,
    StructuralDuplicateDetector,
    parse_address,
)
from bumpcheck.analysis.matcher import ModuleMatch, index_nodes, match_snapshots
from bumpcheck.analysis.operations import (
    DuplicateFieldAdded,
    FieldAdded,
    FieldRemoved,
    FileAdded,
    FileRemoved,
    GroupAdded,
    GroupRemoved,
    Operation,
    SectionAdded,
    SectionRemoved,
)
from bumpcheck.analysis.report import DOMAIN_SYSTEM, Report
from bumpcheck.registry.models import Field, Group, Node, Section
from bumpcheck.registry.registry import Registry

log = structlog.get_logger(__name__)

# Node variant -> operation. Variants missing here are ignored.
_ADDED: dict[type[Node], type[Operation]] = {
    Section: SectionAdded,
    Group: GroupAdded,
    Field: FieldAdded,
}
_REMOVED: dict[type[Node], type[Operation]] = {
    Section: SectionRemoved,
    Group: GroupRemoved,
    Field: FieldRemoved,
}
_DUPLICATED: dict[type[Node], type[Operation]] = {
    Field: DuplicateFieldAdded,
}


class SystemXmlAnalyzer:
    """Compares section / group / field nodes of two system.xml registries."""

    domain = DOMAIN_SYSTEM

    def __init__(
        self,
        duplicate_detector: DuplicateDetector | None = None,
        *,
        schema_file_name: str = "system.xml",
        fixture_markers: tuple[str, ...] = ("_files",),
    ) -> None:
        self.duplicate_detector = duplicate_detector or FallbackDuplicateDetector(
            CrossFileDuplicateDetector(schema_file_name=schema_file_name),
            StructuralDuplicateDetector(),
        )
        self.schema_file_name = schema_file_name
        self.fixture_markers = fixture_markers

    def analyze(
        self,
        registry_before: Registry,
        registry_after: Registry,
        report: Report | None = None,
    ) -> Report:
        if report is None:
            report = Report()

        nodes_before = index_nodes(registry_before)
        nodes_after = index_nodes(registry_after)
        if nodes_before == nodes_after:
            return report

        match = match_snapshots(nodes_before, nodes_after)

        for module in match.added_modules:
            report.add(
                self.domain,
                FileAdded(location=registry_after.source_file(module), target=self.schema_file_name),
            )

        for module in match.removed_modules:
            report.add(
                self.domain,
                FileRemoved(location=registry_before.source_file(module), target=self.schema_file_name),
            )

        for pairing in match.common_modules:
            if pairing.unchanged_keys:
                continue
            self._analyze_module(
                report,
                pairing,
                nodes_before[pairing.module],
                nodes_after[pairing.module],
                registry_before,
                registry_after,
            )

        return report

    def _analyze_module(
        self,
        report: Report,
        pairing: ModuleMatch,
        module_before: Mapping[str, Node],
        module_after: Mapping[str, Node],
        registry_before: Registry,
        registry_after: Registry,
    ) -> None:
        if pairing.removed:
            file_before = registry_before.source_file(pairing.module)
            for key in pairing.removed:
                self._emit(report, _REMOVED, module_before[key], file_before)

        if not pairing.added:
            return

        file_after = registry_after.source_file(pairing.module)
        check_duplicates = not any(marker in file_after for marker in self.fixture_markers)

        for key in pairing.added:
            node = module_after[key]
            if type(node) not in _ADDED:
                continue
            if not check_duplicates:
                self._emit(report, _ADDED, node, file_after)
                continue
            if parse_address(node) is None:
                log.warning(
                    "added_node_skipped",
                    reason="short_address",
                    path=node.path,
                    file=file_after,
                )
                continue

            verdict = self.duplicate_detector.check(
                node, schema_file=file_after, existing=module_before
            )
            if verdict is DuplicateVerdict.UNRESOLVED:
                log.warning(
                    "added_node_skipped",
                    reason="unresolved_address",
                    path=node.path,
                    file=file_after,
                )
            elif verdict is DuplicateVerdict.DUPLICATE:
                if not self._emit(report, _DUPLICATED, node, file_after):
                    log.debug("added_node_merged", path=node.path, file=file_after)
            else:
                self._emit(report, _ADDED, node, file_after)

    def _emit(
        self,
        report: Report,
        table: Mapping[type[Node], type[Operation]],
        node: Node,
        location: str,
    ) -> bool:
        operation_cls = table.get(type(node))
        if operation_cls is None:
            return False
        report.add(self.domain, operation_cls(location=location, target=node.path))
        return True
