"""Report type -> analyzers, and running them against registry pairs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import structlog

from bumpcheck.analysis.di import VirtualTypeAnalyzer
from bumpcheck.analysis.duplicates import build_duplicate_detector
from bumpcheck.analysis.paths import FilePresenceOracle, FilesystemOracle
from bumpcheck.analysis.report import Report
from bumpcheck.analysis.system import SystemXmlAnalyzer
from bumpcheck.config.models import AnalysisConfig
from bumpcheck.core.errors import InternalError
from bumpcheck.registry.registry import Registry

log = structlog.get_logger(__name__)

REPORT_TYPE_DI = "di"
REPORT_TYPE_SYSTEM = "system"


class Analyzer(Protocol):
    domain: str

    def analyze(
        self,
        registry_before: Registry,
        registry_after: Registry,
        report: Report | None = None,
    ) -> Report: ...


class AnalyzerFactory:
    """Builds the analyzers for each supported report type."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        oracle: FilePresenceOracle | None = None,
    ) -> None:
        self.config = config or AnalysisConfig()
        self.oracle = oracle or FilesystemOracle()

    def report_types(self) -> list[str]:
        return [REPORT_TYPE_DI, REPORT_TYPE_SYSTEM]

    def create(self, report_type: str) -> list[Analyzer]:
        """Analyzers for one report type.

        Raises:
            InternalError: If no analyzer handles ``report_type``; scanners only
                produce registries for supported report types.
        """
        if report_type not in self.report_types():
            raise InternalError.unexpected("no analyzer for report type", report_type=report_type)
        if report_type == REPORT_TYPE_DI:
            return [
                VirtualTypeAnalyzer(
                    oracle=self.oracle,
                    class_file_extension=self.config.class_file_extension,
                )
            ]
        return [
            SystemXmlAnalyzer(
                build_duplicate_detector(self.config),
                schema_file_name=self.config.schema_file_name,
                fixture_markers=tuple(self.config.fixture_markers),
            )
        ]


def run_analyzers(
    before: Mapping[str, Registry],
    after: Mapping[str, Registry],
    factory: AnalyzerFactory,
    report: Report | None = None,
) -> Report:
    """Run every analyzer of every report type present in both snapshots.

    All analyzers append to the same per-run report.
    """
    if report is None:
        report = Report()
    for report_type, registry_before in before.items():
        registry_after = after.get(report_type)
        if registry_after is None:
            log.warning("report_type_missing_in_after", report_type=report_type)
            continue
        for analyzer in factory.create(report_type):
            analyzer.analyze(registry_before, registry_after, report)
            log.debug(
                "analyzer_done",
                report_type=report_type,
                analyzer=type(analyzer).__name__,
                operations=len(report),
            )
    return report
