"""High-level comparison of two source trees."""

from __future__ import annotations

from pathlib import Path

import structlog

from bumpcheck.analysis.factory import AnalyzerFactory, run_analyzers
from bumpcheck.analysis.paths import FilePresenceOracle
from bumpcheck.analysis.report import Report
from bumpcheck.config.models import BumpCheckConfig
from bumpcheck.core.logging import clear_run_id, set_run_id
from bumpcheck.scanner.factory import scan_tree

log = structlog.get_logger(__name__)


def compare_trees(
    before_dir: Path,
    after_dir: Path,
    config: BumpCheckConfig | None = None,
    oracle: FilePresenceOracle | None = None,
) -> Report:
    """Scan both trees and run every configured analyzer over them.

    Args:
        before_dir: Source tree of the previous release.
        after_dir: Source tree of the candidate release.
        config: Resolved configuration. Defaults to built-in defaults.
        oracle: File presence oracle for class path probing.

    Returns:
        One Report holding the operations of all analyzers, in run order.
    """
    config = config or BumpCheckConfig()
    set_run_id()
    try:
        log.info("compare_started", before=str(before_dir), after=str(after_dir))
        registries_before = scan_tree(before_dir, config.scan)
        registries_after = scan_tree(after_dir, config.scan)

        factory = AnalyzerFactory(config.analysis, oracle)
        report = run_analyzers(registries_before, registries_after, factory)

        level = report.level()
        log.info(
            "compare_finished",
            operations=len(report),
            level=level.name if level is not None else None,
        )
        return report
    finally:
        clear_run_id()
