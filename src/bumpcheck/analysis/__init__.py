"""Snapshot comparison engine.

Public API re-exports for the analysis subpackage.
"""

from bumpcheck.analysis.di import VirtualTypeAnalyzer, diff_virtual_type, normalize_type
from bumpcheck.analysis.duplicates import (
    CrossFileDuplicateDetector,
    DuplicateDetector,
    DuplicateVerdict,
    FallbackDuplicateDetector,
    StructuralDuplicateDetector,
    build_duplicate_detector,
)
from bumpcheck.analysis.factory import AnalyzerFactory, run_analyzers
from bumpcheck.analysis.matcher import (
    ModuleMatch,
    SnapshotMatch,
    index_nodes,
    match_modules,
    match_snapshots,
)
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
    Severity,
    VirtualTypeChanged,
    VirtualTypeRemoved,
    VirtualTypeToTypeChanged,
)
from bumpcheck.analysis.paths import FilePresenceOracle, FilesystemOracle, class_name_to_file_path
from bumpcheck.analysis.report import DOMAIN_DI, DOMAIN_SYSTEM, Report
from bumpcheck.analysis.system import SystemXmlAnalyzer
from bumpcheck.analysis.versioning import bump_version, next_version

__all__ = [
    "DOMAIN_DI",
    "DOMAIN_SYSTEM",
    "AnalyzerFactory",
    "CrossFileDuplicateDetector",
    "DuplicateDetector",
    "DuplicateFieldAdded",
    "DuplicateVerdict",
    "FallbackDuplicateDetector",
    "FieldAdded",
    "FieldRemoved",
    "FileAdded",
    "FilePresenceOracle",
    "FileRemoved",
    "FilesystemOracle",
    "GroupAdded",
    "GroupRemoved",
    "ModuleMatch",
    "Operation",
    "Report",
    "SectionAdded",
    "SectionRemoved",
    "Severity",
    "SnapshotMatch",
    "StructuralDuplicateDetector",
    "SystemXmlAnalyzer",
    "VirtualTypeAnalyzer",
    "VirtualTypeChanged",
    "VirtualTypeRemoved",
    "VirtualTypeToTypeChanged",
    "build_duplicate_detector",
    "bump_version",
    "class_name_to_file_path",
    "diff_virtual_type",
    "index_nodes",
    "match_modules",
    "match_snapshots",
    "next_version",
    "normalize_type",
    "run_analyzers",
]
