"""Scanner wiring: report type -> file patterns + scanner, and tree walking."""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path

import structlog

from bumpcheck.config.models import ScanConfig
from bumpcheck.core.errors import ScanError
from bumpcheck.registry.registry import Registry
from bumpcheck.scanner.base import XmlScanner
from bumpcheck.scanner.di import DiConfigScanner
from bumpcheck.scanner.modules import ModuleNameResolver
from bumpcheck.scanner.system import SystemXmlScanner

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScannerSpec:
    patterns: tuple[str, ...]
    scanner: XmlScanner

    @property
    def registry(self) -> Registry:
        return self.scanner.registry

    def matches(self, file_name: str) -> bool:
        return any(fnmatch.fnmatch(file_name, pattern) for pattern in self.patterns)


class ScannerRegistryFactory:
    """Creates a fresh scanner (and registry) per report type."""

    def __init__(self, resolver: ModuleNameResolver | None = None) -> None:
        self.resolver = resolver or ModuleNameResolver()

    def create(self) -> dict[str, ScannerSpec]:
        return {
            "di": ScannerSpec(
                patterns=("di.xml",),
                scanner=DiConfigScanner(Registry("di"), self.resolver),
            ),
            "system": ScannerSpec(
                patterns=("system.xml",),
                scanner=SystemXmlScanner(Registry("system"), self.resolver),
            ),
        }


def iter_source_files(root: Path, excluded_dirs: frozenset[str]) -> list[Path]:
    """All files below ``root`` in sorted order, skipping excluded directory names."""
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded_dirs)
        files.extend(Path(dirpath) / name for name in sorted(filenames))
    return files


def scan_tree(root: Path, config: ScanConfig | None = None) -> dict[str, Registry]:
    """Scan a source tree into one Registry per configured report type.

    Raises:
        ScanError: If ``root`` is not a directory.
    """
    config = config or ScanConfig()
    if not root.is_dir():
        raise ScanError.source_not_found(str(root))

    specs = {
        report_type: spec
        for report_type, spec in ScannerRegistryFactory().create().items()
        if report_type in config.report_types
    }

    scanned = 0
    for path in iter_source_files(root, frozenset(config.excluded_dirs)):
        for spec in specs.values():
            if spec.matches(path.name) and spec.scanner.scan(path):
                scanned += 1

    log.info(
        "tree_scanned",
        root=str(root),
        files=scanned,
        registries={rt: repr(spec.registry) for rt, spec in specs.items()},
    )
    return {report_type: spec.registry for report_type, spec in specs.items()}
