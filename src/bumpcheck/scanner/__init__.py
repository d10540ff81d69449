"""Source tree scanners producing snapshot registries."""

from bumpcheck.scanner.base import XmlScanner
from bumpcheck.scanner.di import DiConfigScanner, area_scope
from bumpcheck.scanner.factory import (
    ScannerRegistryFactory,
    ScannerSpec,
    iter_source_files,
    scan_tree,
)
from bumpcheck.scanner.modules import ModuleNameResolver
from bumpcheck.scanner.system import SystemXmlScanner

__all__ = [
    "DiConfigScanner",
    "ModuleNameResolver",
    "ScannerRegistryFactory",
    "ScannerSpec",
    "SystemXmlScanner",
    "XmlScanner",
    "area_scope",
    "iter_source_files",
    "scan_tree",
]
