"""Shared base for XML config scanners."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from bumpcheck.registry.registry import Registry
from bumpcheck.scanner.modules import ModuleNameResolver

log = structlog.get_logger(__name__)


class XmlScanner:
    """Parses one XML file at a time into ``registry``.

    Files that cannot be parsed or mapped to a module are logged and
    skipped; the rest of the tree is still scanned.
    """

    def __init__(self, registry: Registry, resolver: ModuleNameResolver | None = None) -> None:
        self.registry = registry
        self.resolver = resolver or ModuleNameResolver()

    def scan(self, path: Path) -> bool:
        """Add the nodes declared in ``path``. Returns False if the file was skipped."""
        file_path = path.as_posix()
        module = self.resolver.resolve(file_path)
        if module is None:
            log.warning("module_unresolved", file=file_path)
            return False
        try:
            root = ET.parse(path).getroot()
        except (ET.ParseError, OSError) as e:
            log.warning("xml_unreadable", file=file_path, error=str(e))
            return False

        self.registry.register_module(module, file_path)
        self.collect(root, module, path)
        return True

    def collect(self, root: ET.Element, module: str, path: Path) -> None:
        raise NotImplementedError
