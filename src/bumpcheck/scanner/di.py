"""di.xml scanner: collects ``<virtualType>`` declarations."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from bumpcheck.registry.models import SCOPE_GLOBAL, VirtualType
from bumpcheck.scanner.modules import CONFIG_DIR
from bumpcheck.scanner.base import XmlScanner

log = structlog.get_logger(__name__)


def area_scope(path: Path) -> str:
    """``etc/di.xml`` -> global, ``etc/<area>/di.xml`` -> area."""
    parent = path.parent.name
    return SCOPE_GLOBAL if parent == CONFIG_DIR else parent


class DiConfigScanner(XmlScanner):
    def collect(self, root: ET.Element, module: str, path: Path) -> None:
        scope = area_scope(path)
        for element in root.iter("virtualType"):
            name = element.get("name")
            if not name:
                log.warning("virtual_type_without_name", file=path.as_posix())
                continue
            self.registry.add_node(
                module,
                VirtualType(
                    name=name,
                    type=element.get("type", ""),
                    scope=scope,
                    shared=element.get("shared"),
                ),
            )
