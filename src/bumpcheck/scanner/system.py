"""system.xml scanner: collects sections, groups (nested) and fields."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

from bumpcheck.registry.models import Field, Group, Section
from bumpcheck.scanner.base import XmlScanner

log = structlog.get_logger(__name__)


def _label(element: ET.Element) -> str | None:
    label = element.find("label")
    if label is None or label.text is None:
        return None
    return label.text.strip() or None


class SystemXmlScanner(XmlScanner):
    def collect(self, root: ET.Element, module: str, path: Path) -> None:
        for section in root.iter("section"):
            section_id = section.get("id")
            if not section_id:
                log.warning("node_without_id", element="section", file=path.as_posix())
                continue
            self.registry.add_node(module, Section(id=section_id, label=_label(section)))
            self._collect_groups(section, section_id, module, path)

    def _collect_groups(self, parent: ET.Element, parent_path: str, module: str, path: Path) -> None:
        for group in parent.findall("group"):
            group_id = group.get("id")
            if not group_id:
                log.warning("node_without_id", element="group", file=path.as_posix())
                continue
            node = Group(id=group_id, parent=parent_path, label=_label(group))
            self.registry.add_node(module, node)

            for field in group.findall("field"):
                field_id = field.get("id")
                if not field_id:
                    log.warning("node_without_id", element="field", file=path.as_posix())
                    continue
                self.registry.add_node(
                    module,
                    Field(
                        id=field_id,
                        parent=node.path,
                        type=field.get("type"),
                        label=_label(field),
                    ),
                )
            self._collect_groups(group, node.path, module, path)
