"""Duplicate detection for added configuration nodes.

An added node that sits at the address of an existing declaration is not
really new: it conflicts with (or merges into) something already present.
Two strategies implement the ``DuplicateDetector`` capability:

- CrossFileDuplicateDetector: looks for the node's section/group/field
  address in sibling schema files elsewhere in the project tree.
- StructuralDuplicateDetector: compares the node with the pre-existing
  nodes of the same module, ignoring the identifier.

``FallbackDuplicateDetector`` chains them: the structural check runs when
the cross-file search has no sibling files to look at.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import structlog

from bumpcheck.registry.models import Field, Group, Node, Section

if TYPE_CHECKING:
    from bumpcheck.config.models import AnalysisConfig

log = structlog.get_logger(__name__)


class DuplicateVerdict(Enum):
    UNIQUE = "unique"
    DUPLICATE = "duplicate"
    UNRESOLVED = "unresolved"  # node address could not be parsed; skip the node
    UNAVAILABLE = "unavailable"  # strategy has nothing to search


class DuplicateDetector(Protocol):
    def check(
        self,
        node: Node,
        *,
        schema_file: str,
        existing: Mapping[str, Node],
    ) -> DuplicateVerdict:
        """Classify an added node.

        Args:
            node: The node added in the after snapshot.
            schema_file: File the node was declared in (after snapshot).
            existing: unique_key -> node of the same module in the before snapshot.
        """
        ...


# ============================================================================
# Cross-file strategy
# ============================================================================

# section/group/leaf: shorter paths have no addressable slot
MIN_ADDRESS_SEGMENTS = 3


def parse_address(node: Node) -> list[tuple[str, str]] | None:
    """Split a config node path into ``(element, id)`` steps.

    ``general/store/locale/code`` for a Field becomes
    ``[("section", "general"), ("group", "store"), ("group", "locale"), ("field", "code")]``.
    Returns None for sections, top-level groups and any other path shorter
    than three segments, and for variants that have no address.
    """
    if not isinstance(node, (Group, Field)):
        return None
    segments = [s for s in node.path.split("/") if s]
    if len(segments) < MIN_ADDRESS_SEGMENTS:
        return None
    steps = [("section", segments[0])]
    steps.extend(("group", s) for s in segments[1:-1])
    steps.append(("field" if isinstance(node, Field) else "group", segments[-1]))
    return steps


def find_address(root: ET.Element, steps: list[tuple[str, str]]) -> bool:
    """True if ``root`` holds an element chain matching ``steps`` by tag and id."""
    first_tag, first_id = steps[0]
    candidates = [el for el in root.iter(first_tag) if el.get("id") == first_id]
    for tag, ident in steps[1:]:
        candidates = [
            child
            for parent in candidates
            for child in parent.findall(tag)
            if child.get("id") == ident
        ]
        if not candidates:
            return False
    return bool(candidates)


def find_project_root(schema_file: str, marker: str) -> Path | None:
    """Walk up from the schema file looking for the project root marker file."""
    current = Path(schema_file).parent
    for directory in (current, *current.parents):
        if (directory / marker).is_file():
            return directory
    return None


class CrossFileDuplicateDetector:
    """Searches sibling schema files of the project for the same node address."""

    def __init__(
        self,
        *,
        project_root_marker: str = "SECURITY.md",
        search_dirs: tuple[str, ...] = ("app/code", "vendor"),
        schema_file_name: str = "system.xml",
    ) -> None:
        self.project_root_marker = project_root_marker
        self.search_dirs = search_dirs
        self.schema_file_name = schema_file_name
        self._files_by_root: dict[Path, list[Path]] = {}
        self._trees: dict[Path, ET.Element | None] = {}

    def check(
        self,
        node: Node,
        *,
        schema_file: str,
        existing: Mapping[str, Node],  # noqa: ARG002
    ) -> DuplicateVerdict:
        steps = parse_address(node)
        if steps is None:
            return DuplicateVerdict.UNRESOLVED

        root = find_project_root(schema_file, self.project_root_marker)
        if root is None:
            log.debug("project_root_not_found", schema_file=schema_file)
            return DuplicateVerdict.UNAVAILABLE

        excluded = Path(schema_file).resolve()
        siblings = [p for p in self._schema_files(root) if p != excluded]
        if not siblings:
            return DuplicateVerdict.UNAVAILABLE

        for sibling in siblings:
            tree = self._load(sibling)
            if tree is not None and find_address(tree, steps):
                log.debug("duplicate_found", path=node.path, sibling=str(sibling))
                return DuplicateVerdict.DUPLICATE
        return DuplicateVerdict.UNIQUE

    def _schema_files(self, root: Path) -> list[Path]:
        if root not in self._files_by_root:
            found: list[Path] = []
            for rel in self.search_dirs:
                directory = root / rel
                if not directory.is_dir():
                    continue
                for dirpath, dirnames, filenames in os.walk(directory):
                    dirnames.sort()
                    if self.schema_file_name in filenames:
                        found.append((Path(dirpath) / self.schema_file_name).resolve())
            self._files_by_root[root] = found
        return self._files_by_root[root]

    def _load(self, path: Path) -> ET.Element | None:
        if path not in self._trees:
            try:
                self._trees[path] = ET.parse(path).getroot()
            except (ET.ParseError, OSError) as e:
                log.warning("sibling_schema_unreadable", path=str(path), error=str(e))
                self._trees[path] = None
        return self._trees[path]


# ============================================================================
# In-snapshot structural strategy
# ============================================================================


class StructuralDuplicateDetector:
    """Flags an added node that matches a pre-existing node of its module
    field for field, except for the identifier."""

    def check(
        self,
        node: Node,
        *,
        schema_file: str,  # noqa: ARG002
        existing: Mapping[str, Node],
    ) -> DuplicateVerdict:
        # Top-level nodes have no parent to share
        if isinstance(node, Section):
            return DuplicateVerdict.UNIQUE
        signature = _without_id(node)
        for key, other in existing.items():
            if key == node.unique_key or type(other) is not type(node):
                continue
            if _without_id(other) == signature:
                return DuplicateVerdict.DUPLICATE
        return DuplicateVerdict.UNIQUE


def _without_id(node: Node) -> dict[str, str | None]:
    fields = node.comparable_fields()
    fields.pop("id", None)
    return fields


# ============================================================================
# Composition
# ============================================================================


class FallbackDuplicateDetector:
    """Runs ``primary``; defers to ``fallback`` when primary has nothing to search."""

    def __init__(self, primary: DuplicateDetector, fallback: DuplicateDetector) -> None:
        self.primary = primary
        self.fallback = fallback

    def check(
        self,
        node: Node,
        *,
        schema_file: str,
        existing: Mapping[str, Node],
    ) -> DuplicateVerdict:
        verdict = self.primary.check(node, schema_file=schema_file, existing=existing)
        if verdict is DuplicateVerdict.UNAVAILABLE:
            return self.fallback.check(node, schema_file=schema_file, existing=existing)
        return verdict


def build_duplicate_detector(config: AnalysisConfig) -> DuplicateDetector:
    """Create the detector selected by ``config.duplicate_strategy``."""
    if config.duplicate_strategy == "structural":
        return StructuralDuplicateDetector()

    cross_file = CrossFileDuplicateDetector(
        project_root_marker=config.project_root_marker,
        search_dirs=tuple(config.schema_search_dirs),
        schema_file_name=config.schema_file_name,
    )
    if config.duplicate_strategy == "cross_file":
        return cross_file
    return FallbackDuplicateDetector(cross_file, StructuralDuplicateDetector())
