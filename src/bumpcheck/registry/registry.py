"""Per-snapshot index of declared nodes.

A Registry maps each module to its nodes (keyed by ``unique_key``, in
insertion order) and to the source file the nodes were read from. It is
filled once by a scanner and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

import structlog

from bumpcheck.core.errors import RegistryError
from bumpcheck.registry.models import Node

log = structlog.get_logger(__name__)


class Registry:
    """module -> {unique_key -> Node} plus module -> source file path."""

    def __init__(self, report_type: str | None = None) -> None:
        self.report_type = report_type
        self._nodes: dict[str, dict[str, Node]] = {}
        self._files: dict[str, str] = {}

    def register_module(self, module: str, source_file: str) -> None:
        """Declare a module and the file its nodes come from.

        Registering the same module again points it at the newer file,
        mirroring the last-file-wins mapping of multi-file modules.
        """
        self._nodes.setdefault(module, {})
        self._files[module] = source_file

    def add_node(self, module: str, node: Node) -> None:
        if module not in self._files:
            raise RegistryError.missing_source_file(module)
        bucket = self._nodes[module]
        key = node.unique_key
        if key in bucket and bucket[key] != node:
            log.warning(
                "duplicate_unique_key",
                module=module,
                key=key,
                source_file=self._files[module],
            )
        bucket[key] = node

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def modules(self) -> list[str]:
        return list(self._nodes)

    def has_module(self, module: str) -> bool:
        return module in self._nodes

    def __contains__(self, module: object) -> bool:
        return module in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes(self) -> dict[str, list[Node]]:
        """module_name -> ordered collection of Node."""
        return {module: list(bucket.values()) for module, bucket in self._nodes.items()}

    def module_nodes(self, module: str) -> Mapping[str, Node]:
        """Read-only unique_key -> Node view for one module."""
        try:
            return MappingProxyType(self._nodes[module])
        except KeyError:
            raise RegistryError.unknown_module(module) from None

    def source_file(self, module: str) -> str:
        try:
            return self._files[module]
        except KeyError:
            raise RegistryError.missing_source_file(module) from None

    def node_count(self) -> int:
        return sum(len(bucket) for bucket in self._nodes.values())

    def __repr__(self) -> str:
        return (
            f"Registry(report_type={self.report_type!r}, modules={len(self._nodes)}, "
            f"nodes={self.node_count()})"
        )
