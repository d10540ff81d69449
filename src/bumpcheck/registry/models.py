"""Node variants held by a Registry.

All nodes are frozen dataclasses. The set of variants is closed:
``VirtualType`` for di.xml, ``Section`` / ``Group`` / ``Field`` for
system.xml. Each variant exposes ``name``, ``path``, ``scope`` and
``declared_type``, its identity (``unique_key``) and an explicit mapping
of the fields that take part in comparisons (``comparable_fields``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

SCOPE_GLOBAL = "global"


class Node(ABC):
    """Typed entity with identity, a structural payload, and a path."""

    __slots__ = ()

    kind: str = "node"
    name: str
    path: str
    scope: str | None
    declared_type: str | None

    @property
    def unique_key(self) -> str:
        return f"{self.kind}:{self.path}"

    @abstractmethod
    def comparable_fields(self) -> dict[str, str | None]:
        """Named fields compared across snapshots, in comparison order."""


@dataclass(frozen=True, slots=True)
class VirtualType(Node):
    """di.xml ``<virtualType>``: a named alias of a concrete type.

    Identity is the declared name. ``scope`` is the DI area the declaring
    file belongs to (``global``, ``frontend``, ``adminhtml``...).
    """

    name: str
    type: str
    scope: str = SCOPE_GLOBAL
    shared: str | None = None

    kind = "virtual_type"

    @property
    def path(self) -> str:
        return self.name

    @property
    def unique_key(self) -> str:
        return self.name

    @property
    def declared_type(self) -> str | None:
        return self.type

    def comparable_fields(self) -> dict[str, str | None]:
        return {"type": self.type, "scope": self.scope}


@dataclass(frozen=True, slots=True)
class Section(Node):
    """system.xml ``<section>``."""

    id: str
    label: str | None = None

    kind = "section"

    @property
    def name(self) -> str:
        return self.id

    @property
    def path(self) -> str:
        return self.id

    @property
    def parent(self) -> str | None:
        return None

    @property
    def scope(self) -> str | None:
        return None

    @property
    def declared_type(self) -> str | None:
        return None

    def comparable_fields(self) -> dict[str, str | None]:
        return {"id": self.id, "label": self.label}


@dataclass(frozen=True, slots=True)
class Group(Node):
    """system.xml ``<group>``. ``parent`` is the path of the enclosing section or group."""

    id: str
    parent: str
    label: str | None = None

    kind = "group"

    @property
    def name(self) -> str:
        return self.id

    @property
    def path(self) -> str:
        return f"{self.parent}/{self.id}"

    @property
    def scope(self) -> str | None:
        return None

    @property
    def declared_type(self) -> str | None:
        return None

    def comparable_fields(self) -> dict[str, str | None]:
        return {"id": self.id, "parent": self.parent, "label": self.label}


@dataclass(frozen=True, slots=True)
class Field(Node):
    """system.xml ``<field>``. ``parent`` is the path of the enclosing group."""

    id: str
    parent: str
    type: str | None = None
    label: str | None = None

    kind = "field"

    @property
    def name(self) -> str:
        return self.id

    @property
    def path(self) -> str:
        return f"{self.parent}/{self.id}"

    @property
    def scope(self) -> str | None:
        return None

    @property
    def declared_type(self) -> str | None:
        return self.type

    def comparable_fields(self) -> dict[str, str | None]:
        return {"id": self.id, "parent": self.parent, "type": self.type, "label": self.label}


ConfigNode = Section | Group | Field
