"""Snapshot registries and the node variants they hold."""

from bumpcheck.registry.models import (
    SCOPE_GLOBAL,
    ConfigNode,
    Field,
    Group,
    Node,
    Section,
    VirtualType,
)
from bumpcheck.registry.registry import Registry

__all__ = [
    "SCOPE_GLOBAL",
    "ConfigNode",
    "Field",
    "Group",
    "Node",
    "Registry",
    "Section",
    "VirtualType",
]
