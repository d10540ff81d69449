"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides registry-building helpers shared by the analysis tests.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of bumpcheck modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("bumpcheck"):
        del sys.modules[module_name]

from bumpcheck.registry import Node, Registry  # noqa: E402


class KnownFilesOracle:
    """File presence oracle answering from a fixed set of paths."""

    def __init__(self, *paths: str) -> None:
        self.paths = set(paths)
        self.probed: list[str] = []

    def exists(self, path: str) -> bool:
        self.probed.append(path)
        return path in self.paths


def build_registry(
    modules: dict[str, list[Node]],
    files: dict[str, str] | None = None,
    report_type: str | None = None,
) -> Registry:
    """Registry from module -> nodes; files default to app/code/<Vendor>/<Module>/etc/<type>.xml."""
    registry = Registry(report_type)
    for module, nodes in modules.items():
        vendor, _, name = module.partition("_")
        default_file = f"app/code/{vendor}/{name}/etc/{report_type or 'config'}.xml"
        registry.register_module(module, (files or {}).get(module, default_file))
        for node in nodes:
            registry.add_node(module, node)
    return registry


@pytest.fixture
def make_registry() -> Callable[..., Registry]:
    """Factory fixture for registries (see build_registry)."""
    return build_registry


@pytest.fixture
def make_oracle() -> Callable[..., KnownFilesOracle]:
    """Factory fixture for fixed-set file presence oracles."""
    return KnownFilesOracle


# ---------------------------------------------------------------------------
# Source tree snapshots
# ---------------------------------------------------------------------------

_DI_BEFORE = """<?xml version="1.0"?>
<config>
    <virtualType name="Acme\\Catalog\\Model\\Virtual" type="Acme\\Catalog\\Model\\Item"/>
    <virtualType name="Acme\\Catalog\\Model\\Converted" type="Acme\\Catalog\\Model\\Item"/>
    <virtualType name="Acme\\Catalog\\Model\\Pool" type="Acme\\Catalog\\Model\\Item"/>
</config>
"""

_DI_AFTER = """<?xml version="1.0"?>
<config>
    <virtualType name="Acme\\Catalog\\Model\\Pool" type="\\Acme\\Catalog\\Model\\ItemPool"/>
</config>
"""

_CATALOG_SYSTEM_BEFORE = """<?xml version="1.0"?>
<config>
    <system>
        <section id="catalog">
            <group id="frontend">
                <field id="list_mode" type="select"/>
            </group>
        </section>
    </system>
</config>
"""

_CATALOG_SYSTEM_AFTER = """<?xml version="1.0"?>
<config>
    <system>
        <section id="catalog">
            <group id="frontend">
                <field id="list_mode" type="select"/>
                <field id="per_page" type="text"/>
            </group>
        </section>
    </system>
</config>
"""

_SIMPLE_SECTION = """<?xml version="1.0"?>
<config><system><section id="{section}"/></system></config>
"""


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write relative path -> content below root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def snapshots(tmp_path: Path) -> tuple[Path, Path]:
    """Before/after source trees with di.xml and system.xml changes.

    Expected findings, in order:
    - di: Virtual removed, Converted turned into a class, Pool type changed
    - system: Acme_Sales file added, Acme_Legacy file removed, per_page field added
    """
    catalog = "app/code/Acme/Catalog"
    before = write_tree(
        tmp_path / "before",
        {
            f"{catalog}/etc/di.xml": _DI_BEFORE,
            f"{catalog}/etc/adminhtml/system.xml": _CATALOG_SYSTEM_BEFORE,
            "app/code/Acme/Legacy/etc/adminhtml/system.xml": _SIMPLE_SECTION.format(section="legacy"),
        },
    )
    after = write_tree(
        tmp_path / "after",
        {
            "SECURITY.md": "",
            f"{catalog}/etc/di.xml": _DI_AFTER,
            f"{catalog}/Model/Converted.php": "<?php\n",
            f"{catalog}/etc/adminhtml/system.xml": _CATALOG_SYSTEM_AFTER,
            "app/code/Acme/Sales/etc/adminhtml/system.xml": _SIMPLE_SECTION.format(section="sales"),
        },
    )
    return before, after
