"""Module name resolution from file paths."""

from __future__ import annotations

from pathlib import PurePosixPath

CONFIG_DIR = "etc"


class ModuleNameResolver:
    """Derives ``Vendor_Module`` from ``.../Vendor/Module/etc/...`` paths."""

    def resolve(self, file_path: str) -> str | None:
        parts = PurePosixPath(file_path.replace("\\", "/")).parts
        # Last "etc" wins so nested vendor trees resolve to the innermost module
        for index in range(len(parts) - 1, 1, -1):
            if parts[index] == CONFIG_DIR:
                return f"{parts[index - 2]}_{parts[index - 1]}"
        return None
