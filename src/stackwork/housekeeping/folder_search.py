"""Prefix-scoped component folder search."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .housekeeping_errors import HousekeepingError

logger = logging.getLogger(__name__)


def find_folders_with_prefix(root: Path | str, prefix: str) -> list[str]:
    """Find folders whose name starts with ``prefix`` at most two levels below ``root``.

    Level-1 directories are emitted by name, level-2 directories as
    ``<level-1>/<level-2>``. Every level-1 directory is searched, whether or
    not its own name matched. An empty prefix matches everything. Results
    follow directory iteration order.

    Raises:
      HousekeepingError: If ``root`` cannot be read.
    """
    root_path = Path(root)
    try:
        level1_entries = _list_entries(root_path)
    except OSError as exc:
        raise HousekeepingError(f"error reading root directory {root_path}: {exc}") from exc

    folder_names: list[str] = []
    for entry in level1_entries:
        if not entry.is_dir(follow_symlinks=False):
            continue
        if _matches(entry.name, prefix):
            folder_names.append(entry.name)

        level2_path = root_path / entry.name
        try:
            level2_entries = _list_entries(level2_path)
        except OSError as exc:
            logger.warning("Error reading subdirectory %s: %s", level2_path, exc)
            continue

        for sub_entry in level2_entries:
            if sub_entry.is_dir(follow_symlinks=False) and _matches(sub_entry.name, prefix):
                folder_names.append(os.path.join(entry.name, sub_entry.name))

    return folder_names


def _matches(name: str, prefix: str) -> bool:
    return prefix == "" or name.startswith(prefix)


def _list_entries(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as entries:
        return list(entries)
