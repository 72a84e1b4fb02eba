"""Two-level removal of generated component artifacts."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from stackwork.component_layout import join_below

from .housekeeping_errors import HousekeepingError

logger = logging.getLogger(__name__)


def delete_files_and_folders_recursive(base_path: Path | str, items: Sequence[str]) -> None:
    """Delete ``items`` from ``base_path`` and from each immediate subdirectory of it.

    Items are removed directly under ``base_path`` first, then under every
    child directory. Missing items are not an error. A failed removal is
    logged as a warning and the remaining items are still processed.

    Raises:
      HousekeepingError: If ``base_path`` cannot be listed after the first pass.
    """
    base = Path(base_path)

    for item in items:
        full_path = join_below(base, item)
        try:
            _remove_all(full_path)
        except OSError as exc:
            logger.warning("Error deleting %s: %s", full_path, exc)
            continue
        logger.info("Deleted %s", item)

    try:
        entries = _list_entries(base)
    except OSError as exc:
        raise HousekeepingError(f"error reading the base path {base}: {exc}") from exc

    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            continue
        sub_dir_path = base / entry.name
        for item in items:
            try:
                _remove_all(join_below(sub_dir_path, item))
            except OSError as exc:
                logger.warning("Error deleting %s: %s", item, exc)


def _remove_all(path: Path) -> None:
    if path.is_symlink():
        path.unlink()
        return
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return
    except NotADirectoryError:
        path.unlink(missing_ok=True)


def _list_entries(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as entries:
        return list(entries)
