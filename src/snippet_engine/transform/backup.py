"""Snapshot a source tree before in-place rewrites."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def snapshot_tree(source: Path | str, backup_root: Path | str) -> Path:
    """Copy *source* to ``backup_root/<source name>``.

    An existing snapshot of the same name is removed first.

    Returns:
        Path to the snapshot directory.

    Raises:
        ValueError: If *backup_root* lies inside *source*.
    """
    src = Path(source).resolve()
    if Path(backup_root).expanduser().resolve().is_relative_to(src):
        raise ValueError(f"The backup directory {backup_root} cannot be inside the source directory {src}.")
    dest = Path(backup_root) / src.name
    if dest.exists():
        logger.debug("Removing previous snapshot %s", dest)
        shutil.rmtree(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copytree(src, dest)
    logger.info("Backed up %s to %s", src, dest)
    return dest
