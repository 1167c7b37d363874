"""Create, delete and rename file-system entries.

Every function reports failure through its return value; ``OSError`` is
caught where it happens and logged under this module's logger.
"""

import os
import time
import logging
from pathlib import Path
from typing import List, Optional

from .paths import PathArg, is_blank, exists_at
from ..utils.logging import get_logger

logger = get_logger(__name__)


def ensure_directory(path: Optional[PathArg], force_recreate: bool = False) -> bool:
    """Make sure a directory exists at ``path``.

    A non-directory entry at ``path`` is deleted first. An existing directory
    is kept as is unless ``force_recreate`` is set, in which case it is
    deleted recursively and created again empty. A symlink to a directory
    counts as an existing directory; when it has to be recreated, the link
    itself is removed and the directory it pointed to is left untouched.

    Args:
        path: Directory to create
        force_recreate: Delete and recreate an existing directory

    Returns:
        True if a directory exists at ``path`` when the call returns
    """
    if is_blank(path):
        logger.warning("ensure_directory fail: path is empty")
        return False

    target = Path(path)
    deleted = True
    if target.exists() or target.is_symlink():
        if target.is_dir() and not force_recreate:
            return True
        # Links are replaced, never followed
        if target.is_symlink() or not target.is_dir():
            try:
                target.unlink()
            except OSError as e:
                logger.log_failure("ensure_directory unlink", target, e)
                deleted = False
        else:
            deleted = delete_directory(target)

    if not deleted:
        logger.warning(
            f"ensure_directory fail: could not clear existing entry, path={target}"
        )
        return False

    try:
        target.mkdir(parents=True)
    except OSError as e:
        logger.log_failure("ensure_directory", target.absolute(), e)
        return False
    return True


def ensure_file(path: Optional[PathArg]) -> bool:
    """Create an empty file at ``path`` unless an entry is already there.

    Existing entries are accepted without checking whether they are files.
    Missing parent directories are created.

    Args:
        path: File to create

    Returns:
        True if an entry exists at ``path`` when the call returns
    """
    if is_blank(path):
        return False

    target = Path(path)
    if target.exists():
        return True

    ensure_directory(target.parent)
    try:
        target.touch(exist_ok=False)
    except FileExistsError:
        # Lost a race with another creator, or a dangling symlink
        return target.exists()
    except OSError as e:
        logger.log_failure("ensure_file", target.absolute(), e)
        return False
    return True


def delete_entry(path: Optional[PathArg], delete_if_directory: bool = True) -> bool:
    """Delete the file or directory at ``path``.

    Args:
        path: Entry to delete
        delete_if_directory: Whether a directory at ``path`` is deleted too

    Returns:
        True if nothing is left at ``path`` (already absent or deleted), or if
        a directory was kept because ``delete_if_directory`` is False
    """
    if is_blank(path):
        return True

    target = Path(path)
    if not target.exists() and not target.is_symlink():
        return True

    if target.is_symlink() or not target.is_dir():
        try:
            target.unlink()
        except OSError as e:
            logger.log_failure("delete_entry", target, e)
            return False
        return True

    if not delete_if_directory:
        return True
    return delete_directory(target)


def delete_directory(path: Optional[PathArg], failed: Optional[List[Path]] = None) -> bool:
    """Recursively delete a directory, best effort.

    The directory is renamed to ``<path>_<epoch millis>`` before deletion so
    that holders of the original path do not keep it busy. A failed rename
    is logged and deletion continues on the original path. Children that
    cannot be removed are logged and skipped; the walk always goes on to
    remove the directory node itself.

    Args:
        path: Directory to delete
        failed: Optional list that receives every path left behind

    Returns:
        True if the directory node was removed, or there was no directory
        at ``path`` to begin with
    """
    if is_blank(path):
        return True

    target = Path(path)
    if target.is_symlink() or not target.is_dir():
        return True

    src = target.absolute()
    dest = Path(f"{src}_{int(time.time() * 1000)}")
    if rename_entry(src, dest):
        target = dest
    else:
        logger.warning(f"delete_directory rename fail: src={src}, dest={dest}")
        target = src

    try:
        children = list(target.iterdir())
    except OSError as e:
        logger.log_failure("delete_directory list", target, e)
        children = []

    for child in children:
        if child.is_dir() and not child.is_symlink():
            delete_directory(child, failed)
            continue
        try:
            child.unlink()
        except OSError as e:
            logger.log_failure("delete_directory child", child, e)
            if failed is not None:
                failed.append(child)

    try:
        target.rmdir()
    except OSError as e:
        logger.log_failure("delete_directory", target, e)
        if failed is not None:
            failed.append(target)
        return False
    return True


def rename_entry(src_path: Optional[PathArg], dest_path: Optional[PathArg]) -> bool:
    """Move ``src_path`` to ``dest_path``, creating the destination's parents.

    Platform rename rules apply: moves across file systems fail, and whether
    an existing destination is replaced depends on the OS.

    Args:
        src_path: Existing file or directory
        dest_path: New location

    Returns:
        Whether the rename succeeded
    """
    if not exists_at(src_path):
        logger.log_failure("rename_entry", src_path, "source does not exist", level=logging.ERROR)
        return False
    if is_blank(dest_path):
        logger.log_failure("rename_entry", src_path, "destination is empty", level=logging.ERROR)
        return False

    dest = Path(dest_path)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.log_failure("rename_entry mkdir", dest.parent, e)

    try:
        os.rename(src_path, dest)
    except OSError as e:
        logger.log_failure("rename_entry", src_path, f"dest={dest}, {e}")
        return False
    return True
