"""Path checks and normalization."""

import os
import re
from pathlib import Path
from typing import Union, Optional

PathArg = Union[str, "os.PathLike[str]"]

_SEPARATOR_RUN = re.compile(r"/{2,}")


def is_blank(path: Optional[PathArg]) -> bool:
    """True for ``None`` and the empty string."""
    return path is None or os.fspath(path) == ""


def exists_at(path: Optional[PathArg]) -> bool:
    """Check whether a file or directory exists at ``path``.

    Args:
        path: Absolute path to check

    Returns:
        False for a blank path, otherwise whether the entry exists
    """
    return not is_blank(path) and Path(path).exists()


def unify_separators(path: str, collapse_all: bool = False) -> str:
    """Turn backslashes into slashes and collapse doubled slashes.

    The default collapse is a single left-to-right pass, so ``"a///b"``
    becomes ``"a//b"``. ``collapse_all`` squeezes every run to one slash.
    """
    path = path.replace("\\", "/")
    if collapse_all:
        return _SEPARATOR_RUN.sub("/", path)
    return path.replace("//", "/")


def normalize_path(path: Optional[PathArg], collapse_all: bool = False) -> Optional[str]:
    """Trim whitespace and normalize separators.

    Args:
        path: Path to normalize
        collapse_all: Collapse every run of separators instead of a single pass

    Returns:
        Normalized path string, or the input unchanged if it is blank
    """
    if is_blank(path):
        return path
    return unify_separators(os.fspath(path).strip(), collapse_all)
