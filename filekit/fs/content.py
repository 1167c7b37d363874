"""Read and write file contents."""

import os
import logging
from pathlib import Path
from typing import List, Optional

from .paths import PathArg, is_blank, normalize_path, unify_separators
from .entries import ensure_file
from ..utils.logging import get_logger

logger = get_logger(__name__)

LINE_TERMINATOR = "\r\n"


def write_text(
    content: Optional[str],
    path: Optional[PathArg],
    append: bool,
    append_line_terminator: bool = True,
    encoding: str = "utf-8"
) -> bool:
    """Write text to a file, creating it and its parent directories.

    Args:
        content: Text to write; None is written as an empty string
        path: Target file, normalized before use
        append: Append to the file instead of overwriting it
        append_line_terminator: Add a CRLF after ``content``
        encoding: Text encoding

    Returns:
        True if the content was written and flushed
    """
    if is_blank(path):
        return False

    path = normalize_path(path)
    if not ensure_file(path):
        logger.log_failure("write_text", path, "could not create file")
        return False

    if content is None:
        content = ""
    if append_line_terminator:
        content += LINE_TERMINATOR

    try:
        # newline="" keeps the terminator byte-exact on every platform
        with open(path, "a" if append else "w", encoding=encoding, newline="") as f:
            f.write(content)
            f.flush()
    except OSError as e:
        logger.log_failure("write_text", path, e, level=logging.ERROR)
        return False
    return True


def write_bytes(data: Optional[bytes], path: Optional[PathArg], append: bool) -> bool:
    """Write binary data to a file.

    Args:
        data: Bytes to write
        path: Target file; separators are normalized, whitespace is kept
        append: Append instead of overwrite

    Returns:
        True if all bytes were written and flushed
    """
    if is_blank(path):
        return False
    if data is None:
        logger.log_failure("write_bytes", path, "data is None")
        return False

    path = unify_separators(os.fspath(path))
    ensure_file(path)
    try:
        with open(path, "ab" if append else "wb") as f:
            f.write(data)
            f.flush()
    except OSError as e:
        logger.log_failure("write_bytes", path, e, level=logging.ERROR)
        return False
    return True


def read_all_lines(path: Optional[PathArg], encoding: str = "utf-8") -> List[str]:
    """Read a file line by line.

    Missing files and blank paths give an empty list. If reading fails half
    way, the lines read so far are returned.

    Args:
        path: File to read
        encoding: Text encoding; undecodable bytes are replaced

    Returns:
        Lines in file order without their terminators
    """
    lines: List[str] = []
    if is_blank(path):
        return lines

    target = Path(path)
    if not target.exists():
        return lines

    try:
        with open(target, "r", encoding=encoding, errors="replace") as f:
            for line in f:
                lines.append(line[:-1] if line.endswith("\n") else line)
    except OSError as e:
        logger.log_failure("read_all_lines", target, e, level=logging.ERROR)
    return lines
