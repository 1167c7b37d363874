"""Defensive file-system helpers."""

from .paths import exists_at, normalize_path
from .entries import ensure_directory, ensure_file, delete_entry, delete_directory, rename_entry
from .content import write_text, write_bytes, read_all_lines
from .images import save_image, draw_boxes_with_labels, SaveResult

__all__ = [
    "exists_at", "normalize_path",
    "ensure_directory", "ensure_file",
    "delete_entry", "delete_directory", "rename_entry",
    "write_text", "write_bytes", "read_all_lines",
    "save_image", "draw_boxes_with_labels", "SaveResult"
]
