"""filekit - defensive file-system helpers."""

from typing import Optional

from .fs import (
    exists_at, normalize_path,
    ensure_directory, ensure_file,
    delete_entry, delete_directory, rename_entry,
    write_text, write_bytes, read_all_lines,
    save_image, draw_boxes_with_labels, SaveResult
)
from .utils import (
    load_config, Config,
    setup_logging, get_logger,
    set_logging_enabled, is_logging_enabled
)

__version__ = "0.1.0"


def setup(config: Optional[Config] = None):
    """Apply the logging section of ``config``.

    Args:
        config: Loaded configuration; defaults are used if None

    Returns:
        The configured root logger
    """
    if config is None:
        config = load_config()

    set_logging_enabled(config.logging.enabled)
    return setup_logging(
        log_dir=config.logs_path,
        level=config.logging.level,
        console=config.logging.console,
        json_file=config.logging.json_file
    )


__all__ = [
    "exists_at", "normalize_path",
    "ensure_directory", "ensure_file",
    "delete_entry", "delete_directory", "rename_entry",
    "write_text", "write_bytes", "read_all_lines",
    "save_image", "draw_boxes_with_labels", "SaveResult",
    "load_config", "Config",
    "setup_logging", "get_logger",
    "set_logging_enabled", "is_logging_enabled",
    "setup"
]
