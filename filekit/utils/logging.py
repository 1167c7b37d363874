"""Logging setup and utilities."""

import logging
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional, Any
import json


ROOT_LOGGER_NAME = "filekit"

# Global switch for the whole filekit logger hierarchy
_enabled = True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, 'extra_data'):
            log_entry.update(record.extra_data)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


class FileOpsLogger(logging.Logger):
    """Extended logger with file-operation specific methods."""

    def isEnabledFor(self, level: int) -> bool:
        if not _enabled and _in_hierarchy(self.name):
            return False
        return super().isEnabledFor(level)

    def log_failure(
        self,
        operation: str,
        path: Any,
        error: Optional[Any] = None,
        level: int = logging.WARNING,
        exc_info: bool = False
    ):
        """Log a failed file operation.

        Args:
            operation: Name of the operation that failed
            path: Path the operation was working on
            error: Optional error or reason
            level: Logging level to emit at
            exc_info: Attach the active exception's traceback
        """
        message = f"{operation} fail: path={path}"
        if error is not None:
            message += f", error={error}"
        self.log(
            level,
            message,
            exc_info=exc_info,
            extra={'extra_data': {
                'operation': operation,
                'path': str(path),
                'error': None if error is None else str(error)
            }}
        )


def _in_hierarchy(name: str) -> bool:
    return name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")


# Replace default logger class
logging.setLoggerClass(FileOpsLogger)


def set_logging_enabled(enabled: bool):
    """Switch all filekit logging on or off."""
    global _enabled
    _enabled = bool(enabled)


def is_logging_enabled() -> bool:
    return _enabled


def setup_logging(
    log_dir: Optional[Path] = None,
    level: str = "INFO",
    console: bool = True,
    json_file: bool = True
) -> FileOpsLogger:
    """Setup logging configuration.

    Args:
        log_dir: Directory for log files
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        console: Whether to log to console
        json_file: Whether to log to JSON file

    Returns:
        Configured logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

    # JSON file handler
    if json_file and log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"filekit_{timestamp}.jsonl"

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> FileOpsLogger:
    """Get a logger instance.

    Args:
        name: Logger name, used as the component tag in messages

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
