"""
Logging service for QuadMark.

Every record goes to the console and, when the log directory is writable, to
a dated file under ~/.local/share/quadmark/logs/. The level defaults to INFO
and can be raised or lowered with the QUADMARK_LOG_LEVEL environment variable
(e.g. QUADMARK_LOG_LEVEL=DEBUG to trace each committed snapshot).
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional


DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "quadmark" / "logs"
LOG_LEVEL_ENV = "QUADMARK_LOG_LEVEL"

_FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "%Y-%m-%d %H:%M:%S",
)

_logging_initialized = False


def resolve_log_level(default: int = logging.INFO) -> int:
    """Level named by QUADMARK_LOG_LEVEL, or default when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else default


def log_file_path(log_dir: Path, when: Optional[datetime] = None) -> Path:
    """One log file per day: quadmark_YYYYMMDD.log."""
    when = when or datetime.now()
    return log_dir / f"quadmark_{when.strftime('%Y%m%d')}.log"


def setup_logging(
    log_level: Optional[int] = None,
    log_to_file: bool = True,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the root logger for QuadMark.

    Args:
        log_level: Explicit level; falls back to resolve_log_level().
        log_to_file: Whether to also write the dated log file.
        log_dir: Directory for log files. Defaults to DEFAULT_LOG_DIR.

    Only the first call has an effect, so both the entry point and AppCore
    may call it.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    level = log_level if log_level is not None else resolve_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_FORMATTER)
    root_logger.addHandler(console_handler)

    if log_to_file:
        path = log_file_path(log_dir or DEFAULT_LOG_DIR)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as e:
            # Console only; keep it quiet apart from problems
            console_handler.setLevel(logging.WARNING)
            root_logger.warning(f"Could not open log file {path}: {e}")
        else:
            file_handler.setFormatter(_FORMATTER)
            root_logger.addHandler(file_handler)

    _logging_initialized = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; pass __name__."""
    return logging.getLogger(name)
