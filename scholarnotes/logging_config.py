"""
Unified Logging Configuration for ScholarNotes

Every module logs through this one place:
    from scholarnotes.logging_config import debug_log, info, warning, error, Timer

Output:
- logs/processing.log: info and above, always (when the directory is writable)
- logs/debug_flow.txt: everything, only in DEBUG_MODE
- console: everything, only in DEBUG_MODE

Messages should carry a [MODULE] prefix, e.g. "[REDUCER] Stage 2 ...".
"""

import logging
import sys
import time

from scholarnotes.config import DEBUG_LOG_FILE, DEBUG_MODE, LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT


def _add_file_handler(logger: logging.Logger, path, level: int) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError as e:
        # Unwritable logs directory: run without a log file
        sys.stderr.write(f"ScholarNotes: file logging disabled ({e})\n")
        return
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)


def _setup_standard_logging() -> logging.Logger:
    """
    Configure the 'ScholarNotes' logger.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger('ScholarNotes')
    logger.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    _add_file_handler(logger, LOG_FILE, logging.INFO)

    if DEBUG_MODE:
        _add_file_handler(logger, DEBUG_LOG_FILE, logging.DEBUG)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(console_handler)

    return logger


_logger = _setup_standard_logging()


class Timer:
    """
    Context manager for timing code blocks with automatic logging.

    Usage:
        with Timer("Section stage"):
            ...

    Output (DEBUG_MODE=True):
        [DEBUG 14:32:01] Starting Section stage...
        [DEBUG 14:32:03] Section stage took 2.10s

    Attributes:
        operation_name: Name of the operation being timed
        duration_ms: Duration in milliseconds (available after exit)
    """

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.start_time: float | None = None
        self.duration_ms: float | None = None

    def __enter__(self):
        debug_log(f"Starting {self.operation_name}...")
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (time.perf_counter() - self.start_time) * 1000
        outcome = "failed after" if exc_type is not None else "took"
        debug_timing(f"{self.operation_name} {outcome}", self.duration_ms / 1000)
        return False  # Don't suppress exceptions


def debug_log(message: str):
    """
    Log a debug message (file and console only in DEBUG_MODE).

    Example:
        debug_log("[EXTRACT] Page 3/12: 418 words")
    """
    _logger.debug(message)


def info(message: str):
    """Log an informational message."""
    _logger.info(message)


def warning(message: str):
    """Log a warning message."""
    _logger.warning(message)


def error(message: str, exc_info: bool = False):
    """
    Log an error message with optional exception traceback.

    Args:
        message: The error message to log
        exc_info: If True, include exception traceback (only in DEBUG_MODE)
    """
    _logger.error(message, exc_info=exc_info and DEBUG_MODE)


def debug_timing(operation: str, elapsed_seconds: float):
    """
    Log operation timing in human-readable units.

    Example:
        debug_timing("Base stage", 12.3)  # "Base stage 12.30s"
    """
    if elapsed_seconds < 1:
        time_str = f"{elapsed_seconds*1000:.0f} ms"
    elif elapsed_seconds < 60:
        time_str = f"{elapsed_seconds:.2f}s"
    else:
        time_str = f"{elapsed_seconds/60:.1f}m"
    debug_log(f"{operation} {time_str}")


__all__ = [
    'debug_log',
    'debug_timing',
    'info',
    'warning',
    'error',
    'Timer',
    'DEBUG_MODE',
]
