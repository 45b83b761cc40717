# A_core/A00_logging.py
"""
Centralized logging configuration for the acronyms engine.

Provides consistent logging across the registry, styles, ingestion and
rendering modules with:
- Colored console output for different log levels
- Optional file logging with rotation
- A context manager for operation tracking with timing

Usage:
    from A_core.A00_logging import get_logger, LogContext

    logger = get_logger(__name__)
    logger.info("Loading acronyms")

    with LogContext(logger, "parsing definition file"):
        # ... ingestion code ...
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Generator, Optional, Union

ROOT_LOGGER_NAME = "acronyms"

# Default configuration
DEFAULT_LOG_DIR = Path("logs")
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3

# ANSI color codes for console output
COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
    "DIM": "\033[2m",
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds colors to console log output.

    Attributes:
        use_colors: Whether to apply ANSI color codes.
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_colors:
            level_color = COLORS.get(record.levelname, COLORS["RESET"])
            record.levelname = f"{level_color}{record.levelname}{COLORS['RESET']}"
            record.name = f"{COLORS['DIM']}{record.name}{COLORS['RESET']}"
        return super().format(record)


class AcronymsLogger:
    """
    Singleton logger manager for the acronyms engine.

    Every module logger lives under the ``acronyms`` namespace so that one
    call to ``configure`` controls the whole package.
    """

    _instance: Optional["AcronymsLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "AcronymsLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if AcronymsLogger._initialized:
            return

        self._log_dir: Path = DEFAULT_LOG_DIR
        self._log_level: int = DEFAULT_LOG_LEVEL
        self._file_handler: Optional[RotatingFileHandler] = None
        self._console_handler: Optional[logging.StreamHandler] = None
        self._run_id: Optional[str] = None

        AcronymsLogger._initialized = True

    def configure(
        self,
        log_dir: Optional[Union[str, Path]] = None,
        log_level: int = DEFAULT_LOG_LEVEL,
        run_id: Optional[str] = None,
        enable_file_logging: bool = False,
        enable_console_logging: bool = True,
    ) -> None:
        """
        Configure the logging system.

        Args:
            log_dir: Directory for log files. Created if it doesn't exist.
            log_level: Minimum log level to capture.
            run_id: Identifier of the current document-processing run.
            enable_file_logging: Whether to write logs to a rotating file.
            enable_console_logging: Whether to output to console.
        """
        self._log_level = log_level
        self._run_id = run_id or datetime.now().strftime("%Y%m%d_%H%M%S")

        if log_dir:
            self._log_dir = Path(log_dir)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()

        if enable_console_logging:
            self._console_handler = logging.StreamHandler(sys.stderr)
            self._console_handler.setLevel(log_level)
            self._console_handler.setFormatter(
                ColoredFormatter(
                    fmt="%(levelname)-8s | [acronyms] %(message)s",
                    datefmt=DEFAULT_DATE_FORMAT,
                )
            )
            root_logger.addHandler(self._console_handler)

        if enable_file_logging:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self._log_dir / f"acronyms_{self._run_id}.log"
            self._file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            self._file_handler.setLevel(log_level)
            self._file_handler.setFormatter(
                logging.Formatter(fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
            )
            root_logger.addHandler(self._file_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger for ``name`` under the package namespace."""
        if not name.startswith(ROOT_LOGGER_NAME):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @property
    def run_id(self) -> Optional[str]:
        return self._run_id


# Module-level singleton instance
_logger_manager = AcronymsLogger()


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_level: int = DEFAULT_LOG_LEVEL,
    run_id: Optional[str] = None,
    enable_file_logging: bool = False,
    enable_console_logging: bool = True,
) -> None:
    """
    Configure the acronyms logging system.

    This should be called once by the host application.

    Example:
        >>> configure_logging(log_level=logging.DEBUG, run_id="thesis_build")
    """
    _logger_manager.configure(
        log_dir=log_dir,
        log_level=log_level,
        run_id=run_id,
        enable_file_logging=enable_file_logging,
        enable_console_logging=enable_console_logging,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Registry created")
    """
    return _logger_manager.get_logger(name)


@contextmanager
def LogContext(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Generator[None, None, None]:
    """
    Context manager for logging operation start/end with timing.

    Example:
        >>> with LogContext(logger, "loading acronyms.yml"):
        ...     parse_from_yaml_file(registry, "acronyms.yml", "warn")
        DEBUG | Starting: loading acronyms.yml
        DEBUG | Completed: loading acronyms.yml (0.01s)
    """
    start_time = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - start_time
        logger.error(f"Failed: {operation} ({elapsed:.2f}s) - {type(e).__name__}: {e}")
        raise
    else:
        elapsed = time.perf_counter() - start_time
        logger.log(level, f"Completed: {operation} ({elapsed:.2f}s)")
