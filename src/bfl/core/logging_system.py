"""Logging system for the simulator components.

This module configures logging from an optional YAML file, places log files in
a platform-aware directory and rotates them on every start, keeping the last
runs around for comparison.

Platform-specific log locations:
    - macOS: ~/Library/Logs/BalancedFieldLength/bfl.log
    - Linux: ~/.bfl/logs/bfl.log
    - Windows: %AppData%/BalancedFieldLength/Logs/bfl.log

Typical usage example:
    from bfl.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Sweep started")
    logger.debug("Failure speed %d: continued=%.1f m", speed, distance)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False

DEFAULT_LOG_FILENAME = "bfl.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory.
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "BalancedFieldLength"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "BalancedFieldLength" / "Logs"
    else:
        return Path.home() / ".bfl" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    The current log becomes ``<name>.1``, older logs shift up by one and the
    log beyond ``keep_count`` is deleted.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system.

    Should be called once at startup before any logging occurs. Calling
    ``get_logger`` first initializes the system with default settings.

    Args:
        config_path: Path to a logging configuration YAML file. If None, the
            default configuration is used.
        use_platform_dir: If True, log to the platform-specific directory,
            otherwise to the ``log_dir`` from the configuration.

    Raises:
        LoggingError: If the configuration file cannot be loaded.
    """
    global _logging_config, _initialized

    _reset_components()

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    file_config = _logging_config.get("file", {})
    rotate_logs(
        log_dir,
        file_config.get("filename", DEFAULT_LOG_FILENAME),
        file_config.get("backup_count", 5),
    )

    _configure_root_logger()
    _loggers_cache.clear()

    # Module loggers exist before a configuration file is loaded
    for name in (_logging_config.get("components") or {}):
        _apply_component_config(logging.getLogger(name))

    _initialized = True


def _reset_components() -> None:
    for name in (_logging_config.get("components") or {}):
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False


def _apply_component_config(logger: logging.Logger) -> None:
    component_config = (_logging_config.get("components") or {}).get(logger.name, {})

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))
    else:
        logger.disabled = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "file": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    """Configure the root logger with console and file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    file_config = _logging_config.get("file", {})
    if file_config.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        file_handler = logging.FileHandler(
            log_dir / file_config.get("filename", DEFAULT_LOG_FILENAME),
            mode="w",
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. A component can be given its own level, or be
    disabled, in the ``components`` section of the logging configuration:

        components:
          bfl.calculator.distance_calculator:
            level: INFO

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings in the inner simulation
        loop.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
