# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Logging configuration with file rotation."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "tracestyler"


def setup_logging(
    app_name: str = "TraceStyler",
    console_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> Path:
    """
    Configure package logging with file rotation.

    Creates two log files:
    - tracestyler.log: DEBUG+ messages from the package (10 MB per file, 5 rotations)
    - errors.log: ERROR+ messages only (5 MB per file, 3 rotations)

    Args:
        app_name: Application name for the platform log directory
        console_level: Minimum level for console output (default: INFO)
        log_dir: Explicit log directory; the platform directory is used when omitted

    Returns:
        Path to the log directory
    """
    log_dir = Path(log_dir) if log_dir is not None else _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    # Calling this twice must not duplicate output
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_tracestyler_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    app_log_path = log_dir / "tracestyler.log"
    app_handler = RotatingFileHandler(
        app_log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(detailed_formatter)
    package_logger.addHandler(app_handler)

    error_log_path = log_dir / "errors.log"
    error_handler = RotatingFileHandler(
        error_log_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    error_handler._tracestyler_handler = True  # type: ignore[attr-defined]
    root_logger.addHandler(error_handler)

    # stdout carries command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)

    # Palette registration is chatty at DEBUG; keep it in the file only
    logging.getLogger("tracestyler.core.palettes").setLevel(logging.INFO)

    log = logging.getLogger(__name__)
    log.info(f"{app_name} logging initialized")
    log.info(f"Log directory: {log_dir}")
    log.debug(f"Platform: {sys.platform}, Python: {sys.version.split()[0]}")

    return log_dir


def _get_log_directory(app_name: str) -> Path:
    """
    Get platform-specific log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: ~/.local/share/AppName/logs
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name / "logs"

    elif sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", home / ".local" / "share")
        return Path(xdg_data_home) / app_name / "logs"


def get_log_directory(app_name: str = "TraceStyler") -> Path:
    """
    Get the log directory path without setting up logging.

    Useful for displaying log location to users or opening log folder.
    """
    return _get_log_directory(app_name)
