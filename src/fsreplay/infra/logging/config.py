from __future__ import annotations

"""
Logging Configuration Models.

Settings consumed by configure_logging together with the mapping from
level names to the numeric constants of the logging module.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size of a log file segment before rotation.
        backup_count: Number of rotated segments to keep.
        console_fmt: Record format on the terminal.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format used by file_fmt.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024  # 1MB
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
