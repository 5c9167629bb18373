from __future__ import annotations

"""
Logging Settings.

A CLI run logs to stderr for the user and, on request, to a rotating file
that can be attached to bug reports. Both sinks share one threshold.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Sinks and threshold for one CLI run.

    Attributes:
        level: Severity name ('DEBUG', 'INFO', ...); unknown names mean INFO.
        console: Write records to stderr.
        log_file: Rotating file receiving the same records, if set.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = CONSOLE_FORMAT
    file_fmt: str = FILE_FORMAT
    datefmt: str = FILE_DATE_FORMAT

    @classmethod
    def for_cli(cls, debug: bool, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings derived from the global --debug / --log-file flags."""
        return cls(level="DEBUG" if debug else "INFO", log_file=log_file or None)

    @property
    def level_int(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
