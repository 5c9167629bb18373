from __future__ import annotations

"""
Logging Sinks.

Builds the stderr and rotating-file handlers behind the queue listener.
Every handler created here is tagged so that reconfiguration only ever
removes what this package installed, leaving pytest's or a host
application's handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from bunzz_cli.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_bunzz_cli_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the output handlers requested by a configuration.

    Args:
        cfg: Logging settings of the current run.

    Returns:
        List[logging.Handler]: Zero, one or two tagged handlers.
    """
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_console_handler(cfg))
    if cfg.log_file:
        fh = _file_handler(cfg)
        if fh is not None:
            sinks.append(fh)
    return sinks


def _console_handler(cfg: LoggingConfig) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(cfg.level_int)
    sh.setFormatter(logging.Formatter(cfg.console_fmt))
    return _tag_handler(sh)


def _file_handler(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file.

    An unwritable location must not stop the command itself, so the
    problem is reported on stderr and the file sink is skipped.
    """
    log_file = str(cfg.log_file)
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot write log file '{log_file}': {e}\n")
        return None

    fh.setLevel(cfg.level_int)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return _tag_handler(fh)
