from __future__ import annotations

"""
Logging Lifecycle.

Commands log through the root logger, which only holds a QueueHandler.
A QueueListener thread drains the queue into the sinks built from the
run's LoggingConfig, so slow file writes never stall npm or HTTP work.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from bunzz_cli.infra.logging.config import LoggingConfig
from bunzz_cli.infra.logging.handlers import _is_our_handler, _tag_handler, build_sinks

_CONFIGURED_FLAG_ATTR: str = "_bunzz_cli_configured"
_QUEUE_LISTENER_ATTR: str = "_bunzz_cli_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route the root logger through the queue listener.

    The first call wins; later calls return immediately unless 'force'
    asks for the current sinks to be replaced.

    Args:
        cfg: Sinks and threshold of the run.
        force: Tear down an existing setup and rebuild it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _teardown(root)
    root.setLevel(cfg.level_int)

    sinks = build_sinks(cfg)
    if sinks:
        _attach(root, sinks)
    return root


def shutdown_logging() -> None:
    """Flush queued records and remove everything configure_logging installed."""
    _teardown(logging.getLogger())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _attach(root: logging.Logger, sinks: List[logging.Handler]) -> None:
    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(records)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_stop_listener, listener)


def _teardown(root: logging.Logger) -> None:
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for handler in [h for h in root.handlers if _is_our_handler(h)]:
        root.removeHandler(handler)
        handler.close()
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # atexit may reach a listener that shutdown_logging already joined.
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
        for sink in listener.handlers:
            sink.close()
