from __future__ import annotations

"""
Process entry point for the `bunzz` executable.

Anything that escapes a command's own error handling is a bug in the
CLI. The crash hook logs it (reaching --log-file when one was given) and
prints the trace under a banner users can paste into an issue.
"""

import logging
import os
import sys
import traceback
from types import TracebackType
from typing import Optional, Type

# Running `python src/bunzz_cli/main.py` from a checkout
_SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

_BANNER = "=" * 80


def report_crash(
        exc_type: Type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
) -> None:
    """sys.excepthook replacement: log, print the trace and exit with 1."""
    trace = "".join(traceback.format_exception(exc_type, exc, tb))
    logging.getLogger("bunzz_cli.crash").critical(f"Unhandled {exc_type.__name__}: {exc}\n{trace}")

    sys.stderr.write(f"\n{_BANNER}\nbunzz crashed unexpectedly\n{_BANNER}\n{trace}")
    sys.exit(1)


def main() -> int:
    sys.excepthook = report_crash
    from bunzz_cli.interface.cli.app import main as run_cli
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
