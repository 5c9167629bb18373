from __future__ import annotations

"""
External Process Infrastructure.

Thin wrapper over 'subprocess' used to drive the Node.js toolchain
(npm, npx hardhat, node). Output is captured and failures are converted
into ProcessError so that the command layer can report them uniformly.
"""

import logging
import shutil
import subprocess
from typing import Optional, Sequence

from bunzz_cli.domain.errors import ProcessError

logger = logging.getLogger(__name__)

DEFAULT_PROCESS_TIMEOUT = 600


def execute(
        command: Sequence[str],
        cwd: str,
        timeout: Optional[int] = DEFAULT_PROCESS_TIMEOUT,
) -> str:
    """
    Run an external command and return its combined output.

    Args:
        command: Executable and arguments.
        cwd: Working directory for the child process.
        timeout: Seconds before the child is killed.

    Returns:
        str: stdout followed by stderr.

    Raises:
        ProcessError: If the executable is missing, times out, or exits non-zero.
    """
    cmd = _resolve_executable(list(command))
    logger.debug(f"Executing {' '.join(cmd)} in {cwd}")

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError:
        raise ProcessError(cmd, 127, f"Executable not found: {cmd[0]}")
    except subprocess.TimeoutExpired:
        raise ProcessError(cmd, -1, f"Command timed out after {timeout}s: {' '.join(cmd)}")

    output = (result.stdout or "") + (result.stderr or "")
    if result.returncode != 0:
        raise ProcessError(cmd, result.returncode, output)
    return output


def _resolve_executable(cmd: list) -> list:
    # npm/npx are .cmd shims on Windows
    found = shutil.which(cmd[0]) if cmd else None
    if found:
        cmd[0] = found
    return cmd
