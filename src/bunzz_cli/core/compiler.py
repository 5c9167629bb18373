from __future__ import annotations

"""
Compiler Orchestration.

Prepares a project for a clean build, forwards compilation to the Hardhat
toolchain, and inspects the emitted artifacts directory.
"""

import logging
import os
from typing import Optional

from bunzz_cli.core.hardhat import hardhat_config_exists
from bunzz_cli.domain.constants import CACHE_DIR, DEFAULT_ARTIFACTS_DIR, DEFAULT_SOURCES_DIR
from bunzz_cli.domain.errors import CompilationError, HardhatConfigError, MissingContractsError, ProcessError
from bunzz_cli.infra.fs import remove_tree
from bunzz_cli.infra.process import execute

logger = logging.getLogger(__name__)

COMPILE_COMMAND = ["npx", "hardhat", "compile"]
_NOISE_MARKERS = ("--stack", "--verbose", "https://", "http://")

# -----------------------------------------------------------------------------
# PRE-BUILD
# -----------------------------------------------------------------------------

def delete_cache(project_root: str, artifacts_path: Optional[str] = None) -> None:
    """Remove Hardhat's cache and artifacts directories if present."""
    if remove_tree(os.path.join(project_root, CACHE_DIR)):
        logger.debug("Removed compiler cache.")
    artifacts_dir = os.path.join(project_root, artifacts_path or DEFAULT_ARTIFACTS_DIR)
    if remove_tree(os.path.abspath(artifacts_dir)):
        logger.debug(f"Removed artifacts at {artifacts_dir}")


def check_contracts(project_root: str, contracts_path: Optional[str] = None) -> str:
    """
    Ensure the sources directory exists.

    Returns:
        str: Absolute path of the sources directory.

    Raises:
        MissingContractsError: If the directory is absent.
    """
    contracts_dir = os.path.abspath(os.path.join(project_root, contracts_path or DEFAULT_SOURCES_DIR))
    if not os.path.isdir(contracts_dir):
        raise MissingContractsError(
            "No contracts folder found. Please run this command in the root of your project."
        )
    return contracts_dir

# -----------------------------------------------------------------------------
# COMPILATION
# -----------------------------------------------------------------------------

def filter_compiler_output(output: str) -> str:
    """Drop hint lines (stack/verbose flags, help URLs) from compiler output."""
    kept = [
        line for line in output.splitlines()
        if not any(marker in line for marker in _NOISE_MARKERS)
    ]
    return "\n".join(kept).strip()


def compile_project(project_root: str) -> str:
    """
    Compile all contracts of a Hardhat project.

    Returns:
        str: Raw compiler output.

    Raises:
        HardhatConfigError: If the project has no hardhat.config.js.
        CompilationError: If the compiler reports a failure.
    """
    if not hardhat_config_exists(project_root):
        raise HardhatConfigError(
            "Hardhat is required to proceed. Please initiate a project using `bunzz clone`"
        )

    try:
        return execute(COMPILE_COMMAND, project_root)
    except ProcessError as e:
        raise CompilationError(filter_compiler_output(e.output) or str(e))

# -----------------------------------------------------------------------------
# POST-BUILD
# -----------------------------------------------------------------------------

def count_artifacts(project_root: str, artifacts_path: Optional[str] = None) -> int:
    """
    Count compiled contract artifacts.

    Only '<Name>.json' files inside '<File>.sol' directories are counted;
    debug files ('*.dbg.json') are ignored.
    """
    artifacts_dir = os.path.join(project_root, artifacts_path or DEFAULT_ARTIFACTS_DIR)
    count = 0
    for root, _dirs, files in os.walk(artifacts_dir):
        if not os.path.basename(root).endswith(".sol"):
            continue
        count += sum(1 for f in files if f.endswith(".json") and not f.endswith(".dbg.json"))
    return count
