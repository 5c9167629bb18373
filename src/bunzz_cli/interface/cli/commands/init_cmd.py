from __future__ import annotations

"""
'init' Command.

Turns the current directory into a minimal Hardhat project: installs
Hardhat (and optionally OpenZeppelin), writes a single-version config,
and creates the contracts/ folder.
"""

import argparse
import logging
import os
from typing import Optional

from bunzz_cli.core.hardhat import (
    get_hardhat_config_path,
    hardhat_config_exists,
    validate_solidity_version,
    write_minimal_hardhat_config,
)
from bunzz_cli.domain.constants import DEFAULT_SOURCES_DIR
from bunzz_cli.domain.errors import BunzzError
from bunzz_cli.infra.fs import normalize_path
from bunzz_cli.infra.npm import (
    HARDHAT_PACKAGE,
    OPENZEPPELIN_PACKAGE,
    install_dev_package,
    read_declared_version,
)
from bunzz_cli.interface.cli.prompts import VersionPrompt, ask_solidity_version
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, ask_version: Optional[VersionPrompt] = None) -> int:
    """
    Execute the 'init' command.

    Args:
        args: Parsed command-line arguments.
        ask_version: Callback used when no --solidity-version is given.

    Returns:
        int: Process exit code.
    """
    project_root = normalize_path(args.path, os.getcwd())

    if not args.force and hardhat_config_exists(project_root):
        logger.info(i18n.t("init.status.already_initialized", default="Hardhat is already initialized. Exiting."))
        return 0

    try:
        # --install-hardhat ignores the version pinned in package.json
        pinned = "" if args.install_hardhat else read_declared_version(project_root, HARDHAT_PACKAGE)
        install_dev_package(project_root, HARDHAT_PACKAGE, pinned)

        if args.install_openzeppelin:
            install_dev_package(
                project_root,
                OPENZEPPELIN_PACKAGE,
                read_declared_version(project_root, OPENZEPPELIN_PACKAGE),
            )

        requested = args.solidity_version
        if not requested:
            requested = (ask_version or ask_solidity_version)()
        version = validate_solidity_version((requested or "").strip())

        write_minimal_hardhat_config(get_hardhat_config_path(project_root), version)
        logger.info(i18n.t("init.status.config_created", default="Hardhat config file created."))

        os.makedirs(os.path.join(project_root, DEFAULT_SOURCES_DIR), exist_ok=True)
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        return 1

    return 0
