from __future__ import annotations

"""
npm Toolchain Infrastructure.

Bootstraps Node.js projects and installs the Hardhat / OpenZeppelin
development dependencies, honouring versions already pinned in an
existing package.json.
"""

import json
import logging
import os

from bunzz_cli.infra.process import execute

logger = logging.getLogger(__name__)

HARDHAT_PACKAGE = "hardhat"
OPENZEPPELIN_PACKAGE = "@openzeppelin/contracts"


def init_npm_repository(project_root: str) -> None:
    """
    Create a package.json and install Hardhat in a fresh project directory.

    Raises:
        ProcessError: If npm is unavailable or the installation fails.
    """
    logger.info("Initializing npm repository...")
    execute(["npm", "init", "-y"], project_root)
    install_dev_package(project_root, HARDHAT_PACKAGE)


def read_declared_version(project_root: str, package: str) -> str:
    """
    Return the version range of a package declared in package.json.

    devDependencies take precedence over dependencies. Returns '' when
    package.json is absent, unreadable, or does not mention the package.
    """
    package_json = os.path.join(project_root, "package.json")
    if not os.path.exists(package_json):
        return ""

    try:
        with open(package_json, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable package.json: {e}")
        return ""

    for section in ("devDependencies", "dependencies"):
        deps = data.get(section) if isinstance(data, dict) else None
        if isinstance(deps, dict) and deps.get(package):
            return str(deps[package])
    return ""


def install_dev_package(project_root: str, package: str, version: str = "") -> None:
    """
    Install an npm package as a dev dependency, optionally pinned.

    Raises:
        ProcessError: If the installation fails.
    """
    target = f"{package}@{version}" if version else package
    logger.info(f"Installing {target}...")
    execute(["npm", "install", "--save-dev", target], project_root)
    logger.info(f"{package} successfully installed.")
