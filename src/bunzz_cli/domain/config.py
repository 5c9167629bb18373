from __future__ import annotations

"""
Project Configuration Domain Management.

Handles the per-project 'bunzz.config.json' file that records which
contract a cloned project was created for. Missing or corrupted files
degrade to an empty value rather than failing the command.
"""

import json
import logging
import os
from typing import Any, Dict

from bunzz_cli.domain.constants import PROJECT_CONFIG_FILE

logger = logging.getLogger(__name__)


def get_project_config_path(project_root: str) -> str:
    """Resolve the location of the project configuration file."""
    return os.path.join(project_root, PROJECT_CONFIG_FILE)


def save_project_config(project_root: str, contract_name: str) -> str:
    """
    Persist the project configuration.

    Args:
        project_root: Directory of the project.
        contract_name: Root contract recorded for later uploads.

    Returns:
        str: Path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    path = get_project_config_path(project_root)
    data: Dict[str, Any] = {"contractName": contract_name}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")
    logger.debug(f"Project configuration saved to {path}")
    return path


def load_root_contract_name(project_root: str) -> str:
    """
    Read the root contract name from the project configuration.

    Returns:
        str: The configured name, or an empty string when unavailable.
    """
    path = get_project_config_path(project_root)
    if not os.path.exists(path):
        logger.debug("Project config file not found.")
        return ""

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable project config '{path}': {e}")
        return ""

    if not isinstance(data, dict):
        return ""
    name = data.get("contractName")
    return name if isinstance(name, str) else ""
