from __future__ import annotations

import json
import logging
import os

from bunzz_cli.domain.constants import DEFAULT_ARTIFACTS_DIR, DEFAULT_SOURCES_DIR
from bunzz_cli.domain.contract_models import ContractArtifact
from bunzz_cli.domain.errors import ArtifactNotFoundError

logger = logging.getLogger(__name__)


def get_artifact_path(
        project_root: str,
        root_contract: str,
        artifacts_path: str = DEFAULT_ARTIFACTS_DIR,
) -> str:
    """
    Locate the artifact of a contract.

    'root_contract' may be a bare name ('Token') or a path below
    contracts/ ('tokens/Token'); the JSON file is named after its last
    segment without extension.
    """
    contract_name = root_contract.split("/")[-1].split(".")[0]
    return os.path.join(
        project_root,
        artifacts_path,
        DEFAULT_SOURCES_DIR,
        f"{root_contract}.sol",
        f"{contract_name}.json",
    )


def load_artifact(
        project_root: str,
        root_contract: str,
        artifacts_path: str = DEFAULT_ARTIFACTS_DIR,
) -> ContractArtifact:
    """
    Read ABI and bytecode of a compiled contract.

    Raises:
        ArtifactNotFoundError: If the artifact is missing or unreadable.
    """
    path = get_artifact_path(project_root, root_contract, artifacts_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logger.debug(f"Artifact lookup failed at {path}")
        raise ArtifactNotFoundError(
            f"Contract {root_contract} not found in artifacts folder. Exiting."
        )

    if not isinstance(data, dict):
        raise ArtifactNotFoundError(f"Contract {root_contract} artifact is malformed.")
    return ContractArtifact(abi=data.get("abi") or [], bytecode=data.get("bytecode") or "")
