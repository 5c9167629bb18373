from __future__ import annotations

"""
'upload' Command.

Compiles the project with its own Hardhat settings, determines the root
contract (flag, project config, or interactive choice), and uploads the
artifacts together with every source file the root contract depends on.
"""

import argparse
import logging
import os
from typing import List, Optional

from bunzz_cli.core.artifacts import load_artifact
from bunzz_cli.core.compiler import check_contracts, compile_project, delete_cache
from bunzz_cli.core.discovery import (
    collect_all_solidity_files,
    collect_root_contract_files,
    get_contract_names,
)
from bunzz_cli.core.hardhat import read_hardhat_config
from bunzz_cli.domain.config import load_root_contract_name
from bunzz_cli.domain.constants import Environment
from bunzz_cli.domain.errors import BunzzError, CompilationError, MissingContractsError
from bunzz_cli.infra.browser import open_frontend
from bunzz_cli.infra.fs import normalize_path
from bunzz_cli.infra.network import send_artifacts
from bunzz_cli.interface.cli.prompts import ContractChooser, choose_root_contract
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)

UPLOAD_ROUTE = "repository/upload"


def run(args: argparse.Namespace, chooser: Optional[ContractChooser] = None) -> int:
    """
    Execute the 'upload' command.

    Args:
        args: Parsed command-line arguments.
        chooser: Callback picking the root contract when none is configured.

    Returns:
        int: Process exit code.
    """
    env = Environment.parse(args.env)
    project_root = normalize_path(args.path, os.getcwd())
    logger.info(i18n.t("upload.status.started", default="Started the uploading process for {path}", path=project_root))

    try:
        root_contract = args.contract or load_root_contract_name(project_root)
        settings = read_hardhat_config(project_root)

        logger.info(i18n.t("upload.status.compiling", default="Compiling the contracts..."))
        delete_cache(project_root, settings.artifacts_path)
        check_contracts(project_root, settings.sources_path)
        compile_project(project_root)

        if not os.path.exists(os.path.join(project_root, settings.artifacts_path)):
            raise CompilationError(
                "The project is not compiled yet, please run `bunzz build` to compile it."
            )

        if not root_contract:
            root_contract = _select_root_contract(
                collect_all_solidity_files(settings.sources_path, project_root),
                chooser or choose_root_contract,
            )
            logger.info(i18n.t("upload.status.selected", default="Selected Contract: {name}", name=root_contract))

        solidity_files = collect_root_contract_files(settings.sources_path, project_root, root_contract)
        artifact = load_artifact(project_root, root_contract, settings.artifacts_path)

        logger.info(i18n.t("upload.status.sending", default="Sending artifacts to bunzz..."))
        record_id = send_artifacts(
            env,
            artifact.abi,
            artifact.bytecode,
            contract_name=root_contract,
            solidity_version=settings.solidity_version,
            optimizer_enabled=settings.optimizer_enabled,
            optimizer_runs=settings.optimizer_runs,
            solidity_files=solidity_files,
        )
        open_frontend(env, UPLOAD_ROUTE, record_id)
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        return 1

    print(i18n.t("common.done", default="Done"))
    return 0


def _select_root_contract(files: List, chooser: ContractChooser) -> str:
    names: List[str] = []
    for f in files:
        names.extend(get_contract_names(f.content))
    if not names:
        raise MissingContractsError("No contracts found. Exiting...")
    return chooser(names)
