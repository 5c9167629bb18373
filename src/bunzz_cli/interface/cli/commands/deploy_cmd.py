from __future__ import annotations

"""
'deploy' Command.

Compiles the project, uploads the root contract's ABI and bytecode, and
hands deployment over to the web frontend.
"""

import argparse
import logging
import os

from bunzz_cli.core.artifacts import load_artifact
from bunzz_cli.core.compiler import compile_project
from bunzz_cli.core.discovery import get_root_contract_name
from bunzz_cli.domain.constants import Environment
from bunzz_cli.domain.errors import BunzzError
from bunzz_cli.infra.browser import open_frontend
from bunzz_cli.infra.fs import normalize_path
from bunzz_cli.infra.network import send_artifacts
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)

DEPLOY_ROUTE = "deploy"


def run(args: argparse.Namespace) -> int:
    """
    Execute the 'deploy' command.

    Returns:
        int: Process exit code.
    """
    env = Environment.parse(args.env)
    project_root = normalize_path(args.path, os.getcwd())
    logger.info(i18n.t("deploy.status.deploying", default="Deploying project at {path}", path=project_root))

    try:
        compile_project(project_root)

        root_contract = args.contract
        if not root_contract:
            root_contract = get_root_contract_name(project_root)
            logger.info(i18n.t(
                "deploy.status.default_contract",
                default="No contract provided. Deploying {name}.sol",
                name=root_contract,
            ))

        artifact = load_artifact(project_root, root_contract)
        record_id = send_artifacts(env, artifact.abi, artifact.bytecode)
        url = open_frontend(env, DEPLOY_ROUTE, record_id)
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        return 1

    print(i18n.t("deploy.status.opened", default="Continue the deployment at {url}", url=url))
    return 0
