from __future__ import annotations

"""
'clone' Command.

Recreates a verified on-chain contract as a local Hardhat project:
fetches its sources, scaffolds the npm/Hardhat environment with the
original compiler settings, and materializes the normalized source tree.
A project directory created by a failed run is removed again.
"""

import argparse
import logging
import os
from typing import Optional

from bunzz_cli.core.hardhat import write_hardhat_config
from bunzz_cli.core.paths import materialize, normalize
from bunzz_cli.core.sources import parse_code
from bunzz_cli.domain.config import save_project_config
from bunzz_cli.domain.constants import Environment
from bunzz_cli.domain.contract_models import OptimizerSettings
from bunzz_cli.domain.errors import BunzzError, MissingArgumentError, ProjectExistsError
from bunzz_cli.infra.fs import make_project_directory, normalize_path, remove_tree
from bunzz_cli.infra.network import fetch_contract_info, send_cloning_analytics
from bunzz_cli.infra.npm import init_npm_repository
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """
    Execute the 'clone' command.

    Returns:
        int: Process exit code.
    """
    env = Environment.parse(args.env)
    parent = normalize_path(args.path, os.getcwd())
    project_root: Optional[str] = None

    try:
        if args.directory:
            project_root = make_project_directory(parent, args.directory)

        if not args.chain:
            raise MissingArgumentError("Missing chainId")
        if not args.address:
            raise MissingArgumentError("Missing contractAddress")

        logger.info(i18n.t(
            "clone.status.fetching",
            default="Fetching contract information for {address} from chain {chain}",
            address=args.address, chain=args.chain,
        ))
        info = fetch_contract_info(env, args.chain, args.address)

        if project_root is None:
            project_root = make_project_directory(parent, info.contract_name)

        logger.info(i18n.t("clone.status.importing", default="Importing code at {path}", path=project_root))
        init_npm_repository(project_root)

        write_hardhat_config(
            project_root,
            info.solidity_version,
            OptimizerSettings(enabled=info.optimization_used, runs=info.runs, via_ir=info.via_ir),
        )
        logger.info(i18n.t("clone.status.config_created", default="Hardhat config file created."))

        save_project_config(project_root, info.contract_name)

        logger.info(i18n.t("clone.status.parsing", default="Parsing contract code"))
        sources = parse_code(info.code, info.contract_name)
        if info.root_contract_path:
            logger.info(i18n.t("clone.status.root_contract", default="Root contract: {path}", path=info.root_contract_path))
        materialize(normalize(sources), project_root)

        print(i18n.t(
            "clone.status.created_files",
            default="Created {count} file(s)",
            count=len(sources),
        ))
        print(i18n.t("common.done", default="Done"))

    except ProjectExistsError as e:
        logger.error(str(e))
        return 1
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        if project_root is not None:
            logger.info(i18n.t("clone.status.deleting", default="Deleting {path}", path=project_root))
            remove_tree(project_root)
        return 1

    send_cloning_analytics(env, args.chain, args.address, info.contract_name)
    return 0
