from __future__ import annotations

"""
'import' Command.

Pulls the project-owned sources of a verified contract into an existing
project. Third-party ('@') files are left to the package manager. Shared
leading directories are collapsed and the remaining tree is written into
the contracts folder, which is appended to --path unless it already is one.
"""

import argparse
import logging
import os

from bunzz_cli.core.paths import collapse_common_prefix, materialize
from bunzz_cli.core.sources import drop_library_sources, parse_code
from bunzz_cli.domain.constants import Environment
from bunzz_cli.domain.errors import BunzzError, MissingArgumentError
from bunzz_cli.domain.source_models import CONTRACTS_ROOT
from bunzz_cli.infra.fs import normalize_path
from bunzz_cli.infra.network import fetch_contract_info
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """
    Execute the 'import' command.

    Returns:
        int: Process exit code.
    """
    env = Environment.parse(args.env)
    project_root = normalize_path(args.path, os.getcwd())

    try:
        if not args.chain:
            raise MissingArgumentError("Missing chainId")
        if not args.address:
            raise MissingArgumentError("Missing contractAddress")

        logger.info(i18n.t("import.status.importing", default="Importing code at {path}", path=project_root))
        logger.info(i18n.t(
            "import.status.fetching",
            default="Fetching contract info for {address} on chain {chain}",
            address=args.address, chain=args.chain,
        ))
        info = fetch_contract_info(env, args.chain, args.address)

        logger.info(i18n.t("import.status.parsing", default="Parsing contract code"))
        sources = drop_library_sources(parse_code(info.code, info.contract_name))
        materialize(collapse_common_prefix(sources), contracts_destination(project_root))
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        return 1

    print(i18n.t("common.done", default="Done"))
    return 0


def contracts_destination(project_root: str) -> str:
    """The contracts folder to import into: --path itself if it is one."""
    if os.path.basename(os.path.normpath(project_root)) == CONTRACTS_ROOT:
        return project_root
    logger.info(i18n.t(
        "import.status.appending_contracts",
        default="The path you provided does not end with /{folder}. Adding it.",
        folder=CONTRACTS_ROOT,
    ))
    return os.path.join(project_root, CONTRACTS_ROOT)
