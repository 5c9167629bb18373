from __future__ import annotations

"""
'build' Command.

Performs a clean compilation of every contract in the project and reports
how many artifacts were produced.
"""

import argparse
import logging
import os

from bunzz_cli.core.compiler import check_contracts, compile_project, count_artifacts, delete_cache
from bunzz_cli.domain.errors import BunzzError
from bunzz_cli.infra.fs import normalize_path
from bunzz_cli.utils.i18n import i18n

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """
    Execute the 'build' command.

    Returns:
        int: Process exit code.
    """
    project_root = normalize_path(args.path, os.getcwd())
    logger.info(i18n.t("build.status.compiling", default="Compiling all smart contracts at {path}", path=project_root))

    try:
        delete_cache(project_root)
        check_contracts(project_root)
        compile_project(project_root)
    except (BunzzError, OSError) as e:
        logger.error(str(e))
        return 1

    compiled = count_artifacts(project_root)
    print(i18n.t(
        "build.status.compiled",
        default="Compiled {count} contract{suffix}.",
        count=compiled, suffix="s" if compiled > 1 else "",
    ))
    print(i18n.t(
        "build.status.next_steps",
        default="Please run `bunzz deploy` or `bunzz upload` to deploy/upload this contract.",
    ))
    return 0
