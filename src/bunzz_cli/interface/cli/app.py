from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, and
dispatch to the command implementations. Interactive decisions are
injected here so that commands can be driven headlessly.
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional

from bunzz_cli.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from bunzz_cli.interface.cli import args as cli_args
from bunzz_cli.interface.cli.commands import (
    build_cmd,
    clone_cmd,
    deploy_cmd,
    import_cmd,
    init_cmd,
    upload_cmd,
)
from bunzz_cli.interface.cli.prompts import ContractChooser, VersionPrompt
from bunzz_cli.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        *,
        ask_version: Optional[VersionPrompt] = None,
        chooser: Optional[ContractChooser] = None,
) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        ask_version: Override for the Solidity version prompt ('init').
        chooser: Override for the root contract prompt ('upload').

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))
    logger.debug(f"CLI execution initiated: command={args.command}")

    handlers: Dict[str, Callable[[argparse.Namespace], int]] = {
        "init": lambda a: init_cmd.run(a, ask_version=ask_version),
        "clone": clone_cmd.run,
        "import": import_cmd.run,
        "build": build_cmd.run,
        "deploy": deploy_cmd.run,
        "upload": lambda a: upload_cmd.run(a, chooser=chooser),
    }

    try:
        code = handlers[args.command](args)
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.status.interrupted", default="Operation interrupted by user."))
        code = 130

    # Crashes skip this so the excepthook can still reach the log file.
    shutdown_logging()
    return code


if __name__ == "__main__":
    sys.exit(main())
