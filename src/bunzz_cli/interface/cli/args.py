from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line schema: global diagnostic flags and one
subcommand per workflow, with help messages resolved through i18n.
"""

import argparse

from bunzz_cli.domain.constants import APP_VERSION, Environment
from bunzz_cli.utils.i18n import i18n

ENV_CHOICES = [e.value for e in Environment]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Bunzz CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="bunzz",
        description=i18n.t("app.description", default="Bunzz CLI"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file", default="Also write logs to this rotating file."),
    )

    sub = p.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    # --- init ---
    init_p = sub.add_parser("init", help=i18n.t("cli.commands.init", default="Initialize a new Bunzz project"))
    _add_path(init_p)
    init_p.add_argument(
        "--solidity-version",
        dest="solidity_version",
        default=None,
        help=i18n.t("cli.args.solidity_version", default="Solidity version for hardhat.config.js."),
    )
    init_p.add_argument(
        "--install-hardhat",
        dest="install_hardhat",
        action="store_true",
        help=i18n.t("cli.args.install_hardhat", default="Install the latest Hardhat, ignoring package.json."),
    )
    init_p.add_argument(
        "--install-openzeppelin",
        dest="install_openzeppelin",
        action="store_true",
        help=i18n.t("cli.args.install_openzeppelin", default="Also install @openzeppelin/contracts."),
    )
    init_p.add_argument(
        "-f", "--force",
        action="store_true",
        help=i18n.t("cli.args.force", default="Re-initialize even if hardhat.config.js exists."),
    )

    # --- clone ---
    clone_p = sub.add_parser("clone", help=i18n.t("cli.commands.clone", default="Clone a verified contract into a new project"))
    _add_target(clone_p)
    _add_path(clone_p)
    clone_p.add_argument(
        "-d", "--directory",
        default=None,
        help=i18n.t("cli.args.directory", default="Project directory name (defaults to the contract name)."),
    )
    _add_env(clone_p)

    # --- import ---
    import_p = sub.add_parser("import", help=i18n.t("cli.commands.import", default="Import a verified contract into this project"))
    _add_target(import_p)
    _add_path(import_p)
    _add_env(import_p)

    # --- build ---
    build_p = sub.add_parser("build", help=i18n.t("cli.commands.build", default="Compile all contracts"))
    _add_path(build_p)

    # --- deploy / upload ---
    for name, default_help in (
            ("deploy", "Deploy contract through the Bunzz frontend"),
            ("upload", "Upload contract artifacts and sources to Bunzz"),
    ):
        cmd_p = sub.add_parser(name, help=i18n.t(f"cli.commands.{name}", default=default_help))
        _add_path(cmd_p)
        cmd_p.add_argument(
            "-c", "--contract",
            default=None,
            help=i18n.t("cli.args.contract", default="Name of the root contract."),
        )
        _add_env(cmd_p)

    return p

# -----------------------------------------------------------------------------
# SHARED OPTIONS
# -----------------------------------------------------------------------------

def _add_path(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p", "--path",
        default=None,
        help=i18n.t("cli.args.path", default="Project path (defaults to the current directory)."),
    )


def _add_env(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-e", "--env",
        choices=ENV_CHOICES,
        default=Environment.PROD.value,
        help=i18n.t("cli.args.env", default="Environment to use [prod, dev, local]."),
    )


def _add_target(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--chain",
        default=None,
        help=i18n.t("cli.args.chain", default="Chain id of the deployed contract."),
    )
    parser.add_argument(
        "--address",
        default=None,
        help=i18n.t("cli.args.address", default="Address of the deployed contract."),
    )
