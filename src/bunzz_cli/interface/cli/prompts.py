from __future__ import annotations

"""
Interactive Terminal Prompts.

Default implementations of the decision callbacks injected into the
commands. Commands never prompt directly, so they stay testable without
a terminal attached.
"""

from typing import Callable, List

from rich.prompt import Prompt

from bunzz_cli.utils.i18n import i18n

VersionPrompt = Callable[[], str]
ContractChooser = Callable[[List[str]], str]


def ask_solidity_version() -> str:
    """Ask which Solidity version the new project should target."""
    return Prompt.ask(
        i18n.t(
            "init.prompt.version",
            default="What version of Solidity do you want to use? (if no option is provided, 0.8.0 will be used)",
        ),
        default="",
        show_default=False,
    )


def choose_root_contract(contract_names: List[str]) -> str:
    """Ask the user to pick the root contract among the discovered ones."""
    unique = list(dict.fromkeys(contract_names))
    return Prompt.ask(
        i18n.t(
            "upload.prompt.select_contract",
            default="Please select the contract that you wanna use as the root contract during deployment",
        ),
        choices=unique,
        default=unique[0],
    )
