from __future__ import annotations

"""
Shared pytest fixtures.

Puts src/ on sys.path for uninstalled checkouts and provides a sample
Standard JSON contract document plus a ready-made Hardhat project tree.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def standard_json_document() -> Dict[str, Any]:
    """
    Return a verified contract document with a multi-file payload.

    The 'code' field uses the double-brace wrapping emitted by block
    explorers for standard-json inputs.

    Returns:
        Dict[str, Any]: A document as returned by 'fetchContractDoc'.
    """
    sources = {
        "language": "Solidity",
        "sources": {
            "src/Token.sol": {"content": 'import "./lib/Math.sol";\ncontract Token {}\n'},
            "src/lib/Math.sol": {"content": "library Math {}\n"},
            "@openzeppelin/contracts/token/ERC20/ERC20.sol": {"content": "contract ERC20 {}\n"},
        },
    }
    return {
        "code": "{" + json.dumps(sources) + "}",
        "contractName": "Token",
        "solidityVersion": "v0.8.19+commit.7dd6d404",
        "optimizationUsed": True,
        "runs": 1000,
        "viaIR": False,
        "rootContractPath": "src/Token.sol",
    }


@pytest.fixture
def hardhat_project(tmp_path: Path) -> Path:
    """
    Create a minimal Hardhat project layout on disk.

    Returns:
        Path: Project root containing hardhat.config.js and contracts/.
    """
    root = tmp_path / "project"
    (root / "contracts").mkdir(parents=True)
    (root / "hardhat.config.js").write_text('module.exports = {\n  solidity: "0.8.0",\n};\n', encoding="utf-8")
    return root
