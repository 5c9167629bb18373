from __future__ import annotations

"""
Unit tests for compiled artifact lookup.
"""

import json
import os
from pathlib import Path

import pytest

from bunzz_cli.core.artifacts import get_artifact_path, load_artifact
from bunzz_cli.domain.errors import ArtifactNotFoundError


def _write_artifact(root: Path, rel_dir: str, name: str, data) -> None:
    target = root / "artifacts" / "contracts" / rel_dir
    target.mkdir(parents=True, exist_ok=True)
    (target / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")


def test_get_artifact_path_nested_contract(tmp_path: Path) -> None:
    """TC-01: The JSON file is named after the last path segment."""
    path = get_artifact_path(str(tmp_path), "tokens/Token")

    assert path == os.path.join(str(tmp_path), "artifacts", "contracts", "tokens/Token.sol", "Token.json")


def test_load_artifact(tmp_path: Path) -> None:
    """TC-02: ABI and bytecode are read from the artifact."""
    _write_artifact(tmp_path, "Token.sol", "Token", {"abi": [{"type": "constructor"}], "bytecode": "0x60"})

    artifact = load_artifact(str(tmp_path), "Token")

    assert artifact.abi == [{"type": "constructor"}]
    assert artifact.bytecode == "0x60"


def test_load_artifact_missing(tmp_path: Path) -> None:
    """TC-03: A missing artifact is reported with the contract name."""
    with pytest.raises(ArtifactNotFoundError, match="Contract Ghost not found"):
        load_artifact(str(tmp_path), "Ghost")


def test_load_artifact_malformed(tmp_path: Path) -> None:
    """TC-04: Non-object JSON is rejected."""
    _write_artifact(tmp_path, "Bad.sol", "Bad", ["not", "an", "object"])

    with pytest.raises(ArtifactNotFoundError, match="malformed"):
        load_artifact(str(tmp_path), "Bad")
