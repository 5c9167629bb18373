from __future__ import annotations

"""
Unit tests for Hardhat Configuration Management.

Verifies:
1. Compiler version cleaning and validation.
2. Rendering of generated configuration modules.
3. Extraction of settings from evaluated configuration objects.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from bunzz_cli.core.hardhat import (
    clean_solidity_version,
    parse_hardhat_exports,
    read_hardhat_config,
    render_hardhat_config,
    validate_solidity_version,
    write_hardhat_config,
    write_minimal_hardhat_config,
)
from bunzz_cli.domain.contract_models import OptimizerSettings
from bunzz_cli.domain.errors import HardhatConfigError, ProcessError

# -----------------------------------------------------------------------------
# VERSION HANDLING
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("v0.8.19+commit.7dd6d404", "0.8.19"),
    ("0.6.12", "0.6.12"),
    ("v0.4.24", "0.4.24"),
])
def test_clean_solidity_version(raw: str, expected: str) -> None:
    """TC-01: Prefix and build metadata are stripped."""
    assert clean_solidity_version(raw) == expected


@pytest.mark.parametrize("raw", ["0.8.20", "0.8", "8", "0.8.*"])
def test_validate_accepts_semver_like_versions(raw: str) -> None:
    """TC-02: X, X.Y, X.Y.Z and wildcard patch versions are kept."""
    assert validate_solidity_version(raw) == raw


@pytest.mark.parametrize("raw", ["", None, "latest", "0.8.x.1", "^0.8.0"])
def test_validate_falls_back_to_default(raw) -> None:
    """TC-03: Empty or malformed versions default to 0.8.0."""
    assert validate_solidity_version(raw) == "0.8.0"

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def test_render_with_optimizer() -> None:
    """TC-04: Optimizer and viaIR settings are emitted when enabled."""
    text = render_hardhat_config("v0.8.19+commit.1", OptimizerSettings(enabled=True, runs=1000, via_ir=True))

    assert 'version: "0.8.19"' in text
    assert "enabled: true" in text
    assert "runs: 1000" in text
    assert "viaIR: true" in text


def test_render_without_optimizer() -> None:
    """TC-05: A disabled optimizer is written out explicitly."""
    text = render_hardhat_config("0.7.6", OptimizerSettings(enabled=False, runs=200))

    assert text.startswith("module.exports = {")
    assert 'version: "0.7.6"' in text
    assert "enabled: false" in text
    assert "runs: 200" in text
    assert "viaIR: false" in text


def test_render_keeps_via_ir_without_optimizer() -> None:
    """The IR pipeline flag survives a disabled optimizer."""
    text = render_hardhat_config("v0.8.20+commit.a1b2", OptimizerSettings(enabled=False, runs=200, via_ir=True))

    assert "enabled: false" in text
    assert "viaIR: true" in text


def test_write_hardhat_config_variants(tmp_path: Path) -> None:
    """TC-06: The CommonJS flag switches the file extension."""
    js = write_hardhat_config(str(tmp_path), "0.8.0", OptimizerSettings(False, 0))
    cjs = write_hardhat_config(str(tmp_path), "0.8.0", OptimizerSettings(False, 0), as_common_js=True)

    assert Path(js).name == "hardhat.config.js"
    assert Path(cjs).name == "hardhat.config.cjs"
    assert Path(js).read_text(encoding="utf-8") == Path(cjs).read_text(encoding="utf-8")


def test_write_minimal_hardhat_config(tmp_path: Path) -> None:
    """TC-07: 'init' writes a single solidity version entry."""
    target = tmp_path / "hardhat.config.js"

    write_minimal_hardhat_config(str(target), "0.8.20")

    assert target.read_text(encoding="utf-8") == 'module.exports = {\n  solidity: "0.8.20",\n};\n'

# -----------------------------------------------------------------------------
# READING
# -----------------------------------------------------------------------------

def test_parse_exports_string_solidity() -> None:
    """TC-08: A bare version string and default paths."""
    settings = parse_hardhat_exports({"solidity": "0.8.4"})

    assert settings.solidity_version == "0.8.4"
    assert settings.sources_path == "contracts"
    assert settings.artifacts_path == "artifacts"
    assert settings.optimizer_enabled is False
    assert settings.optimizer_runs == 0


def test_parse_exports_object_solidity_and_paths() -> None:
    """TC-09: Version, optimizer and custom paths are extracted."""
    settings = parse_hardhat_exports({
        "solidity": {"version": "0.8.19", "settings": {"optimizer": {"enabled": True, "runs": 500}}},
        "paths": {"sources": "src", "artifacts": "build"},
    })

    assert settings.solidity_version == "0.8.19"
    assert settings.optimizer_enabled is True
    assert settings.optimizer_runs == 500
    assert settings.sources_path == "src"
    assert settings.artifacts_path == "build"


def test_parse_exports_multiple_compilers_uses_first() -> None:
    """TC-10: Multi-compiler configs use the first compiler entry."""
    settings = parse_hardhat_exports({
        "solidity": {"compilers": [{"version": "0.8.9"}, {"version": "0.6.12"}]},
    })

    assert settings.solidity_version == "0.8.9"


def test_parse_exports_without_version_raises() -> None:
    """TC-11: Missing solidity configuration is rejected."""
    with pytest.raises(HardhatConfigError, match="required fields"):
        parse_hardhat_exports({"paths": {}})


def test_parse_exports_non_numeric_runs_raises() -> None:
    """An optimizer runs value that is not a number is a config error."""
    with pytest.raises(HardhatConfigError, match="Invalid optimizer runs"):
        parse_hardhat_exports({"solidity": {"version": "0.8.19", "settings": {"optimizer": {"runs": "max"}}}})


def test_read_hardhat_config_missing_file(tmp_path: Path) -> None:
    """TC-12: A project without hardhat.config.js is rejected before running node."""
    with patch("bunzz_cli.core.hardhat.execute") as mock_exec:
        with pytest.raises(HardhatConfigError, match="bunzz init"):
            read_hardhat_config(str(tmp_path))
        mock_exec.assert_not_called()


def test_read_hardhat_config_evaluates_with_node(hardhat_project: Path) -> None:
    """TC-13: The JSON printed by node is mapped onto settings."""
    exported = {"solidity": "0.8.0", "paths": {"artifacts": "out"}}

    with patch("bunzz_cli.core.hardhat.execute", return_value=json.dumps(exported)) as mock_exec:
        settings = read_hardhat_config(str(hardhat_project))

    command = mock_exec.call_args[0][0]
    assert command[0] == "node"
    assert command[-1].endswith("hardhat.config.js")
    assert settings.artifacts_path == "out"
    assert settings.solidity_version == "0.8.0"


def test_read_hardhat_config_node_failure(hardhat_project: Path) -> None:
    """TC-14: Evaluation failures surface as HardhatConfigError."""
    error = ProcessError(["node"], 1, "SyntaxError: Unexpected token")

    with patch("bunzz_cli.core.hardhat.execute", side_effect=error):
        with pytest.raises(HardhatConfigError, match="SyntaxError"):
            read_hardhat_config(str(hardhat_project))
