from __future__ import annotations

"""
Unit tests for Compiler Orchestration.

The Hardhat toolchain is never invoked; 'execute' is patched.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bunzz_cli.core.compiler import (
    COMPILE_COMMAND,
    check_contracts,
    compile_project,
    count_artifacts,
    delete_cache,
    filter_compiler_output,
)
from bunzz_cli.domain.errors import (
    CompilationError,
    HardhatConfigError,
    MissingContractsError,
    ProcessError,
)


def test_delete_cache_removes_cache_and_artifacts(hardhat_project: Path) -> None:
    """TC-01: Both build directories are removed."""
    (hardhat_project / "cache").mkdir()
    (hardhat_project / "out" / "x").mkdir(parents=True)

    delete_cache(str(hardhat_project), "out")

    assert not (hardhat_project / "cache").exists()
    assert not (hardhat_project / "out").exists()
    assert (hardhat_project / "contracts").exists()


def test_check_contracts(hardhat_project: Path, tmp_path: Path) -> None:
    """TC-02: Present sources dir is returned, missing one is rejected."""
    assert check_contracts(str(hardhat_project)) == os.path.abspath(str(hardhat_project / "contracts"))

    with pytest.raises(MissingContractsError, match="No contracts folder found"):
        check_contracts(str(tmp_path / "empty"))


def test_filter_compiler_output() -> None:
    """TC-03: Hint lines are dropped, diagnostics kept."""
    output = (
        "Error HH600: Compilation failed\n"
        "ParserError: Expected ';'\n"
        "For more info go to https://hardhat.org/HH600\n"
        "Run with --stack to see the full trace\n"
    )

    assert filter_compiler_output(output) == "Error HH600: Compilation failed\nParserError: Expected ';'"


def test_compile_requires_hardhat_config(tmp_path: Path) -> None:
    """TC-04: Projects without a config are rejected."""
    with patch("bunzz_cli.core.compiler.execute") as mock_exec:
        with pytest.raises(HardhatConfigError, match="bunzz clone"):
            compile_project(str(tmp_path))
        mock_exec.assert_not_called()


def test_compile_runs_hardhat(hardhat_project: Path) -> None:
    """TC-05: 'npx hardhat compile' runs in the project root."""
    with patch("bunzz_cli.core.compiler.execute", return_value="Compiled 1 Solidity file") as mock_exec:
        out = compile_project(str(hardhat_project))

    mock_exec.assert_called_once_with(COMPILE_COMMAND, str(hardhat_project))
    assert out == "Compiled 1 Solidity file"


def test_compile_failure_is_filtered(hardhat_project: Path) -> None:
    """TC-06: Failures carry the filtered compiler output."""
    error = ProcessError(COMPILE_COMMAND, 1, "TypeError: bad\nFor help see https://hardhat.org\n")

    with patch("bunzz_cli.core.compiler.execute", side_effect=error):
        with pytest.raises(CompilationError) as exc_info:
            compile_project(str(hardhat_project))

    assert str(exc_info.value) == "TypeError: bad"


def test_count_artifacts(tmp_path: Path) -> None:
    """TC-07: Only contract JSON files inside '.sol' folders are counted."""
    sol_dir = tmp_path / "artifacts" / "contracts" / "Token.sol"
    sol_dir.mkdir(parents=True)
    (sol_dir / "Token.json").write_text("{}")
    (sol_dir / "Token.dbg.json").write_text("{}")
    (sol_dir / "Helper.json").write_text("{}")
    build_info = tmp_path / "artifacts" / "build-info"
    build_info.mkdir()
    (build_info / "abc.json").write_text("{}")

    assert count_artifacts(str(tmp_path)) == 2


def test_count_artifacts_missing_dir(tmp_path: Path) -> None:
    """TC-08: An absent artifacts dir counts as zero."""
    assert count_artifacts(str(tmp_path)) == 0
