from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, project directory creation, and the
materialization of normalized source trees onto disk.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bunzz_cli.core.paths import materialize, normalize
from bunzz_cli.domain.errors import ProjectExistsError, UnsafePathError
from bunzz_cli.domain.source_models import SourceRecord
from bunzz_cli.infra.fs import make_project_directory, normalize_path, remove_tree

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_fallback_and_expansion(tmp_path: Path) -> None:
    """TC-01: Empty input uses the fallback; variables and ~ expand."""
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)

    with patch.dict(os.environ, {"BUNZZ_TEST_DIR": str(tmp_path)}):
        assert normalize_path("$BUNZZ_TEST_DIR/x", "/") == os.path.join(str(tmp_path), "x")

# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT TESTS
# -----------------------------------------------------------------------------

def test_make_project_directory(tmp_path: Path) -> None:
    """TC-02: A new directory is created, an existing one is refused."""
    created = make_project_directory(str(tmp_path), "Token")

    assert os.path.isdir(created)
    with pytest.raises(ProjectExistsError, match="already exists"):
        make_project_directory(str(tmp_path), "Token")


def test_remove_tree(tmp_path: Path) -> None:
    """TC-03: Removal reports whether anything was deleted."""
    target = tmp_path / "a" / "b"
    target.mkdir(parents=True)

    assert remove_tree(str(tmp_path / "a")) is True
    assert remove_tree(str(tmp_path / "a")) is False

# -----------------------------------------------------------------------------
# MATERIALIZATION TESTS
# -----------------------------------------------------------------------------

def test_materialize_normalized_tree(tmp_path: Path) -> None:
    """TC-04: Exactly the normalized files are written, then overwritten on re-run."""
    tree = {"foo/A.sol": SourceRecord("a"), "foo/bar/B.sol": SourceRecord("b")}

    materialize(normalize(tree), str(tmp_path))

    written = sorted(
        os.path.relpath(os.path.join(root, f), tmp_path).replace(os.sep, "/")
        for root, _dirs, files in os.walk(tmp_path)
        for f in files
    )
    assert written == ["contracts/A.sol", "contracts/bar/B.sol"]
    assert (tmp_path / "contracts" / "A.sol").read_bytes() == b"a"
    assert (tmp_path / "contracts" / "bar" / "B.sol").read_bytes() == b"b"

    updated = {"foo/A.sol": SourceRecord("a2"), "foo/bar/B.sol": SourceRecord("b2")}
    materialize(normalize(updated), str(tmp_path))

    assert (tmp_path / "contracts" / "A.sol").read_text(encoding="utf-8") == "a2"
    assert (tmp_path / "contracts" / "bar" / "B.sol").read_text(encoding="utf-8") == "b2"


def test_materialize_creates_missing_root(tmp_path: Path) -> None:
    """TC-05: The project root itself is created if absent."""
    root = tmp_path / "new" / "project"

    materialize({"@oz/L.sol": SourceRecord("lib")}, str(root))

    assert (root / "@oz" / "L.sol").read_text(encoding="utf-8") == "lib"


def test_materialize_keeps_line_endings(tmp_path: Path) -> None:
    """TC-06: Content is written byte-for-byte without newline translation."""
    materialize({"contracts/A.sol": SourceRecord("line1\r\nline2\n")}, str(tmp_path))

    assert (tmp_path / "contracts" / "A.sol").read_bytes() == b"line1\r\nline2\n"


def test_materialize_propagates_os_errors(tmp_path: Path) -> None:
    """TC-07: A file blocking a directory path surfaces as OSError."""
    (tmp_path / "contracts").write_text("not a dir", encoding="utf-8")

    with pytest.raises(OSError):
        materialize({"contracts/A.sol": SourceRecord("a")}, str(tmp_path))


def test_materialize_rejects_paths_escaping_the_root(tmp_path: Path) -> None:
    """TC-08: A server key climbing out of the project aborts before any write."""
    project = tmp_path / "proj"
    tree = normalize({"a/A.sol": SourceRecord("a"), "../../evil.sol": SourceRecord("x")})

    with pytest.raises(UnsafePathError, match="evil.sol"):
        materialize(tree, str(project))

    assert not (tmp_path / "evil.sol").exists()
    assert not project.exists()


def test_materialize_allows_dot_segments_inside_the_root(tmp_path: Path) -> None:
    """TC-09: '..' that stays below the project root is accepted."""
    materialize({"contracts/lib/../A.sol": SourceRecord("a")}, str(tmp_path))

    assert (tmp_path / "contracts" / "A.sol").read_text(encoding="utf-8") == "a"
