from __future__ import annotations

"""
Solidity File Discovery Service.

Walks a project's sources directory, follows relative import statements,
and extracts contract declarations. Used by 'upload' to determine which
files belong to the selected root contract.
"""

import logging
import os
import re
from typing import List, Optional, Set

from bunzz_cli.domain.constants import DEFAULT_SOURCES_DIR
from bunzz_cli.domain.errors import ImportOutsideProjectError, MissingContractsError
from bunzz_cli.domain.source_models import SolidityFile, is_library_path

logger = logging.getLogger(__name__)

_IMPORT_RX = re.compile(
    r"""import\s+(["'])(.*?)\1;|import\s+\{[^}]*\}\s+from\s+(['"])(.*?)\3;"""
)
_CONTRACT_RX = re.compile(r"^\s*contract\s+(\w+)\s+", re.MULTILINE)

# ==============================================================================
# PARSING
# ==============================================================================

def parse_imports(content: str) -> List[str]:
    """Return the import paths of a Solidity source, in order."""
    return [m.group(2) or m.group(4) for m in _IMPORT_RX.finditer(content)]


def get_contract_names(content: str) -> List[str]:
    """Return the names of the contracts declared in a Solidity source."""
    return _CONTRACT_RX.findall(content)

# ==============================================================================
# FILESYSTEM WALK
# ==============================================================================

def find_solidity_files(directory: str) -> List[str]:
    """Recursively list '.sol' files below a directory, sorted."""
    found: List[str] = []
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for file_name in sorted(files):
            if file_name.endswith(".sol"):
                found.append(os.path.join(root, file_name))
    return found


def read_source(file_path: str) -> str:
    """
    Read a Solidity file as text.

    Raises:
        OSError: With the offending path in the message.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise OSError(f"Error reading file {file_path}: {e}") from e


def collect_related_files(
        file_path: str,
        project_root: str,
        processed: Optional[Set[str]] = None,
) -> List[SolidityFile]:
    """
    Collect a file and, depth-first, every project file it imports.

    Third-party ('@') imports are skipped. Each file is visited once, so
    cyclic imports terminate.

    Raises:
        ImportOutsideProjectError: If a relative import leaves the project.
    """
    processed = processed if processed is not None else set()
    if file_path in processed:
        return []
    processed.add(file_path)

    content = read_source(file_path)
    files = [SolidityFile(path=file_path, content=content)]
    root_abs = os.path.abspath(project_root)

    for import_path in parse_imports(content):
        if is_library_path(import_path):
            continue
        resolved = os.path.abspath(os.path.join(os.path.dirname(file_path), import_path))
        if os.path.commonpath([root_abs, resolved]) != root_abs:
            raise ImportOutsideProjectError(
                f"Import outside of project directory is not allowed: {import_path}"
            )
        files.extend(collect_related_files(resolved, project_root, processed))

    return files


def collect_all_solidity_files(sources_path: str, project_root: str) -> List[SolidityFile]:
    """Collect every Solidity file of the project together with its imports."""
    sources_dir = os.path.abspath(os.path.join(project_root, sources_path))
    processed: Set[str] = set()
    all_files: List[SolidityFile] = []
    for file_path in find_solidity_files(sources_dir):
        all_files.extend(collect_related_files(file_path, project_root, processed))
    return all_files


def find_contract_file(sources_path: str, project_root: str, contract_name: str) -> str:
    """
    Locate the source file declaring a contract.

    Raises:
        MissingContractsError: If no file declares it.
    """
    sources_dir = os.path.abspath(os.path.join(project_root, sources_path))
    for file_path in find_solidity_files(sources_dir):
        if contract_name in get_contract_names(read_source(file_path)):
            return file_path
    raise MissingContractsError(f"Contract {contract_name} not found in {sources_dir}")


def collect_root_contract_files(
        sources_path: str,
        project_root: str,
        root_contract: str,
) -> List[SolidityFile]:
    """
    Collect the files needed by a root contract, keyed for upload.

    Paths are rewritten as '<project dir name>/<path relative to project>'
    using forward slashes.
    """
    root_abs = os.path.abspath(project_root)
    root_file = find_contract_file(sources_path, root_abs, root_contract)
    base_dir_name = os.path.basename(root_abs)

    return [
        SolidityFile(
            path="/".join([base_dir_name] + os.path.relpath(f.path, root_abs).split(os.sep)),
            content=f.content,
        )
        for f in collect_related_files(root_file, root_abs)
    ]


def get_root_contract_name(project_root: str) -> str:
    """
    Pick the first Solidity file directly under contracts/ as root contract.

    Raises:
        MissingContractsError: If there is none.
    """
    contracts_dir = os.path.join(project_root, DEFAULT_SOURCES_DIR)
    try:
        entries = sorted(os.listdir(contracts_dir))
    except OSError:
        entries = []
    sol_files = [f for f in entries if f.endswith(".sol")]
    if not sol_files:
        raise MissingContractsError("No .sol files found in contracts folder. Exiting.")
    return sol_files[0][: -len(".sol")]
