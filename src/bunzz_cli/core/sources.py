from __future__ import annotations

"""
Contract Source Payload Parsing.

Converts the 'code' field of a verified contract document into a
SourceTree. Multi-file contracts arrive as a standard-json document
(optionally wrapped in an extra pair of braces); anything that fails to
parse is treated as a single Solidity file.
"""

import json
from typing import Any

from bunzz_cli.domain.source_models import (
    CONTRACTS_ROOT,
    SourceRecord,
    SourceTree,
    is_library_path,
)


def parse_code(code: str, contract_name: str) -> SourceTree:
    """
    Parse a source payload into a flat source tree.

    Args:
        code: Raw payload from the metadata service.
        contract_name: Used to name the file of single-file payloads.

    Returns:
        SourceTree: Parsed sources; never raises.
    """
    wrapped = code.startswith("{{") and code.endswith("}}")
    payload = code[1:-1] if wrapped else code

    try:
        document: Any = json.loads(payload)
    except ValueError:
        return _single_file_tree(code, contract_name)

    sources = document.get("sources") if isinstance(document, dict) else None
    if not isinstance(sources, dict):
        return _single_file_tree(code, contract_name)

    tree: SourceTree = {}
    for path, info in sources.items():
        content = info.get("content", "") if isinstance(info, dict) else ""
        tree[str(path)] = SourceRecord(content=content if isinstance(content, str) else "")
    return tree


def drop_library_sources(tree: SourceTree) -> SourceTree:
    """Return a copy of the tree without third-party ('@') paths."""
    return {p: record for p, record in tree.items() if not is_library_path(p)}


def _single_file_tree(code: str, contract_name: str) -> SourceTree:
    return {f"{CONTRACTS_ROOT}/{contract_name}.sol": SourceRecord(content=code)}
