from __future__ import annotations

"""
Source Tree Domain Data Models.

Defines the in-memory representation of a Solidity project as a flat
mapping of virtual file paths to file contents, together with the
classification helpers shared by the normalizer and the discovery layer.
"""

from dataclasses import dataclass
from typing import Dict

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

LIBRARY_MARKER = "@"
PATH_SEPARATOR = "/"
CONTRACTS_ROOT = "contracts"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceRecord:
    """
    Literal content of a single source file.

    Attributes:
        content: UTF-8 file text, never modified by the tool.
    """
    content: str


SourceTree = Dict[str, SourceRecord]


@dataclass(frozen=True)
class SolidityFile:
    """
    A project file as sent to the remote service during upload.

    Attributes:
        path: Project-relative path, prefixed with the project directory name.
        content: Raw file text.
    """
    path: str
    content: str

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def is_library_path(path: str) -> bool:
    """Return True for third-party paths (leading '@')."""
    return path.startswith(LIBRARY_MARKER)


def top_level_segment(path: str) -> str:
    """Return the substring up to the first '/', or the whole path."""
    return path.split(PATH_SEPARATOR, 1)[0]
