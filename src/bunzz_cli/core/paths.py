from __future__ import annotations

"""
Source Tree Normalization and Materialization.

Rebuilds a compilable project layout from the flat path -> content mapping
supplied by the metadata service. Project-owned files are re-rooted under a
single 'contracts/' directory while third-party paths ('@vendor/...') are
kept verbatim so that their import statements keep resolving.

The normalizer is pure: it never touches the filesystem, never logs, and
returns a new mapping. The materializer performs the disk writes.
"""

import os
from typing import Dict, List

from bunzz_cli.domain.errors import UnsafePathError
from bunzz_cli.domain.source_models import (
    CONTRACTS_ROOT,
    PATH_SEPARATOR,
    SourceTree,
    is_library_path,
    top_level_segment,
)

# -----------------------------------------------------------------------------
# NORMALIZATION
# -----------------------------------------------------------------------------

def normalize(tree: SourceTree) -> SourceTree:
    """
    Re-root a source tree under the canonical 'contracts/' directory.

    Steps:
    1. Leading '/' is stripped from every key (last write wins on clash).
    2. Distinct top-level segments of regular (non-'@') paths are counted.
    3. Zero segments: every library path is nested under 'contracts/'.
       One segment: that segment is replaced by 'contracts'.
       Several segments: regular paths are prefixed with 'contracts/',
       unless one of the segments already is 'contracts', in which case
       they are left untouched.

    Library paths are otherwise never rewritten. Empty keys pass through.

    Args:
        tree: Mapping of virtual paths to source records.

    Returns:
        SourceTree: A new mapping; the input is not modified.
    """
    stripped = _strip_leading_slashes(tree)

    segments = _distinct_segments([p for p in stripped if _is_regular(p)])

    if not segments:
        return {
            (f"{CONTRACTS_ROOT}{PATH_SEPARATOR}{p}" if is_library_path(p) else p): record
            for p, record in stripped.items()
        }

    if len(segments) == 1:
        root = segments[0]
        return {
            (_replace_root_segment(p, root) if _is_regular(p) else p): record
            for p, record in stripped.items()
        }

    if CONTRACTS_ROOT in segments:
        return dict(stripped)

    return {
        (_prefix_with_root(p) if _is_regular(p) else p): record
        for p, record in stripped.items()
    }


def _is_regular(path: str) -> bool:
    return bool(path) and not is_library_path(path)


def _strip_leading_slashes(tree: SourceTree) -> SourceTree:
    """Drop a single leading '/' from each key."""
    out: SourceTree = {}
    for path, record in tree.items():
        key = path[1:] if path.startswith(PATH_SEPARATOR) else path
        out[key] = record
    return out


def _distinct_segments(paths: List[str]) -> List[str]:
    """Return top-level segments in first-seen order, without duplicates."""
    seen: Dict[str, None] = {}
    for p in paths:
        seen.setdefault(top_level_segment(p), None)
    return list(seen)


def _replace_root_segment(path: str, segment: str) -> str:
    # Segment-wise: a filename that merely contains the segment text is left intact.
    return CONTRACTS_ROOT + path[len(segment):]


def _prefix_with_root(path: str) -> str:
    separator = "" if path.startswith(PATH_SEPARATOR) else PATH_SEPARATOR
    return f"{CONTRACTS_ROOT}{separator}{path}"


def collapse_common_prefix(tree: SourceTree) -> SourceTree:
    """
    Drop the leading directories shared by every key.

    Collapsing stops as soon as one key would be reduced to nothing, so
    'src/a/X.sol' and 'src/a/Y.sol' become 'X.sol' and 'Y.sol', while
    'src/X.sol' and 'lib/Y.sol' are returned as they are.

    Args:
        tree: Mapping of virtual paths to source records.

    Returns:
        SourceTree: A new mapping; the input is not modified.
    """
    keys = list(tree)
    split = [k.split(PATH_SEPARATOR) for k in keys]
    while split and all(len(parts) > 1 and parts[0] == split[0][0] for parts in split):
        split = [parts[1:] for parts in split]
    return {PATH_SEPARATOR.join(parts): tree[key] for parts, key in zip(split, keys)}

# -----------------------------------------------------------------------------
# MATERIALIZATION
# -----------------------------------------------------------------------------

def materialize(tree: SourceTree, project_root: str) -> None:
    """
    Write every entry of a source tree below a project root.

    Missing directories (including the root itself) are created. Existing
    files are overwritten without warning. Every destination is checked
    before the first write, so a tree containing an escaping path such as
    '../x.sol' writes nothing. Any other failure leaves the entries
    already written in place.

    Args:
        tree: Normalized mapping of relative paths to source records.
        project_root: Destination directory.

    Raises:
        UnsafePathError: If an entry resolves outside 'project_root'.
        OSError: If a directory cannot be created or a file written.
    """
    root = os.path.abspath(project_root)
    targets = []
    for rel_path, record in tree.items():
        absolute_path = os.path.abspath(os.path.join(root, *rel_path.split(PATH_SEPARATOR)))
        if absolute_path == root or os.path.commonpath([root, absolute_path]) != root:
            raise UnsafePathError(rel_path, root)
        targets.append((absolute_path, record))

    for absolute_path, record in targets:
        parent = os.path.dirname(absolute_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(absolute_path, "w", encoding="utf-8", newline="") as f:
            f.write(record.content)
