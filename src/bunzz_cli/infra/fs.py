from __future__ import annotations

"""
Project Directory Helpers.

Resolves the -p/--path argument and creates or discards the folders that
clone and import materialize contracts into.
"""

import os
import shutil
from typing import Optional

from bunzz_cli.domain.errors import ProjectExistsError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Turn a -p/--path value into an absolute directory.

    "~" and environment variables are expanded; a blank value selects
    'fallback' (normally the current working directory).
    """
    raw = (path or "").strip() or fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(raw)))

# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT API
# -----------------------------------------------------------------------------

def make_project_directory(parent: str, directory_name: str) -> str:
    """
    Create a new, previously absent project directory.

    Args:
        parent: Directory in which the project is created.
        directory_name: Name of the new project directory.

    Returns:
        str: Absolute path of the created directory.

    Raises:
        ProjectExistsError: If the directory already exists.
        OSError: If the directory cannot be created.
    """
    dir_path = os.path.abspath(os.path.join(parent, directory_name))
    if os.path.exists(dir_path):
        raise ProjectExistsError(dir_path)
    os.makedirs(dir_path)
    return dir_path


def remove_tree(path: str) -> bool:
    """
    Recursively delete a directory if it exists.

    Returns:
        bool: True if something was removed.
    """
    if not os.path.exists(path):
        return False
    shutil.rmtree(path, ignore_errors=True)
    return True
