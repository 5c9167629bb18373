from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure the command layer knows how to report derives from
BunzzError. Filesystem errors are not wrapped and surface as OSError.
"""

from typing import List, Optional, Sequence


class BunzzError(Exception):
    """Base class for all tool-specific failures."""


class MissingArgumentError(BunzzError):
    """A required command option was not supplied."""


class ProjectExistsError(BunzzError):
    """The target project directory is already present."""

    def __init__(self, path: str):
        super().__init__(f"Directory {path} already exists")
        self.path = path


class HardhatConfigError(BunzzError):
    """The Hardhat configuration is missing or cannot be evaluated."""


class MissingContractsError(BunzzError):
    """The project has no contracts directory or no Solidity files."""


class CompilationError(BunzzError):
    """The external compiler exited with a failure."""


class ArtifactNotFoundError(BunzzError):
    """A compiled artifact for the requested contract could not be read."""


class ImportOutsideProjectError(BunzzError):
    """A relative Solidity import resolves outside the project root."""


class ProcessError(BunzzError):
    """An external command could not be run or returned a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, output: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        message = output.strip() or f"Command '{' '.join(self.command)}' failed with exit code {returncode}"
        super().__init__(message)


class GraphQLError(BunzzError):
    """The metadata service answered with transport or GraphQL errors."""

    def __init__(self, messages: Optional[List[str]] = None):
        self.messages = [m for m in (messages or []) if m]
        super().__init__("; ".join(self.messages) or "GraphQL request failed")


class ServiceError(BunzzError):
    """A metadata-service operation failed as a whole."""


class BrowserError(BunzzError):
    """The frontend URL could not be opened in a browser."""


class UnsafePathError(BunzzError):
    """A source path would be written outside its destination directory."""

    def __init__(self, path: str, root: str):
        super().__init__(f"Refusing to write {path}: it resolves outside {root}")
        self.path = path
        self.root = root
