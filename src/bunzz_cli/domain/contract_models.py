from __future__ import annotations

"""
Contract Metadata Domain Models.

Data Transfer Objects exchanged between the remote contract-metadata
service, the Hardhat toolchain, and the command layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from bunzz_cli.domain.errors import ServiceError

# -----------------------------------------------------------------------------
# REMOTE METADATA
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ContractInfo:
    """
    Verified contract document returned by the metadata service.

    Attributes:
        code: Raw source payload (standard-json or single-file Solidity).
        contract_name: Name of the deployed contract.
        solidity_version: Compiler version string as reported remotely.
        optimization_used: Whether the optimizer was enabled at deploy time.
        runs: Optimizer runs setting.
        via_ir: Whether the IR pipeline was used.
        root_contract_path: Path of the root contract inside the sources.
    """
    code: str
    contract_name: str
    solidity_version: str
    optimization_used: bool = False
    runs: int = 200
    via_ir: bool = False
    root_contract_path: str = ""

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ContractInfo":
        """
        Build an instance from the GraphQL 'document' object.

        Raises:
            ServiceError: If 'runs' is not an integer.
        """
        try:
            runs = int(document.get("runs") or 0)
        except (TypeError, ValueError):
            raise ServiceError(f"Invalid optimizer runs in contract document: {document.get('runs')!r}")
        return cls(
            code=document.get("code") or "",
            contract_name=document.get("contractName") or "",
            solidity_version=document.get("solidityVersion") or "",
            optimization_used=bool(document.get("optimizationUsed")),
            runs=runs,
            via_ir=bool(document.get("viaIR")),
            root_contract_path=document.get("rootContractPath") or "",
        )

# -----------------------------------------------------------------------------
# BUILD SETTINGS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OptimizerSettings:
    """Optimizer block of a generated Hardhat configuration."""
    enabled: bool
    runs: int
    via_ir: bool = False


@dataclass(frozen=True)
class HardhatSettings:
    """
    Subset of a Hardhat configuration consumed by the upload workflow.

    Attributes:
        sources_path: Directory holding the project contracts.
        artifacts_path: Directory where compiled artifacts are emitted.
        solidity_version: Configured compiler version.
        optimizer_enabled: Optimizer flag.
        optimizer_runs: Optimizer runs.
    """
    sources_path: str
    artifacts_path: str
    solidity_version: str
    optimizer_enabled: bool = False
    optimizer_runs: int = 0

# -----------------------------------------------------------------------------
# BUILD OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract interface and creation bytecode."""
    abi: List[Any] = field(default_factory=list)
    bytecode: str = ""
