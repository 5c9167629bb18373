from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the GraphQL client and the contract-metadata operations.
"""

from bunzz_cli.infra.network.contracts_client import (
    fetch_contract_info,
    send_artifacts,
    send_cloning_analytics,
)
from bunzz_cli.infra.network.graphql_client import graphql_request

__all__ = [
    "fetch_contract_info",
    "send_artifacts",
    "send_cloning_analytics",
    "graphql_request",
]
