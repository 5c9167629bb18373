from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from bunzz_cli.domain.constants import Environment, get_api_url
from bunzz_cli.domain.contract_models import ContractInfo
from bunzz_cli.domain.errors import GraphQLError, ServiceError
from bunzz_cli.domain.source_models import SolidityFile
from bunzz_cli.infra.network.graphql_client import graphql_request

logger = logging.getLogger(__name__)

FETCH_CONTRACT_DOC_QUERY = """
query FetchContractDoc($in: FetchContractDocInput!) {
  fetchContractDoc(in: $in) {
    document {
      code
      contractName
      optimizationUsed
      runs
      viaIR
      solidityVersion
      rootContractPath
    }
  }
}
"""

CREATE_ARTIFACTS_MUTATION = """
mutation CreateArtifacts($req: CreateArtifactsReq!) {
  createArtifacts(req: $req) {
    id
  }
}
"""

CLONED_CONTRACT_MUTATION = """
mutation ClonedContract($req: ClonedContractReq!) {
  clonedContract(req: $req) {
    status
  }
}
"""


def fetch_contract_info(env: Environment | str, chain_id: str, contract_address: str) -> ContractInfo:
    """
    Retrieve the verified source document of a deployed contract.

    Raises:
        ServiceError: If the service cannot be reached or rejects the query.
    """
    variables = {"in": {"chainId": chain_id, "contractAddress": contract_address}}

    try:
        data = graphql_request(get_api_url(env), FETCH_CONTRACT_DOC_QUERY, variables)
        document = data["fetchContractDoc"]["document"]
    except GraphQLError as e:
        _report(e)
        raise ServiceError("Failed to fetch contract from bunzz.dev")
    except (KeyError, TypeError):
        raise ServiceError("Failed to fetch contract from bunzz.dev")

    if not isinstance(document, dict):
        raise ServiceError("Failed to fetch contract from bunzz.dev")
    return ContractInfo.from_document(document)


def send_artifacts(
        env: Environment | str,
        abi: Any,
        bytecode: str,
        contract_name: Optional[str] = None,
        solidity_version: Optional[str] = None,
        optimizer_enabled: Optional[bool] = None,
        optimizer_runs: Optional[int] = None,
        solidity_files: Optional[List[SolidityFile]] = None,
) -> str:
    """
    Store compiled artifacts remotely and return the created record id.

    Optional metadata is omitted from the request when not provided.

    Raises:
        ServiceError: If the mutation fails.
    """
    req: dict = {"abi": json.dumps(abi), "bytecode": bytecode}
    optional = {
        "contractName": contract_name,
        "solidityVersion": solidity_version,
        "optimizerEnabled": optimizer_enabled,
        "optimizerRuns": optimizer_runs,
    }
    req.update({k: v for k, v in optional.items() if v is not None})
    if solidity_files is not None:
        req["solidityFiles"] = [{"path": f.path, "content": f.content} for f in solidity_files]

    try:
        data = graphql_request(get_api_url(env), CREATE_ARTIFACTS_MUTATION, {"req": req})
        return str(data["createArtifacts"]["id"])
    except GraphQLError as e:
        _report(e)
        raise ServiceError("Failed to send artifacts to bunzz.dev")
    except (KeyError, TypeError):
        raise ServiceError("Failed to send artifacts to bunzz.dev")


def send_cloning_analytics(
        env: Environment | str,
        chain_id: str,
        contract_address: str,
        contract_name: str,
) -> Optional[str]:
    """
    Report a successful clone. Failures are logged and never raised.

    Returns:
        Optional[str]: The status reported by the service, if any.
    """
    variables = {
        "req": {
            "chainId": chain_id,
            "contractAddress": contract_address,
            "contractName": contract_name,
        }
    }
    try:
        data = graphql_request(get_api_url(env), CLONED_CONTRACT_MUTATION, variables)
        return data.get("clonedContract", {}).get("status")
    except (GraphQLError, AttributeError) as e:
        logger.warning("Failed to send analytics to bunzz.dev")
        logger.debug(f"Analytics error: {e}")
        logger.warning("This error does not impact the cloning process and can be ignored")
        return None


def _report(error: GraphQLError) -> None:
    for message in error.messages:
        logger.error(message)
