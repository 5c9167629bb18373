from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from bunzz_cli.domain.errors import GraphQLError
from bunzz_cli.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, extract_pre_text

logger = logging.getLogger(__name__)


def graphql_request(
        url: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        timeout: int = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    POST a GraphQL operation and return its 'data' object.

    Raises:
        GraphQLError: On transport failures, non-2xx answers, or a
            non-empty 'errors' array in the response body.
    """
    headers = {"User-Agent": USER_AGENT, "Content-Type": "application/json"}
    payload = {"query": query, "variables": variables or {}}
    logger.debug(f"GraphQL request to {url}")

    try:
        response = requests.post(url, json=payload, headers=headers, timeout=timeout)
    except requests.exceptions.Timeout:
        raise GraphQLError([f"Request to {url} timed out after {timeout}s"])
    except requests.exceptions.RequestException as e:
        raise GraphQLError([f"Communication error with {url}: {e}"])

    body = _decode_body(response)

    if body is None:
        # Non-JSON answers are usually HTML error pages from the gateway
        detail = extract_pre_text(response.text or "")
        raise GraphQLError([detail or f"HTTP {response.status_code} from {url}"])

    errors = _error_messages(body.get("errors"))
    if errors or not response.ok:
        raise GraphQLError(errors or [f"HTTP {response.status_code} from {url}"])

    data = body.get("data")
    if not isinstance(data, dict):
        raise GraphQLError(["Response contained no data"])
    return data


def _decode_body(response: requests.Response) -> Optional[Dict[str, Any]]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _error_messages(errors: Any) -> List[str]:
    if not errors:
        return []
    if isinstance(errors, list):
        return [
            str(err.get("message", err)) if isinstance(err, dict) else str(err)
            for err in errors
        ]
    return [str(errors)]
