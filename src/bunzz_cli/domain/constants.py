from __future__ import annotations

"""
Domain Constants and Endpoint Registry.

Provides centralized access to application-wide constants: the service
endpoint tables per deployment environment, project file names, and
toolchain defaults.
"""

import os
from enum import Enum
from typing import Dict, Optional

APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# PROJECT LAYOUT
# -----------------------------------------------------------------------------

PROJECT_CONFIG_FILE = "bunzz.config.json"
HARDHAT_CONFIG_FILE = "hardhat.config.js"
HARDHAT_CONFIG_FILE_CJS = "hardhat.config.cjs"
DEFAULT_SOURCES_DIR = "contracts"
DEFAULT_ARTIFACTS_DIR = "artifacts"
CACHE_DIR = "cache"
DEFAULT_SOLIDITY_VERSION = "0.8.0"

# -----------------------------------------------------------------------------
# ENVIRONMENT REGISTRY
# -----------------------------------------------------------------------------

class Environment(str, Enum):
    """Deployment stage of the remote service."""
    PROD = "prod"
    DEV = "dev"
    LOCAL = "local"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Environment":
        """Resolve a raw name, falling back to PROD for unknown values."""
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.PROD


API_ENDPOINTS: Dict[Environment, str] = {
    Environment.PROD: "https://bff.bunzz.dev/graphql",
    Environment.DEV: "https://bff.dev.bunzz.dev/graphql",
    Environment.LOCAL: "http://127.0.0.1:8081/graphql",
}

FRONTEND_ENDPOINTS: Dict[Environment, str] = {
    Environment.PROD: "https://app.bunzz.dev",
    Environment.DEV: "https://app.dev.bunzz.dev",
    Environment.LOCAL: "http://localhost:3000",
}

# Environment variables overriding the local endpoints
LOCAL_API_ENV_VAR = "LOCAL_BFF"
LOCAL_FRONTEND_ENV_VAR = "LOCAL_FE"


def get_api_url(env: Environment | str) -> str:
    """Return the GraphQL endpoint for the given environment."""
    environment = env if isinstance(env, Environment) else Environment.parse(env)
    if environment is Environment.LOCAL:
        return os.environ.get(LOCAL_API_ENV_VAR) or API_ENDPOINTS[environment]
    return API_ENDPOINTS[environment]


def get_frontend_url(env: Environment | str) -> str:
    """Return the web frontend base URL for the given environment."""
    environment = env if isinstance(env, Environment) else Environment.parse(env)
    if environment is Environment.LOCAL:
        return os.environ.get(LOCAL_FRONTEND_ENV_VAR) or FRONTEND_ENDPOINTS[environment]
    return FRONTEND_ENDPOINTS[environment]
