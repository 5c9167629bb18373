from __future__ import annotations

"""
Hardhat Configuration Management.

Renders the 'hardhat.config.js' files generated by the tool and reads
existing ones back. Reading evaluates the CommonJS module with Node.js in
an isolated VM context where 'require' is stubbed, so plugins and dotenv
imports do not need to be installed.
"""

import json
import logging
import os
import re
from typing import Any, Dict

from bunzz_cli.domain.constants import (
    DEFAULT_ARTIFACTS_DIR,
    DEFAULT_SOLIDITY_VERSION,
    DEFAULT_SOURCES_DIR,
    HARDHAT_CONFIG_FILE,
    HARDHAT_CONFIG_FILE_CJS,
)
from bunzz_cli.domain.contract_models import HardhatSettings, OptimizerSettings
from bunzz_cli.domain.errors import HardhatConfigError, ProcessError
from bunzz_cli.infra.process import execute

logger = logging.getLogger(__name__)

_VERSION_RX = re.compile(r"^(\d+\.)?(\d+\.)?(\*|\d+)$")

_NODE_EVAL_SCRIPT = r"""
const fs = require("fs");
const vm = require("vm");
const file = process.argv[1];
const stub = new Proxy(function () {}, {
  get: (target, key) => (key === Symbol.toPrimitive || key === "toJSON" ? undefined : stub),
  apply: () => stub,
});
const sandbox = { module: { exports: {} }, require: () => stub, process: { env: Object.assign({}, process.env) }, console };
sandbox.exports = sandbox.module.exports;
vm.runInNewContext(fs.readFileSync(file, "utf8"), sandbox, { filename: file });
process.stdout.write(JSON.stringify(sandbox.module.exports));
"""

# -----------------------------------------------------------------------------
# VERSION HANDLING
# -----------------------------------------------------------------------------

def clean_solidity_version(version: str) -> str:
    """
    Reduce a compiler version string to a plain semver.

    'v0.8.19+commit.7dd6d404' -> '0.8.19'
    """
    return version.replace("v", "", 1).split("+")[0]


def validate_solidity_version(version: str | None) -> str:
    """
    Accept 'X', 'X.Y' or 'X.Y.Z' versions, otherwise fall back to the default.
    """
    if not version or not _VERSION_RX.match(version):
        reason = "No version provided" if not version else "Invalid version provided"
        logger.warning(f"{reason}. Using {DEFAULT_SOLIDITY_VERSION}")
        return DEFAULT_SOLIDITY_VERSION
    return version

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def render_hardhat_config(solidity_version: str, optimizer: OptimizerSettings) -> str:
    """Render the config module for a cloned contract."""
    settings = (
        "optimizer: {\n"
        f"        enabled: {_js_bool(optimizer.enabled)},\n"
        f"        runs: {optimizer.runs},\n"
        "      },\n"
        f"      viaIR: {_js_bool(optimizer.via_ir)},"
    )

    version = clean_solidity_version(solidity_version)
    return (
        "module.exports = {\n"
        "  solidity: {\n"
        f'    version: "{version}",\n'
        "    settings: {\n"
        f"      {settings}\n"
        "    }\n"
        "  }\n"
        "};\n"
    )


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def write_hardhat_config(
        project_root: str,
        solidity_version: str,
        optimizer: OptimizerSettings,
        as_common_js: bool = False,
) -> str:
    """
    Write the generated config to the project root.

    Returns:
        str: Path of the written file.
    """
    file_name = HARDHAT_CONFIG_FILE_CJS if as_common_js else HARDHAT_CONFIG_FILE
    path = os.path.join(project_root, file_name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_hardhat_config(solidity_version, optimizer))
    return path


def write_minimal_hardhat_config(config_path: str, solidity_version: str) -> None:
    """Write the single-line config created by 'init'."""
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(f'module.exports = {{\n  solidity: "{solidity_version}",\n}};\n')

# -----------------------------------------------------------------------------
# READING
# -----------------------------------------------------------------------------

def get_hardhat_config_path(project_root: str) -> str:
    return os.path.join(project_root, HARDHAT_CONFIG_FILE)


def hardhat_config_exists(project_root: str) -> bool:
    return os.path.exists(get_hardhat_config_path(project_root))


def read_hardhat_config(project_root: str) -> HardhatSettings:
    """
    Evaluate the project's hardhat.config.js and extract upload settings.

    Raises:
        HardhatConfigError: If the file is missing, cannot be evaluated,
            or declares no Solidity version.
    """
    config_path = get_hardhat_config_path(project_root)
    if not os.path.exists(config_path):
        raise HardhatConfigError(
            "The uploading process requires hardhat configuration file. "
            "Please run `bunzz init` to create it."
        )

    try:
        output = execute(["node", "-e", _NODE_EVAL_SCRIPT, config_path], project_root)
        exported = json.loads(output or "{}")
    except (ProcessError, ValueError) as e:
        raise HardhatConfigError(f"Error loading hardhat config: {e}")

    if not isinstance(exported, dict):
        raise HardhatConfigError("Failed to extract configuration from hardhat.config.js")
    return parse_hardhat_exports(exported)


def parse_hardhat_exports(exported: Dict[str, Any]) -> HardhatSettings:
    """Map the exported config object onto HardhatSettings."""
    paths = exported.get("paths") or {}
    solidity = exported.get("solidity")

    optimizer_enabled = False
    optimizer_runs = 0

    if isinstance(solidity, str):
        version = solidity
    elif isinstance(solidity, dict):
        compiler = solidity
        if not compiler.get("version") and isinstance(solidity.get("compilers"), list) and solidity["compilers"]:
            compiler = solidity["compilers"][0]
        version = compiler.get("version") or ""
        optimizer = (compiler.get("settings") or {}).get("optimizer") or {}
        optimizer_enabled = bool(optimizer.get("enabled", False))
        try:
            optimizer_runs = int(optimizer.get("runs") or 0)
        except (TypeError, ValueError):
            raise HardhatConfigError(f"Invalid optimizer runs in hardhat configuration: {optimizer.get('runs')!r}")
    else:
        version = ""

    if not version:
        raise HardhatConfigError("Unable to find required fields in hardhat configuration.")

    return HardhatSettings(
        sources_path=paths.get("sources") or DEFAULT_SOURCES_DIR,
        artifacts_path=paths.get("artifacts") or DEFAULT_ARTIFACTS_DIR,
        solidity_version=version,
        optimizer_enabled=optimizer_enabled,
        optimizer_runs=optimizer_runs,
    )
