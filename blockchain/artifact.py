"""
Contract Artifact Loader
Reads compiled contract output (ABI + bytecode) produced by forge or hardhat
"""

import os
import re
import json
from dataclasses import dataclass
from typing import Dict, List, Union
from loguru import logger

from .errors import DeploymentError


LIBRARY_PLACEHOLDER = re.compile(r"__\$[0-9a-fA-F]{34}\$__")
HEX_BODY = re.compile(r"^[0-9a-fA-F]*$")


@dataclass(frozen=True)
class Artifact:
    """
    Compiled contract: interface description and creation bytecode

    Attributes:
        name: Contract name
        abi: ABI entries
        bytecode: 0x-prefixed creation bytecode
    """
    name: str
    abi: List[Dict]
    bytecode: str

    @property
    def constructor_inputs(self) -> List[Dict]:
        """Constructor inputs declared in the ABI (empty if no constructor)"""
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []

    @property
    def bytecode_size(self) -> int:
        """Creation bytecode size in bytes"""
        return (len(self.bytecode) - 2) // 2


def artifact_path(contract_name: str, out_dir: str = "out") -> str:
    """Default forge output location: out/<Name>.sol/<Name>.json"""
    return os.path.join(out_dir, f"{contract_name}.sol", f"{contract_name}.json")


def parse_artifact(contract_json: Dict, name: str) -> Artifact:
    """
    Build an Artifact from decoded build output

    Forge nests bytecode as {"object": "0x..."}, hardhat stores a plain string.

    Raises:
        DeploymentError: ABI or bytecode missing, empty or malformed
    """
    abi = contract_json.get('abi')
    if not isinstance(abi, list) or not abi:
        raise DeploymentError(f"{name}: artifact has no ABI")

    bytecode: Union[Dict, str, None] = contract_json.get('bytecode')
    if isinstance(bytecode, dict):
        bytecode = bytecode.get('object')

    if not isinstance(bytecode, str):
        raise DeploymentError(f"{name}: artifact has no bytecode")

    bytecode = bytecode.strip()
    if not bytecode.startswith('0x'):
        bytecode = '0x' + bytecode

    if bytecode == '0x':
        raise DeploymentError(f"{name}: artifact bytecode is empty (abstract contract or interface?)")

    placeholders = set(LIBRARY_PLACEHOLDER.findall(bytecode))
    if placeholders:
        raise DeploymentError(f"{name}: bytecode has unlinked libraries: {sorted(placeholders)}")

    body = bytecode[2:]
    if len(body) % 2 or not HEX_BODY.match(body):
        raise DeploymentError(f"{name}: bytecode is not valid hex")

    return Artifact(name=name, abi=abi, bytecode=bytecode)


def load_artifact(path: str, name: str = None) -> Artifact:
    """
    Load a compiled contract artifact from disk

    Args:
        path: Path to the artifact JSON
        name: Contract name (defaults to the file stem)

    Returns:
        Artifact
    """
    if name is None:
        name = os.path.splitext(os.path.basename(path))[0]

    if not os.path.exists(path):
        raise DeploymentError(f"Contract artifact not found: {path} (run 'forge build' first)")

    try:
        with open(path, 'r') as f:
            contract_json = json.load(f)
    except json.JSONDecodeError as e:
        raise DeploymentError(f"{name}: artifact is not valid JSON: {e}") from e

    if not isinstance(contract_json, dict):
        raise DeploymentError(f"{name}: artifact is not a JSON object")

    artifact = parse_artifact(contract_json, name)

    logger.debug(f"Loaded {name} artifact: {len(artifact.abi)} ABI entries, {artifact.bytecode_size} bytes")
    return artifact
