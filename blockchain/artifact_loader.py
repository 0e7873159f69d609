"""
Artifact Loader
Locates compiled Hardhat artifacts by contract name
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, List, Optional
from loguru import logger

from deployer.errors import ArtifactNotFound


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled bytecode plus interface description"""
    contract_name: str
    abi: List[Dict]
    bytecode: str
    path: str

    def constructor_inputs(self) -> List[Dict]:
        """Inputs of the ABI constructor (empty if none is declared)"""
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return list(entry.get('inputs', []))
        return []


class ArtifactLoader:
    """
    Resolves artifacts under a Hardhat artifacts directory

    Looks at artifacts/contracts/<Name>.sol/<Name>.json first, then any
    <Name>.json below the artifacts directory (debug files excluded).
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        self.artifacts_dir = artifacts_dir

    def find(self, contract_name: str) -> Optional[str]:
        """Return artifact path for contract_name, or None"""
        default_path = os.path.join(
            self.artifacts_dir, "contracts", f"{contract_name}.sol", f"{contract_name}.json"
        )
        if os.path.isfile(default_path):
            return default_path

        if not os.path.isdir(self.artifacts_dir):
            return None

        target = f"{contract_name}.json"
        for root, dirs, files in os.walk(self.artifacts_dir):
            # build-info holds compiler input/output, never artifacts
            dirs[:] = sorted(d for d in dirs if d != "build-info")
            if target in files:
                return os.path.join(root, target)

        return None

    def load(self, contract_name: str) -> ContractArtifact:
        """
        Load artifact by contract name

        Args:
            contract_name: Contract to resolve (e.g. "LionKing")

        Returns:
            ContractArtifact

        Raises:
            ArtifactNotFound: If the artifact is missing or lacks abi/bytecode
        """
        path = self.find(contract_name)

        if path is None:
            raise ArtifactNotFound(
                f"Contract artifact not found: {contract_name} (run 'npx hardhat compile' first)"
            )

        try:
            with open(path, 'r') as f:
                contract_json = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ArtifactNotFound(f"Unreadable contract artifact: {path}", e)

        abi = contract_json.get('abi')
        bytecode = contract_json.get('bytecode')

        if not isinstance(abi, list) or not bytecode or bytecode == "0x":
            raise ArtifactNotFound(f"Artifact {path} has no abi or deployable bytecode")

        logger.info(f"Loaded artifact: {path}")

        return ContractArtifact(
            contract_name=contract_name,
            abi=abi,
            bytecode=bytecode,
            path=path
        )
