"""
Blockchain Interaction Package
Handles artifact loading and contract-creation transactions
"""

from .artifact_loader import ArtifactLoader, ContractArtifact
from .contract_deployer import ContractDeployer, DeploymentReceipt

__all__ = ['ArtifactLoader', 'ContractArtifact', 'ContractDeployer', 'DeploymentReceipt']
