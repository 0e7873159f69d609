"""
Deployer Core Package
Handles configuration, signer resolution, request validation and errors

The orchestrator is imported from deployer.orchestrator directly.
"""

from .config import DeployConfig, load_config
from .errors import (
    DeploymentError,
    ConfigError,
    SignerUnavailable,
    ArtifactNotFound,
    InvalidArguments,
    DeploymentRejected,
    ConfirmationTimeout,
    UnknownDeploymentError,
)
from .request import ConstructorArgs, DeploymentRequest
from .wallet_manager import WalletManager

__all__ = [
    'DeployConfig',
    'load_config',
    'DeploymentError',
    'ConfigError',
    'SignerUnavailable',
    'ArtifactNotFound',
    'InvalidArguments',
    'DeploymentRejected',
    'ConfirmationTimeout',
    'UnknownDeploymentError',
    'ConstructorArgs',
    'DeploymentRequest',
    'WalletManager'
]
