"""
Deployment Errors
Failure taxonomy for a single contract deployment run
"""

from typing import Optional


class DeploymentError(Exception):
    """Base class for every failure of a deployment run"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} ({type(self.cause).__name__}: {self.cause})"
        return self.message


class ConfigError(DeploymentError):
    """Configuration could not be loaded"""


class SignerUnavailable(DeploymentError):
    """No usable signing identity is configured"""


class ArtifactNotFound(DeploymentError):
    """Contract artifact is missing or unusable"""


class InvalidArguments(DeploymentError):
    """Constructor arguments do not fit the contract"""


class DeploymentRejected(DeploymentError):
    """Network reported the creation transaction as reverted"""

    def __init__(self, message: str, tx_hash: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.tx_hash = tx_hash


class ConfirmationTimeout(DeploymentError):
    """Receipt did not arrive within the confirmation timeout"""

    def __init__(self, message: str, tx_hash: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.tx_hash = tx_hash


class UnknownDeploymentError(DeploymentError):
    """Any other failure from the network layer"""
