"""
Deployment Orchestrator
Runs one contract deployment: signer, artifact, validation, submission, confirmation
"""

from dataclasses import dataclass
from typing import Optional
from web3 import Web3
from loguru import logger

from blockchain.artifact_loader import ArtifactLoader
from blockchain.contract_deployer import ContractDeployer
from utils.rpc_manager import RPCManager

from .config import DeployConfig
from .errors import DeploymentError, UnknownDeploymentError
from .request import DeploymentRequest, validate_request
from .wallet_manager import WalletManager


@dataclass(frozen=True)
class DeploymentResult:
    """Typed outcome of a run: an address or an error"""
    contract_name: str
    address: Optional[str] = None
    tx_hash: Optional[str] = None
    error: Optional[DeploymentError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class DeploymentOrchestrator:
    """
    One-shot deployment orchestrator

    Nothing is sent to the network until the signer, the artifact and the
    constructor arguments have all been resolved and checked locally. The
    Web3 client is only created at that point when none is passed in.
    """

    def __init__(
        self,
        config: DeployConfig,
        w3: Optional[Web3] = None,
        signer_provider: Optional[WalletManager] = None,
        artifact_source: Optional[ArtifactLoader] = None,
        deployer: Optional[ContractDeployer] = None
    ):
        """
        Initialize orchestrator

        Args:
            config: Deployment configuration
            w3: Web3 instance for the target network (default: built from config.rpc_url)
            signer_provider: Signer source (default: key from config)
            artifact_source: Artifact source (default: config.artifacts_dir)
            deployer: Transaction sender (default: ContractDeployer on w3)
        """
        self.config = config
        self.w3 = w3
        self.signer_provider = signer_provider or WalletManager(config.private_key)
        self.artifact_source = artifact_source or ArtifactLoader(config.artifacts_dir)
        self.deployer = deployer

    def run(self) -> DeploymentResult:
        """
        Deploy the configured contract

        Returns:
            DeploymentResult with the address, or the DeploymentError that stopped the run
        """
        contract_name = self.config.contract_name

        try:
            return self._deploy()
        except DeploymentError as e:
            logger.debug(f"{contract_name} deployment failed: {e}")
            return DeploymentResult(contract_name, tx_hash=getattr(e, 'tx_hash', None), error=e)
        except Exception as e:
            logger.debug(f"{contract_name} deployment failed unexpectedly: {e}")
            # Raised so the wrapper carries a traceback chained to the cause
            try:
                raise UnknownDeploymentError(
                    f"Unexpected failure while deploying {contract_name}", e
                ) from e
            except UnknownDeploymentError as error:
                return DeploymentResult(contract_name, error=error)

    def _get_deployer(self) -> ContractDeployer:
        if self.deployer is None:
            w3 = self.w3
            if w3 is None:
                w3 = RPCManager(self.config.rpc_url, self.config.rpc_timeout).get_web3()
            self.deployer = ContractDeployer(
                w3, confirmation_timeout=self.config.confirmation_timeout
            )
        return self.deployer

    def _deploy(self) -> DeploymentResult:
        contract_name = self.config.contract_name

        signer = self.signer_provider.get_signer()
        print(f"Deploying with {signer.address}")

        artifact = self.artifact_source.load(contract_name)

        request = DeploymentRequest.build(contract_name, self.config.constructor, signer)
        args = validate_request(request, artifact.constructor_inputs())

        logger.info(
            f"Constructor: name={request.constructor_args.name!r} "
            f"symbol={request.constructor_args.symbol!r} "
            f"max_supply={request.constructor_args.max_supply} "
            f"mint_price={Web3.from_wei(request.constructor_args.mint_price, 'ether')} "
            f"royalty={request.constructor_args.royalty_fee_bps}bps"
        )

        receipt = self._get_deployer().deploy(artifact, args, request.signer)

        print(f"{contract_name} deployed to: {receipt.contract_address}")

        return DeploymentResult(
            contract_name,
            address=receipt.contract_address,
            tx_hash=receipt.tx_hash
        )
