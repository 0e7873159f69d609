"""
Contract Deployer
Builds, signs, sends and confirms a contract-creation transaction
"""

from dataclasses import dataclass
from typing import Tuple
from web3 import Web3
from web3.exceptions import (
    ContractLogicError,
    MismatchedABI,
    TimeExhausted,
    Web3ValidationError,
)
from loguru import logger

from deployer.errors import (
    ConfirmationTimeout,
    DeploymentRejected,
    InvalidArguments,
)
from .artifact_loader import ContractArtifact


@dataclass(frozen=True)
class DeploymentReceipt:
    """Outcome of a confirmed creation transaction"""
    contract_address: str
    tx_hash: str
    block_number: int
    gas_used: int


class ContractDeployer:
    """
    Sends one contract-creation transaction and waits for it

    Gas limit and fees are left to web3 defaults.
    """

    def __init__(self, w3: Web3, confirmation_timeout: float = 300, poll_latency: float = 0.5):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            confirmation_timeout: Seconds to wait for the receipt
            poll_latency: Seconds between receipt polls
        """
        self.w3 = w3
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency

    def build_transaction(self, artifact: ContractArtifact, args: Tuple, sender: str) -> dict:
        """
        Build unsigned creation transaction

        Args:
            artifact: Contract artifact
            args: Constructor arguments (already validated)
            sender: Deployer address

        Returns:
            Transaction dict
        """
        Contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        nonce = self.w3.eth.get_transaction_count(sender)

        try:
            return Contract.constructor(*args).build_transaction({
                'from': sender,
                'nonce': nonce
            })
        except ContractLogicError as e:
            # Gas estimation executed the constructor and it reverted
            raise DeploymentRejected(f"{artifact.contract_name} constructor reverted", cause=e)
        except (Web3ValidationError, MismatchedABI, TypeError) as e:
            raise InvalidArguments("Constructor arguments rejected by ABI encoder", e)

    def deploy(self, artifact: ContractArtifact, args: Tuple, signer) -> DeploymentReceipt:
        """
        Deploy contract and wait for confirmation

        Args:
            artifact: Contract artifact
            args: Constructor arguments (already validated)
            signer: Local account that signs the transaction

        Returns:
            DeploymentReceipt

        Raises:
            DeploymentRejected: If the transaction reverted
            ConfirmationTimeout: If no receipt arrived in time
        """
        logger.info(f"Building deployment transaction for {artifact.contract_name}...")
        transaction = self.build_transaction(artifact, args, signer.address)

        logger.info("Signing transaction...")
        signed_tx = signer.sign_transaction(transaction)

        logger.info("Sending deployment transaction...")
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash_hex}")
        logger.info(f"Waiting for confirmation (timeout {self.confirmation_timeout}s)...")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.confirmation_timeout,
                poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            raise ConfirmationTimeout(
                f"No receipt for {tx_hash_hex} after {self.confirmation_timeout}s",
                tx_hash=tx_hash_hex,
                cause=e
            )

        if receipt['status'] != 1:
            raise DeploymentRejected(
                f"Deployment transaction {tx_hash_hex} reverted",
                tx_hash=tx_hash_hex
            )

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise DeploymentRejected(
                f"Receipt for {tx_hash_hex} carries no contract address",
                tx_hash=tx_hash_hex
            )

        logger.success(f"Contract deployed at {contract_address}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return DeploymentReceipt(
            contract_address=contract_address,
            tx_hash=tx_hash_hex,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed']
        )
