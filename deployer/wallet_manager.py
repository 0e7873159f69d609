"""
Wallet Manager
Resolves the deployer signing identity from configured key material
"""

from typing import Optional
from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger

from .errors import SignerUnavailable


class WalletManager:
    """
    Provides the deployer account

    The private key never leaves this object; callers get a LocalAccount
    that signs transactions.
    """

    def __init__(self, private_key: Optional[str]):
        """
        Initialize wallet manager

        Args:
            private_key: Hex private key (None or empty = no signer configured)
        """
        self._private_key = private_key
        self._account: Optional[LocalAccount] = None

    def get_signer(self) -> LocalAccount:
        """
        Get deployer account

        Returns:
            LocalAccount for the configured key

        Raises:
            SignerUnavailable: If no key is configured or it is malformed
        """
        if self._account is not None:
            return self._account

        if not self._private_key:
            raise SignerUnavailable(
                "No deployer key configured (set DEPLOYER_PRIVATE_KEY or PRIVATE_KEY in .env)"
            )

        try:
            self._account = Account.from_key(self._private_key)
        except Exception as e:
            # Never echo the key itself
            raise SignerUnavailable("Configured deployer key is not a valid private key", e)

        logger.debug(f"Deployer wallet: {self._account.address}")
        return self._account

