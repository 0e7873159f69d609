"""
RPC Manager
Creates the Web3 client for the configured network endpoint
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from deployer.errors import ConfigError


class RPCManager:
    """
    Single-endpoint RPC access

    Every HTTP request carries the configured timeout.
    """

    def __init__(self, rpc_url: Optional[str], request_timeout: float = 30):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP(S) JSON-RPC endpoint
            request_timeout: Per-request timeout in seconds
        """
        self.rpc_url = rpc_url
        self.request_timeout = request_timeout
        self._w3: Optional[Web3] = None

    def get_web3(self) -> Web3:
        """
        Get Web3 instance (created on first use)

        Raises:
            ConfigError: If no endpoint is configured
        """
        if self._w3 is not None:
            return self._w3

        if not self.rpc_url:
            raise ConfigError("No RPC endpoint configured (set DEPLOY_RPC_URL or ALCHEMY_RPC_URL)")

        self._w3 = Web3(Web3.HTTPProvider(
            self.rpc_url,
            request_kwargs={'timeout': self.request_timeout}
        ))

        logger.info(f"RPC client created for {self.redacted_url()}")
        return self._w3

    def is_connected(self) -> bool:
        """Check endpoint connectivity"""
        try:
            return self.get_web3().is_connected()
        except Exception as e:
            logger.error(f"RPC connection check failed: {e}")
            return False

    def redacted_url(self) -> str:
        """Endpoint URL without the trailing path segment (usually an API key)"""
        if not self.rpc_url:
            return "<unset>"

        scheme, sep, rest = self.rpc_url.partition("://")
        host = rest.split("/", 1)[0]
        if not sep:
            return host
        return f"{scheme}://{host}/..." if "/" in rest else f"{scheme}://{host}"
