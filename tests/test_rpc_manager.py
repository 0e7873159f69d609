"""
Unit Tests for RPC Manager
"""

import pytest
from web3 import Web3

from deployer.errors import ConfigError
from utils.rpc_manager import RPCManager


class TestRPCManager:

    def test_missing_endpoint(self):
        with pytest.raises(ConfigError):
            RPCManager(None).get_web3()

    def test_missing_endpoint_is_not_connected(self):
        assert not RPCManager("").is_connected()

    def test_web3_created_once(self):
        rpc_manager = RPCManager("http://127.0.0.1:8545", request_timeout=7)

        w3 = rpc_manager.get_web3()

        assert isinstance(w3, Web3)
        assert rpc_manager.get_web3() is w3

    @pytest.mark.parametrize("url, expected", [
        ("https://polygon-mainnet.g.alchemy.com/v2/secret-key", "https://polygon-mainnet.g.alchemy.com/..."),
        ("http://127.0.0.1:8545", "http://127.0.0.1:8545"),
        (None, "<unset>")
    ])
    def test_redacted_url(self, url, expected):
        assert RPCManager(url).redacted_url() == expected
