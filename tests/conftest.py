"""
Shared fixtures: LionKing ABI, Hardhat artifact layout, dev signer, mocked Web3
"""

import json
import pytest
from unittest.mock import Mock
from eth_account import Account

from deployer.config import DeployConfig


# Hardhat dev account #0 (public test key)
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

DEPLOYED_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TX_HASH = bytes.fromhex("ab" * 32)

LIONKING_ABI = [
    {
        "type": "constructor",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "name_", "type": "string"},
            {"name": "symbol_", "type": "string"},
            {"name": "_maxSupply", "type": "uint256"},
            {"name": "_mintPrice", "type": "uint256"},
            {"name": "_maxPerTx", "type": "uint256"},
            {"name": "baseURI_", "type": "string"},
            {"name": "royaltyReceiver", "type": "address"},
            {"name": "royaltyFeeNumerator", "type": "uint96"}
        ]
    },
    {
        "type": "function",
        "name": "mint",
        "stateMutability": "payable",
        "inputs": [{"name": "quantity", "type": "uint256"}],
        "outputs": []
    }
]


@pytest.fixture
def signer():
    """Hardhat dev account"""
    return Account.from_key(DEV_PRIVATE_KEY)


@pytest.fixture
def artifacts_dir(tmp_path):
    """Hardhat-style artifacts directory holding LionKing"""
    contract_dir = tmp_path / "artifacts" / "contracts" / "LionKing.sol"
    contract_dir.mkdir(parents=True)

    (contract_dir / "LionKing.json").write_text(json.dumps({
        "contractName": "LionKing",
        "abi": LIONKING_ABI,
        "bytecode": "0x6080604052348015600f57600080fd5b50"
    }))

    return tmp_path / "artifacts"


@pytest.fixture
def config(artifacts_dir):
    """Configuration with the built-in LionKing constants"""
    return DeployConfig(
        rpc_url="http://127.0.0.1:8545",
        private_key=DEV_PRIVATE_KEY,
        artifacts_dir=str(artifacts_dir),
        confirmation_timeout=5
    )


@pytest.fixture
def w3():
    """Mock Web3 instance reporting a successful deployment"""
    w3 = Mock()

    w3.eth.get_transaction_count.return_value = 0
    w3.eth.contract.return_value.constructor.return_value.build_transaction.return_value = {
        'from': DEV_ADDRESS,
        'nonce': 0,
        'gas': 3000000,
        'gasPrice': 1000000000,
        'chainId': 31337,
        'value': 0,
        'data': "0x6080604052348015600f57600080fd5b50"
    }
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {
        'status': 1,
        'contractAddress': DEPLOYED_ADDRESS,
        'blockNumber': 1,
        'gasUsed': 2500000
    }

    return w3
