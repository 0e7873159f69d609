"""
Deployment Configuration
Loads environment and constructor constants once at process start
"""

import os
import json
import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from .errors import ConfigError


DEFAULT_CONFIG_PATH = "config/deploy_config.json"
DEFAULT_ARTIFACTS_DIR = "artifacts"
DEFAULT_CONFIRMATION_TIMEOUT = 300
DEFAULT_RPC_TIMEOUT = 30

# Use the signer's own address as royalty receiver
SIGNER_PLACEHOLDER = "signer"

DEFAULT_CONSTRUCTOR = {
    'name': "Lion King",
    'symbol': "LIONK",
    'max_supply': 5000,
    'mint_price_ether': "0.03",
    'max_per_tx': 5,
    'base_uri': "ipfs://Qm.../metadata/",
    'royalty_receiver': SIGNER_PLACEHOLDER,
    'royalty_fee_bps': 500,  # 5% (out of 10000)
}


@dataclass(frozen=True)
class ConstructorSettings:
    """Constructor constants as configured (mint price already in wei)"""
    name: str
    symbol: str
    max_supply: int
    mint_price_wei: int
    max_per_tx: int
    base_uri: str
    royalty_receiver: str
    royalty_fee_bps: int


@dataclass(frozen=True)
class DeployConfig:
    """Everything a deployment run needs, resolved before the run starts"""
    rpc_url: Optional[str]
    private_key: Optional[str] = field(default=None, repr=False)
    contract_name: str = "LionKing"
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    rpc_timeout: float = DEFAULT_RPC_TIMEOUT
    constructor: ConstructorSettings = None

    def __post_init__(self):
        if self.constructor is None:
            object.__setattr__(self, 'constructor', parse_constructor(DEFAULT_CONSTRUCTOR))


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> DeployConfig:
    """
    Load deployment configuration

    Args:
        config_path: JSON constants file (None = DEPLOY_CONFIG or default)
        env_file: .env file to read (None = search from cwd)
        environ: Environment mapping (None = os.environ after loading .env)

    Returns:
        DeployConfig instance
    """
    if environ is None:
        load_dotenv(env_file)
        environ = os.environ

    path = config_path or environ.get('DEPLOY_CONFIG') or DEFAULT_CONFIG_PATH
    file_config = _read_json(path)

    constructor = dict(DEFAULT_CONSTRUCTOR)
    constructor.update(file_config.get('constructor', {}))

    config = DeployConfig(
        rpc_url=environ.get('DEPLOY_RPC_URL') or environ.get('ALCHEMY_RPC_URL'),
        private_key=environ.get('DEPLOYER_PRIVATE_KEY') or environ.get('PRIVATE_KEY'),
        contract_name=file_config.get('contract_name', "LionKing"),
        artifacts_dir=environ.get('ARTIFACTS_DIR') or file_config.get('artifacts_dir', DEFAULT_ARTIFACTS_DIR),
        confirmation_timeout=_positive_number(
            environ.get('CONFIRMATION_TIMEOUT'), 'CONFIRMATION_TIMEOUT', DEFAULT_CONFIRMATION_TIMEOUT
        ),
        rpc_timeout=_positive_number(environ.get('RPC_TIMEOUT'), 'RPC_TIMEOUT', DEFAULT_RPC_TIMEOUT),
        constructor=parse_constructor(constructor)
    )

    logger.debug(f"Configuration loaded from {path}: contract={config.contract_name}")
    return config


def parse_constructor(values: Dict) -> ConstructorSettings:
    """Convert raw constructor constants into ConstructorSettings"""
    try:
        mint_price = Decimal(str(values['mint_price_ether']))
    except (KeyError, InvalidOperation) as e:
        raise ConfigError(f"Invalid mint_price_ether: {values.get('mint_price_ether')!r}", e)

    if not mint_price.is_finite():
        raise ConfigError(f"mint_price_ether must be a finite amount, got {mint_price}")

    if mint_price < 0:
        raise ConfigError(f"mint_price_ether must not be negative: {mint_price}")

    try:
        mint_price_wei = Web3.to_wei(mint_price, 'ether')
    except ValueError as e:
        raise ConfigError(f"mint_price_ether out of range: {mint_price}", e)

    receiver = values.get('royalty_receiver') or SIGNER_PLACEHOLDER

    try:
        return ConstructorSettings(
            name=values['name'],
            symbol=values['symbol'],
            max_supply=_integer(values['max_supply'], 'max_supply'),
            mint_price_wei=mint_price_wei,
            max_per_tx=_integer(values['max_per_tx'], 'max_per_tx'),
            base_uri=values['base_uri'],
            royalty_receiver=receiver,
            royalty_fee_bps=_integer(values['royalty_fee_bps'], 'royalty_fee_bps')
        )
    except KeyError as e:
        raise ConfigError(f"Missing constructor setting: {e.args[0]}", e)


def _read_json(path: str) -> Dict:
    """Read JSON constants file, empty if missing"""
    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}, using built-in defaults")
        return {}

    try:
        with open(path, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {path}", e)


def _integer(value, name: str) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ConfigError(f"{name} must be a whole number, got {value!r}")

    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise ConfigError(f"{name} must be an integer, got {value!r}", e)

    raise ConfigError(f"{name} must be an integer, got {value!r}")


def _positive_number(raw: Optional[str], name: str, default: float) -> float:
    if raw is None or raw == "":
        return default

    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}", e)

    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive finite number, got {raw!r}")

    return value
