"""
Deployment Request
Constructor argument tuple and the local checks run before submission
"""

from dataclasses import dataclass, astuple
from typing import Dict, List, Tuple
from eth_abi import is_encodable
from web3 import Web3

from .config import ConstructorSettings, SIGNER_PLACEHOLDER
from .errors import InvalidArguments


MAX_ROYALTY_BPS = 10000


@dataclass(frozen=True)
class ConstructorArgs:
    """Constructor parameters in the order the contract declares them"""
    name: str
    symbol: str
    max_supply: int
    mint_price: int  # wei
    max_per_tx: int
    base_uri: str
    royalty_receiver: str
    royalty_fee_bps: int

    def as_tuple(self) -> Tuple:
        return astuple(self)


@dataclass(frozen=True)
class DeploymentRequest:
    """One contract instantiation, built once per run"""
    contract_name: str
    constructor_args: ConstructorArgs
    signer: object

    @classmethod
    def build(cls, contract_name: str, settings: ConstructorSettings, signer) -> 'DeploymentRequest':
        """
        Build request from configured constants

        Args:
            contract_name: Artifact name to instantiate
            settings: Constructor constants from config
            signer: Resolved signer (must expose .address)

        Returns:
            DeploymentRequest
        """
        receiver = settings.royalty_receiver
        if receiver == SIGNER_PLACEHOLDER:
            receiver = signer.address

        args = ConstructorArgs(
            name=settings.name,
            symbol=settings.symbol,
            max_supply=settings.max_supply,
            mint_price=settings.mint_price_wei,
            max_per_tx=settings.max_per_tx,
            base_uri=settings.base_uri,
            royalty_receiver=receiver,
            royalty_fee_bps=settings.royalty_fee_bps
        )

        return cls(contract_name=contract_name, constructor_args=args, signer=signer)


def validate_bounds(args: ConstructorArgs):
    """
    Check value ranges the contract relies on

    Raises:
        InvalidArguments: On the first violated bound
    """
    if not args.name or not args.symbol:
        raise InvalidArguments("Token name and symbol must not be empty")

    for field_name in ('max_supply', 'mint_price', 'max_per_tx', 'royalty_fee_bps'):
        value = getattr(args, field_name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise InvalidArguments(f"{field_name} must be an unsigned integer, got {value!r}")

    if args.max_supply < 1:
        raise InvalidArguments("max_supply must be at least 1")

    if args.royalty_fee_bps > MAX_ROYALTY_BPS:
        raise InvalidArguments(
            f"royalty_fee_bps must be within [0, {MAX_ROYALTY_BPS}], got {args.royalty_fee_bps}"
        )

    if not Web3.is_address(args.royalty_receiver):
        raise InvalidArguments(f"royalty_receiver is not a valid address: {args.royalty_receiver!r}")


def validate_against_abi(args: ConstructorArgs, constructor_inputs: List[Dict]) -> Tuple:
    """
    Check arity and types against the artifact's constructor

    Args:
        args: Constructor arguments
        constructor_inputs: ABI constructor inputs

    Returns:
        Argument tuple ready for the constructor call (addresses checksummed)
    """
    values = args.as_tuple()

    if len(values) != len(constructor_inputs):
        raise InvalidArguments(
            f"Constructor expects {len(constructor_inputs)} arguments, got {len(values)}"
        )

    prepared = []
    for value, abi_input in zip(values, constructor_inputs):
        abi_type = abi_input['type']
        label = abi_input.get('name') or abi_type

        if abi_type == 'address' and Web3.is_address(value):
            value = Web3.to_checksum_address(value)

        if not is_encodable(abi_type, value):
            raise InvalidArguments(f"Argument {label} ({value!r}) is not encodable as {abi_type}")

        prepared.append(value)

    return tuple(prepared)


def validate_request(request: DeploymentRequest, constructor_inputs: List[Dict]) -> Tuple:
    """Run every local check; returns the prepared argument tuple"""
    validate_bounds(request.constructor_args)
    return validate_against_abi(request.constructor_args, constructor_inputs)
