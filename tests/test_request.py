"""
Unit Tests for Deployment Request building and validation
"""

import dataclasses
import pytest

from deployer.config import DeployConfig
from deployer.errors import InvalidArguments
from deployer.request import (
    ConstructorArgs,
    DeploymentRequest,
    validate_against_abi,
    validate_bounds,
    validate_request,
)

from conftest import DEV_ADDRESS, LIONKING_ABI


CONSTRUCTOR_INPUTS = LIONKING_ABI[0]['inputs']


@pytest.fixture
def args():
    """Original LionKing constructor arguments"""
    return ConstructorArgs(
        name="Lion King",
        symbol="LIONK",
        max_supply=5000,
        mint_price=30000000000000000,
        max_per_tx=5,
        base_uri="ipfs://Qm.../metadata/",
        royalty_receiver=DEV_ADDRESS,
        royalty_fee_bps=500
    )


class TestBuild:

    def test_signer_placeholder_resolves_to_signer(self, signer):
        settings = DeployConfig(rpc_url=None).constructor
        request = DeploymentRequest.build("LionKing", settings, signer)

        assert request.contract_name == "LionKing"
        assert request.signer is signer
        assert request.constructor_args.royalty_receiver == signer.address

    def test_as_tuple_order(self, args):
        assert args.as_tuple() == (
            "Lion King", "LIONK", 5000, 30000000000000000, 5,
            "ipfs://Qm.../metadata/", DEV_ADDRESS, 500
        )

    def test_request_is_immutable(self, signer):
        settings = DeployConfig(rpc_url=None).constructor
        request = DeploymentRequest.build("LionKing", settings, signer)

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.contract_name = "Other"


class TestValidateBounds:

    def test_valid_args(self, args):
        validate_bounds(args)

    @pytest.mark.parametrize("changes", [
        {'royalty_fee_bps': 10001},
        {'royalty_fee_bps': -1},
        {'max_supply': 0},
        {'max_supply': -5},
        {'max_per_tx': -1},
        {'mint_price': -1},
        {'mint_price': 0.03},
        {'max_per_tx': True},
        {'name': ""},
        {'symbol': ""},
        {'royalty_receiver': "0x1234"},
        {'royalty_receiver': "signer"}
    ])
    def test_rejected(self, args, changes):
        with pytest.raises(InvalidArguments):
            validate_bounds(dataclasses.replace(args, **changes))

    def test_free_mint_allowed(self, args):
        validate_bounds(dataclasses.replace(args, mint_price=0))


class TestValidateAgainstAbi:

    def test_returns_checksummed_tuple(self, args):
        lowered = dataclasses.replace(args, royalty_receiver=DEV_ADDRESS.lower())

        prepared = validate_against_abi(lowered, CONSTRUCTOR_INPUTS)

        assert prepared[6] == DEV_ADDRESS
        assert prepared[:6] == args.as_tuple()[:6]

    def test_arity_mismatch(self, args):
        with pytest.raises(InvalidArguments, match="expects 7 arguments, got 8"):
            validate_against_abi(args, CONSTRUCTOR_INPUTS[:7])

    def test_no_constructor(self, args):
        with pytest.raises(InvalidArguments):
            validate_against_abi(args, [])

    def test_type_mismatch(self, args):
        inputs = [dict(i) for i in CONSTRUCTOR_INPUTS]
        inputs[2]['type'] = 'address'

        with pytest.raises(InvalidArguments, match="_maxSupply"):
            validate_against_abi(args, inputs)

    def test_value_exceeds_abi_width(self, args):
        # uint96 royalty numerator
        wide = dataclasses.replace(args, royalty_fee_bps=2 ** 96)

        with pytest.raises(InvalidArguments):
            validate_against_abi(wide, CONSTRUCTOR_INPUTS)

    def test_validate_request_runs_bounds_first(self, signer):
        settings = dataclasses.replace(DeployConfig(rpc_url=None).constructor, royalty_fee_bps=12000)
        request = DeploymentRequest.build("LionKing", settings, signer)

        with pytest.raises(InvalidArguments, match="royalty_fee_bps"):
            validate_request(request, CONSTRUCTOR_INPUTS)
