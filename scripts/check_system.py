"""
System Check Script
Verifies configuration, RPC connection, deployer balance and artifact before deploying

Run: python -m scripts.check_system
"""

import sys
from decimal import Decimal
from loguru import logger

from blockchain.artifact_loader import ArtifactLoader
from deployer.config import DeployConfig, load_config
from deployer.errors import DeploymentError
from deployer.request import DeploymentRequest, validate_request
from deployer.wallet_manager import WalletManager
from utils.rpc_manager import RPCManager


# Warn below this native balance
MIN_BALANCE = Decimal("0.05")


def check_environment_variables(config: DeployConfig) -> bool:
    """Check that endpoint and key material are configured"""
    logger.info("Checking environment variables...")

    missing = []
    if not config.rpc_url:
        missing.append('DEPLOY_RPC_URL')
    if not config.private_key:
        missing.append('DEPLOYER_PRIVATE_KEY')

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    logger.success("✓ All environment variables set")
    return True


def check_rpc_connection(rpc_manager: RPCManager) -> bool:
    """Check RPC endpoint connection"""
    logger.info("Checking RPC connection...")

    if not rpc_manager.is_connected():
        logger.error(f"  ✗ {rpc_manager.redacted_url()}: Connection failed")
        return False

    w3 = rpc_manager.get_web3()
    logger.success(
        f"  ✓ Connected (Chain ID: {w3.eth.chain_id}, Block: {w3.eth.block_number})"
    )
    return True


def check_wallet_balance(config: DeployConfig, rpc_manager: RPCManager) -> bool:
    """Check deployer balance"""
    logger.info("Checking deployer balance...")

    signer = WalletManager(config.private_key).get_signer()
    w3 = rpc_manager.get_web3()

    balance = w3.from_wei(w3.eth.get_balance(signer.address), 'ether')
    logger.info(f"  Deployer {signer.address}: {balance:.4f}")

    if balance <= 0:
        logger.error("  ✗ Deployer has no funds")
        return False

    if balance < MIN_BALANCE:
        logger.warning(f"  ⚠ Deployer balance low (below {MIN_BALANCE})")
    else:
        logger.success("  ✓ Deployer balance sufficient")

    return True


def check_artifact(config: DeployConfig) -> bool:
    """Check artifact presence and constructor arguments"""
    logger.info(f"Checking {config.contract_name} artifact...")

    artifact = ArtifactLoader(config.artifacts_dir).load(config.contract_name)
    signer = WalletManager(config.private_key).get_signer()

    request = DeploymentRequest.build(config.contract_name, config.constructor, signer)
    validate_request(request, artifact.constructor_inputs())

    logger.success(f"  ✓ {artifact.path} accepts the configured constructor arguments")
    return True


def main() -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Deployer System Check")
    logger.info("=" * 70)

    try:
        config = load_config()
    except DeploymentError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    rpc_manager = RPCManager(config.rpc_url, config.rpc_timeout)

    checks = [
        ("Environment Variables", lambda: check_environment_variables(config)),
        ("RPC Connection", lambda: check_rpc_connection(rpc_manager)),
        ("Deployer Balance", lambda: check_wallet_balance(config, rpc_manager)),
        ("Contract Artifact", lambda: check_artifact(config))
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python main.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
