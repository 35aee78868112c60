"""
System Check Script
Verifies environment, configuration, connection, wallet and artifact before deploying

Run from the repository root as `python -m scripts.check_system`,
or as `python scripts/check_system.py` after `pip install -e .`
"""

import os
import sys
from decimal import Decimal
from typing import Dict
from loguru import logger

from blockchain.artifacts import ArtifactStore
from deployer.wallet_manager import WalletManager
from utils.network_config import connect, get_network_config, load_networks

CONTRACT_NAME = "ChainGallery"
MIN_DEPLOYER_BALANCE = Decimal("0.01")


def check_environment_variables(context: Dict) -> bool:
    """Check the variables the selected network needs are set"""
    logger.info("Checking environment variables...")

    catalogue = load_networks()
    name = os.getenv('DEPLOY_NETWORK') or catalogue.get('default_network', 'localhost')
    settings = catalogue.get('networks', {}).get(name, {})

    logger.info(f"  DEPLOY_NETWORK: {name}")

    required = []
    if not settings.get('development'):
        required.append('DEPLOYER_PRIVATE_KEY')

    rpc_env = settings.get('rpc_url_env')
    if rpc_env and not settings.get('rpc_url') and not os.getenv('DEPLOY_RPC_URL'):
        required.append(rpc_env)

    missing = [var for var in required if not os.getenv(var)]

    if missing:
        logger.error(f"  ✗ Missing environment variables: {', '.join(missing)}")
        return False

    logger.success("  ✓ All environment variables set")
    return True


def check_network_configuration(context: Dict) -> bool:
    """Check the selected network resolves to an RPC endpoint"""
    logger.info("Checking network configuration...")

    config = get_network_config()
    context['network'] = config

    logger.success(f"  ✓ {config.name}: {config.rpc_url}")
    return True


def check_rpc_connection(context: Dict) -> bool:
    """Check the RPC endpoint answers on the expected chain"""
    logger.info("Checking RPC connection...")

    config = context.get('network')
    if config is None:
        logger.warning("  No network configuration - skipping")
        return False

    w3 = connect(config)
    context['w3'] = w3

    logger.success(f"  ✓ Connected (Block: {w3.eth.block_number})")
    return True


def check_deployer_balance(context: Dict) -> bool:
    """Check the deployer wallet can pay for the deployment"""
    logger.info("Checking deployer balance...")

    w3 = context.get('w3')
    if w3 is None:
        logger.warning("  No RPC connection - skipping balance check")
        return False

    wallet_manager = WalletManager(w3, development=context['network'].development)
    balance = wallet_manager.get_balance()

    logger.info(f"  Deployer {wallet_manager.address}: {balance:.4f}")

    if balance < MIN_DEPLOYER_BALANCE:
        logger.warning(f"  ⚠ Deployer balance low (need at least {MIN_DEPLOYER_BALANCE})")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact(context: Dict) -> bool:
    """Check the contract has been compiled"""
    logger.info("Checking contract artifact...")

    store = ArtifactStore()

    if not store.artifact_exists(CONTRACT_NAME):
        logger.error(f"  ✗ No usable {CONTRACT_NAME} artifact in {store.root}")
        logger.info("  Run: npx hardhat compile")
        return False

    artifact = store.get_artifact(CONTRACT_NAME)

    if not artifact.is_deployable:
        logger.error(f"  ✗ {artifact.fully_qualified_name} has no bytecode")
        return False

    logger.success(f"  ✓ {artifact.fully_qualified_name}")
    return True


def main() -> int:
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("ChainGallery Deployment Check")
    logger.info("=" * 70)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Network Configuration", check_network_configuration),
        ("RPC Connection", check_rpc_connection),
        ("Deployer Balance", check_deployer_balance),
        ("Contract Artifact", check_artifact)
    ]

    context = {}
    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(context)
            results.append((name, result))
        except Exception as e:
            logger.error(f"  ✗ {e}")
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
        logger.success("✅ Ready to deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    logger.info("Re-run: python -m scripts.check_system (or install with pip install -e . first)")
    return 1


if __name__ == "__main__":
    sys.exit(main())
