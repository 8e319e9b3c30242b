"""
System Check Script
Verifies configuration, connection, balance and artifact before deploying
Run from the repo root: python -m scripts.check_system
"""

import os
import sys
from decimal import Decimal
from loguru import logger
from dotenv import load_dotenv

from blockchain.artifact import load_artifact
from blockchain.errors import DeploymentError
from helpers.wallet_manager import WalletManager
from scripts.deploy_drain import DRAIN_ARTIFACT_PATH, DRAIN_GAS_LIMIT
from utils.rpc_manager import RPCManager

load_dotenv()


def check_environment_variables():
    """Check if all required environment variables are set"""
    logger.info("Checking environment variables...")

    required_vars = [
        'DEPLOYER_PRIVATE_KEY',
    ]

    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    logger.success("✓ All environment variables set")
    return True


def check_rpc_connection():
    """Check RPC endpoint connection"""
    logger.info("Checking RPC connection...")

    try:
        rpc_manager = RPCManager()
        w3 = rpc_manager.get_web3()
    except (ValueError, ConnectionError) as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success(f"  ✓ {rpc_manager.network}: chain id {w3.eth.chain_id}")
    return True


def estimate_max_fee_per_gas(w3) -> int:
    """
    maxFeePerGas as web3 fills it for EIP-1559 transactions:
    priority fee + 2 * latest base fee (gas price on pre-London chains)
    """
    base_fee = w3.eth.get_block('latest').get('baseFeePerGas')

    if base_fee is None:
        return w3.eth.gas_price

    return w3.eth.max_priority_fee + 2 * base_fee


def check_wallet_balance():
    """Check deployer can cover the deployment gas limit at the worst-case fee"""
    logger.info("Checking deployer balance...")

    try:
        wallet = WalletManager()
    except (ValueError, ConnectionError) as e:
        logger.error(f"  ✗ {e}")
        return False

    balance = wallet.get_balance()
    symbol = wallet.rpc_manager.native_symbol

    max_cost_wei = DRAIN_GAS_LIMIT * estimate_max_fee_per_gas(wallet.w3)
    max_cost = Decimal(str(wallet.w3.from_wei(max_cost_wei, 'ether')))

    logger.info(f"  Deployer: {balance:.6f} {symbol}")
    logger.info(f"  Max deployment cost: {max_cost:.6f} {symbol}")

    if balance < max_cost:
        logger.error("  ✗ Deployer balance below max deployment cost")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact():
    """Check the compiled artifact loads and validates"""
    logger.info("Checking contract artifact...")

    try:
        artifact = load_artifact(DRAIN_ARTIFACT_PATH, name="Drain")
    except DeploymentError as e:
        logger.error(f"  ✗ {e}")
        return False

    if artifact.constructor_inputs:
        logger.error(f"  ✗ Drain constructor expects {len(artifact.constructor_inputs)} args, deploy passes none")
        return False

    logger.success(f"  ✓ {DRAIN_ARTIFACT_PATH} ({artifact.bytecode_size} bytes)")
    return True


def main():
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Drain Deployment System Check")
    logger.info("=" * 70)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Contract Artifact", check_artifact),
        ("RPC Connection", check_rpc_connection),
        ("Deployer Balance", check_wallet_balance),
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            result = False
        results.append((name, result))

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
        logger.success("✅ Ready to deploy")
        logger.info("Deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
