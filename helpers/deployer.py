"""
Contract Deployer
Submits one creation transaction through a factory and waits for it
"""

import os
from typing import Dict, Optional, Sequence
from loguru import logger
from dotenv import load_dotenv

from blockchain.contract_factory import ContractFactory, DeploymentResult, DEFAULT_RECEIPT_TIMEOUT
from blockchain.errors import DeploymentError

load_dotenv()


def get_receipt_timeout() -> float:
    """Receipt wait in seconds (DEPLOY_RECEIPT_TIMEOUT)"""
    raw = os.getenv('DEPLOY_RECEIPT_TIMEOUT', DEFAULT_RECEIPT_TIMEOUT)

    try:
        timeout = float(raw)
    except (TypeError, ValueError) as e:
        raise DeploymentError(f"DEPLOY_RECEIPT_TIMEOUT must be a number of seconds, got {raw!r}") from e

    if not timeout > 0:
        raise DeploymentError(f"DEPLOY_RECEIPT_TIMEOUT must be positive, got {raw!r}")

    return timeout


def deploy_contract(
    name: str,
    deployer,
    factory: ContractFactory,
    args: Optional[Sequence] = None,
    opts: Optional[Dict] = None
) -> DeploymentResult:
    """
    Deploy a contract

    Args:
        name: Contract name for logs
        deployer: Wallet manager paying for the deployment
        factory: Contract factory bound to the deployer
        args: Constructor arguments
        opts: Deployment options (e.g. {'gasLimit': 1000000})

    Returns:
        DeploymentResult
    """
    args = list(args or [])
    opts = dict(opts or {})
    timeout = get_receipt_timeout()

    logger.info(f"Deploying {name} from {deployer.address}")
    if opts:
        logger.info(f"  Options: {opts}")

    tx_hash = factory.deploy(*args, **opts)

    logger.info("Waiting for confirmation...")
    result = factory.wait_for_deployment(tx_hash, timeout=timeout)

    logger.success(f"✅ {name} deployed at {result.address}")
    logger.info(f"  Transaction hash: {result.transaction_hash}")
    logger.info(f"  Block: {result.block_number}")
    logger.info(f"  Gas used: {result.gas_used}")

    rpc_manager = getattr(deployer, 'rpc_manager', None)
    if rpc_manager is not None:
        explorer_url = rpc_manager.get_explorer_url(result.address)
        if explorer_url:
            logger.info(f"  Explorer: {explorer_url}")

    return result

