"""
Drain Deployment Script
Deploys the Drain contract from forge build output
"""

import os
import sys
from loguru import logger
from dotenv import load_dotenv

from blockchain.artifact import load_artifact, artifact_path
from blockchain.contract_factory import ContractFactory, DeploymentResult
from helpers import get_wallet, deploy_contract

load_dotenv()


DRAIN_ARTIFACT_PATH = os.getenv('DRAIN_ARTIFACT_PATH', artifact_path("Drain"))
DRAIN_GAS_LIMIT = 1000000


def configure_logging():
    """Log to stderr only"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=os.getenv('LOG_LEVEL', 'INFO')
    )


def deploy(path: str = None, wallet=None) -> DeploymentResult:
    """Deploy Drain with no constructor args and a fixed gas limit"""
    artifact = load_artifact(path or DRAIN_ARTIFACT_PATH, name="Drain")

    if wallet is None:
        wallet = get_wallet()

    factory = ContractFactory(artifact, wallet)

    return deploy_contract(
        name="Drain",
        deployer=wallet,
        factory=factory,
        args=[],
        opts={
            'gasLimit': DRAIN_GAS_LIMIT,
        }
    )


def main() -> int:
    """Run one deployment; 0 on success, 1 on any failure"""
    configure_logging()

    try:
        deploy()
    except Exception as e:
        logger.error(f"Deployment failed: {e!r}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
