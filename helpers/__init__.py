"""
Deployment Helpers
Deployer wallet and the generic deploy_contract operation
"""

from .wallet_manager import WalletManager, get_wallet
from .deployer import deploy_contract

__all__ = ['WalletManager', 'get_wallet', 'deploy_contract']
