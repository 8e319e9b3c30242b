"""
Wallet Manager
Deployer wallet bound to the configured network
"""

import os
from functools import lru_cache
from typing import Dict, Optional
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from utils.rpc_manager import RPCManager

load_dotenv()


class WalletManager:
    """
    Signs and sends transactions from the deployer account
    """

    def __init__(
        self,
        private_key: Optional[str] = None,
        w3: Optional[Web3] = None,
        rpc_manager: Optional[RPCManager] = None
    ):
        """
        Initialize wallet manager

        Args:
            private_key: Deployer key (None = DEPLOYER_PRIVATE_KEY)
            w3: Connected Web3 instance (None = connect through RPCManager)
            rpc_manager: RPC manager used when w3 is not given
        """
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        if not private_key:
            raise ValueError("DEPLOYER_PRIVATE_KEY must be set in .env")

        self.account = Account.from_key(private_key)
        self.address = self.account.address

        if w3 is None:
            self.rpc_manager = rpc_manager or RPCManager()
            w3 = self.rpc_manager.get_web3()
        else:
            self.rpc_manager = rpc_manager

        self.w3 = w3
        self._chain_id = None

        logger.info(f"Deployer wallet: {self.address}")

    @property
    def chain_id(self) -> int:
        """Chain id reported by the connected node"""
        if self._chain_id is None:
            self._chain_id = self.w3.eth.chain_id
        return self._chain_id

    def get_nonce(self) -> int:
        """Next nonce, including pending transactions"""
        return self.w3.eth.get_transaction_count(self.address, 'pending')

    def get_balance(self) -> Decimal:
        """
        Get native balance

        Returns:
            Balance in ether units
        """
        balance_wei = self.w3.eth.get_balance(self.address)
        return Decimal(str(self.w3.from_wei(balance_wei, 'ether')))

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def send_transaction(self, transaction: Dict) -> bytes:
        """
        Sign and broadcast a transaction

        Args:
            transaction: Transaction dict

        Returns:
            Transaction hash
        """
        signed_tx = self.sign_transaction(transaction)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)


@lru_cache(maxsize=None)
def get_wallet() -> WalletManager:
    """Process-wide deployer wallet built from environment configuration"""
    return WalletManager()
