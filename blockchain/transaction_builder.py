"""
Transaction Builder
Constructs contract creation transactions from deployment options
"""

from typing import Dict, Sequence
from web3 import Web3
from loguru import logger

from .errors import DeploymentError


# Deployment option name -> transaction field
OPTION_FIELDS = {
    'gasLimit': 'gas',
    'gasPrice': 'gasPrice',
    'maxFeePerGas': 'maxFeePerGas',
    'maxPriorityFeePerGas': 'maxPriorityFeePerGas',
    'value': 'value',
    'nonce': 'nonce',
}


class TransactionBuilder:
    """
    Builds deployment transactions for a signer
    """

    def __init__(self, w3: Web3, wallet_manager):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            wallet_manager: Signer supplying address, nonce and chain id
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager

    def translate_options(self, opts: Dict) -> Dict:
        """
        Map deployment options onto transaction fields

        Args:
            opts: Options such as {'gasLimit': 1000000}

        Returns:
            Transaction fields such as {'gas': 1000000}
        """
        unknown = sorted(set(opts) - set(OPTION_FIELDS))
        if unknown:
            raise DeploymentError(f"Unsupported deployment options: {', '.join(unknown)}")

        fields = {}
        for option, value in opts.items():
            if value is None:
                continue
            fields[OPTION_FIELDS[option]] = int(value)

        if 'gasPrice' in fields and ('maxFeePerGas' in fields or 'maxPriorityFeePerGas' in fields):
            raise DeploymentError("gasPrice cannot be combined with EIP-1559 fee options")

        return fields

    def build_deployment_tx(self, contract, args: Sequence, opts: Dict) -> Dict:
        """
        Build contract creation transaction

        Args:
            contract: Web3 contract factory (abi + bytecode)
            args: Constructor arguments
            opts: Deployment options

        Returns:
            Transaction dict ready for signing
        """
        fields = self.translate_options(opts)

        tx_params = {
            'from': self.wallet_manager.address,
            'chainId': self.wallet_manager.chain_id,
        }
        tx_params.update(fields)

        if 'nonce' not in tx_params:
            tx_params['nonce'] = self.wallet_manager.get_nonce()

        tx = contract.constructor(*args).build_transaction(tx_params)

        logger.debug(
            f"Deployment tx: nonce={tx.get('nonce')} gas={tx.get('gas')} "
            f"chainId={tx.get('chainId')} data={len(tx.get('data', '')) // 2 - 1} bytes"
        )
        return tx
