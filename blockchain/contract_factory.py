"""
Contract Factory
Binds a compiled artifact to a signer and deploys new instances
"""

from dataclasses import dataclass, field
from typing import Any
from web3 import Web3
from loguru import logger

from .artifact import Artifact
from .errors import DeploymentError
from .transaction_builder import TransactionBuilder


DEFAULT_RECEIPT_TIMEOUT = 120


@dataclass(frozen=True)
class DeploymentResult:
    """Deployed contract instance"""
    name: str
    address: str
    transaction_hash: str
    block_number: int
    gas_used: int
    deployer: str
    contract: Any = field(default=None, repr=False, compare=False)


class ContractFactory:
    """
    Deploys instances of one artifact, signed by one wallet
    """

    def __init__(self, artifact: Artifact, signer):
        """
        Initialize Contract Factory

        Args:
            artifact: Compiled contract
            signer: Wallet manager owning the Web3 connection and account
        """
        self.artifact = artifact
        self.signer = signer
        self.w3 = signer.w3

        self.contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        self.transaction_builder = TransactionBuilder(self.w3, signer)

    def deploy(self, *args, **opts) -> bytes:
        """
        Sign and send the creation transaction

        Args:
            *args: Constructor arguments
            **opts: Deployment options (gasLimit, gasPrice, maxFeePerGas, ...)

        Returns:
            Transaction hash
        """
        tx = self.transaction_builder.build_deployment_tx(self.contract, args, opts)
        tx_hash = self.signer.send_transaction(tx)

        logger.info(f"{self.artifact.name} creation tx sent: {Web3.to_hex(tx_hash)}")
        return tx_hash

    def wait_for_deployment(self, tx_hash: bytes, timeout: float = DEFAULT_RECEIPT_TIMEOUT) -> DeploymentResult:
        """
        Wait for the creation transaction to be mined

        Args:
            tx_hash: Hash returned by deploy()
            timeout: Seconds to wait for the receipt

        Returns:
            DeploymentResult
        """
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        tx_hex = Web3.to_hex(tx_hash)

        if receipt['status'] != 1:
            raise DeploymentError(
                f"{self.artifact.name} deployment reverted (tx {tx_hex}, gas used {receipt['gasUsed']})"
            )

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise DeploymentError(f"{self.artifact.name} receipt has no contract address (tx {tx_hex})")

        address = Web3.to_checksum_address(contract_address)

        return DeploymentResult(
            name=self.artifact.name,
            address=address,
            transaction_hash=tx_hex,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed'],
            deployer=self.signer.address,
            contract=self.w3.eth.contract(address=address, abi=self.artifact.abi),
        )
