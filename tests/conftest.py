"""
Shared fixtures
"""

import json
import pytest
from unittest.mock import Mock
from hexbytes import HexBytes
from loguru import logger


DEPLOYER_KEY = '0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318'
DEPLOYER_ADDRESS = '0x2c7536E3605D9C16a7a3D7b1898e529396a65c23'
DEPLOYED_ADDRESS = '0x5fbdb2315678afecb367f032d93f642f64180aa3'
TX_HASH = HexBytes('0x' + 'ab' * 32)

# PUSH1 1 PUSH1 12 PUSH1 0 CODECOPY PUSH1 1 PUSH1 0 RETURN | runtime: STOP
DRAIN_BYTECODE = '0x6001600c60003960016000f300'

DRAIN_ABI = [
    {"type": "constructor", "inputs": [], "stateMutability": "nonpayable"},
    {
        "type": "function",
        "name": "drain",
        "inputs": [{"name": "token", "type": "address"}],
        "outputs": [],
        "stateMutability": "nonpayable"
    }
]


@pytest.fixture
def reset_logger():
    """Drop sinks added by entry points under test"""
    yield
    logger.remove()


def make_receipt(status=1, contract_address=DEPLOYED_ADDRESS):
    return {
        'status': status,
        'contractAddress': contract_address,
        'blockNumber': 42,
        'gasUsed': 53000,
        'transactionHash': TX_HASH,
    }


def make_wallet(receipt=None):
    """Mock signer with a mock Web3 connection"""
    w3 = Mock()

    contract = Mock()
    contract.constructor.return_value.build_transaction.side_effect = (
        lambda tx_params: dict(tx_params, data=DRAIN_BYTECODE)
    )
    w3.eth.contract.return_value = contract
    w3.eth.wait_for_transaction_receipt.return_value = receipt or make_receipt()

    wallet = Mock()
    wallet.w3 = w3
    wallet.address = DEPLOYER_ADDRESS
    wallet.chain_id = 31337
    wallet.rpc_manager = None
    wallet.get_nonce.return_value = 7
    wallet.send_transaction.return_value = TX_HASH
    return wallet


@pytest.fixture
def wallet():
    return make_wallet()


@pytest.fixture
def forge_json():
    """forge build output shape"""
    return {
        "abi": DRAIN_ABI,
        "bytecode": {"object": DRAIN_BYTECODE, "sourceMap": "", "linkReferences": {}},
        "deployedBytecode": {"object": "0x00"}
    }


@pytest.fixture
def write_artifact(tmp_path):
    """Write artifact JSON under tmp_path/out/<Name>.sol/<Name>.json"""
    def _write(contract_json, name="Drain"):
        path = tmp_path / "out" / f"{name}.sol" / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(contract_json))
        return str(path)
    return _write
