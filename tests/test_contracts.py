"""
End-to-end Deployment Tests
Deploys against web3's in-memory EthereumTesterProvider
"""

import pytest
from unittest.mock import patch
from web3 import Web3
from eth_account import Account

from helpers.wallet_manager import WalletManager
from scripts import deploy_drain


# Note: requires web3[tester] (eth-tester + py-evm)
pytest.importorskip("eth_tester")


pytestmark = pytest.mark.usefixtures("reset_logger")


@pytest.fixture
def w3():
    """Fresh in-memory chain"""
    from web3 import EthereumTesterProvider
    return Web3(EthereumTesterProvider())


@pytest.fixture
def funded_wallet(w3):
    """Deployer funded from the first unlocked tester account"""
    account = Account.create()
    tx_hash = w3.eth.send_transaction({
        'from': w3.eth.accounts[0],
        'to': account.address,
        'value': Web3.to_wei(10, 'ether')
    })
    w3.eth.wait_for_transaction_receipt(tx_hash)
    return WalletManager(private_key=account.key, w3=w3)


@pytest.fixture
def unfunded_wallet(w3):
    return WalletManager(private_key=Account.create().key, w3=w3)


@pytest.fixture
def drain_path(write_artifact, forge_json):
    return write_artifact(forge_json)


class TestDrainDeployment:
    """Deploy Drain on a local chain"""

    def test_deployment(self, w3, funded_wallet, drain_path):
        """Deployed instance has an address and runtime code"""
        result = deploy_drain.deploy(drain_path, wallet=funded_wallet)

        assert Web3.is_checksum_address(result.address)
        assert result.deployer == funded_wallet.address
        assert w3.eth.get_code(result.address) == b'\x00'
        assert result.contract.address == result.address

    def test_gas_limit_on_chain(self, w3, funded_wallet, drain_path):
        """Mined creation tx carries the fixed gas limit"""
        result = deploy_drain.deploy(drain_path, wallet=funded_wallet)

        tx = w3.eth.get_transaction(result.transaction_hash)
        assert tx['gas'] == 1000000

    def test_one_transaction_per_run(self, w3, funded_wallet, drain_path):
        """Deployer nonce advances by exactly one"""
        nonce_before = w3.eth.get_transaction_count(funded_wallet.address)

        deploy_drain.deploy(drain_path, wallet=funded_wallet)

        assert w3.eth.get_transaction_count(funded_wallet.address) == nonce_before + 1

    def test_main_success(self, funded_wallet, drain_path, monkeypatch):
        monkeypatch.setattr(deploy_drain, 'DRAIN_ARTIFACT_PATH', drain_path)

        with patch.object(deploy_drain, 'get_wallet', return_value=funded_wallet):
            assert deploy_drain.main() == 0

    def test_insufficient_funds(self, w3, unfunded_wallet, drain_path, monkeypatch):
        """Unfunded deployer fails with exit code 1 and nothing is mined"""
        monkeypatch.setattr(deploy_drain, 'DRAIN_ARTIFACT_PATH', drain_path)
        block_before = w3.eth.block_number

        with patch.object(deploy_drain, 'get_wallet', return_value=unfunded_wallet):
            assert deploy_drain.main() == 1

        assert w3.eth.get_transaction_count(unfunded_wallet.address) == 0
        assert w3.eth.block_number == block_before
