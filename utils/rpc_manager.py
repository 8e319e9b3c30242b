"""
RPC Manager
Resolves the target network from config and opens the Web3 connection
"""

import os
import json
from typing import Optional, Dict
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

load_dotenv()


# Resolved from the checkout; config/ is not installed with the package
CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config', 'networks.json')
DEFAULT_NETWORK = 'anvil'


class RPCManager:
    """
    Network configuration and connection

    The network is picked with NETWORK (default: anvil); each network entry
    names the env var holding its RPC URL and a fallback URL.
    """

    def __init__(self, network: Optional[str] = None, config_path: Optional[str] = None):
        """
        Initialize RPC Manager

        Args:
            network: Network name (None = NETWORK env var)
            config_path: Path to networks.json (None = NETWORKS_CONFIG or the checkout's config/networks.json)
        """
        config_path = config_path or os.getenv('NETWORKS_CONFIG', CONFIG_PATH)

        if not os.path.exists(config_path):
            raise FileNotFoundError(
                f"Network config not found: {config_path}. "
                f"Run from a repository checkout or set NETWORKS_CONFIG"
            )

        with open(config_path, 'r') as f:
            self.config = json.load(f)

        self.network = network or os.getenv('NETWORK', DEFAULT_NETWORK)
        self.network_config = self._get_network_config(self.network)
        self.rpc_url = self._resolve_rpc_url(self.network_config)

        self.w3 = None

        logger.info(f"RPC Manager initialized for {self.network_config['name']}")

    def _get_network_config(self, network: str) -> Dict:
        """Look up network entry"""
        networks = self.config['networks']

        if network not in networks:
            raise ValueError(
                f"Unknown network '{network}'. Available: {', '.join(sorted(networks))}"
            )

        return networks[network]

    def _resolve_rpc_url(self, network_config: Dict) -> str:
        """RPC URL from env, falling back to the configured default"""
        rpc_url = os.getenv(network_config['rpc_url_env']) or network_config.get('default_rpc_url')

        if not rpc_url:
            raise ValueError(f"{network_config['rpc_url_env']} must be set for {network_config['name']}")

        return rpc_url

    @property
    def chain_id(self) -> int:
        """Configured chain id"""
        return self.network_config['chain_id']

    @property
    def native_symbol(self) -> str:
        return self.network_config.get('native_symbol', 'ETH')

    def get_web3(self) -> Web3:
        """
        Get connected Web3 instance

        Returns:
            Web3 instance

        Raises:
            ConnectionError: RPC endpoint unreachable
        """
        if self.w3 is not None:
            return self.w3

        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to {self.network_config['name']} RPC")

        connected_chain_id = w3.eth.chain_id
        if connected_chain_id != self.chain_id:
            logger.warning(
                f"RPC reports chain id {connected_chain_id}, "
                f"config expects {self.chain_id} for {self.network}"
            )

        logger.success(f"Connected to {self.network_config['name']} (Block: {w3.eth.block_number})")

        self.w3 = w3
        return w3

    def get_explorer_url(self, address: str) -> Optional[str]:
        """Explorer link for an address, if the network has an explorer"""
        explorer = self.network_config.get('explorer')
        if not explorer:
            return None
        return f"{explorer}/address/{address}"
