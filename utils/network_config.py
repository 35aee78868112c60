"""
Network Configuration
Selects the target network and connects to its RPC endpoint
"""

import os
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import ConfigurationError, NetworkConnectionError

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "networks.json"


@dataclass(frozen=True)
class NetworkConfig:
    """Settings for one deployment target"""

    name: str
    rpc_url: str
    chain_id: Optional[int] = None
    development: bool = False
    confirmation_timeout: float = 120
    gas_multiplier: float = 1.0


def load_networks(config_path: Optional[Union[Path, str]] = None) -> Dict:
    """
    Load the network catalogue

    Args:
        config_path: JSON file (defaults to config/networks.json)

    Returns:
        Parsed catalogue with 'default_network' and 'networks' keys
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    try:
        with open(path, 'r') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Network configuration not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid network configuration {path}: {e}") from e


def get_network_config(
    network: Optional[str] = None,
    config_path: Optional[Union[Path, str]] = None
) -> NetworkConfig:
    """
    Resolve the active network

    Args:
        network: Network name (None = DEPLOY_NETWORK or catalogue default)
        config_path: Network catalogue file

    Returns:
        NetworkConfig for the selected network
    """
    catalogue = load_networks(config_path)
    networks = catalogue.get('networks', {})

    name = network or os.getenv('DEPLOY_NETWORK') or catalogue.get('default_network', 'localhost')

    if name not in networks:
        available = ', '.join(sorted(networks))
        raise ConfigurationError(f"Unknown network '{name}' (available: {available})")

    settings = networks[name]

    # DEPLOY_RPC_URL wins over anything in the catalogue
    rpc_url = os.getenv('DEPLOY_RPC_URL')
    if not rpc_url and settings.get('rpc_url_env'):
        rpc_url = os.getenv(settings['rpc_url_env'])
    if not rpc_url:
        rpc_url = settings.get('rpc_url')

    if not rpc_url:
        env_name = settings.get('rpc_url_env', 'DEPLOY_RPC_URL')
        raise ConfigurationError(f"No RPC URL for network '{name}': set {env_name}")

    return NetworkConfig(
        name=name,
        rpc_url=rpc_url,
        chain_id=settings.get('chain_id'),
        development=settings.get('development', False),
        confirmation_timeout=settings.get('confirmation_timeout', 120),
        gas_multiplier=settings.get('gas_multiplier', 1.0)
    )


def connect(config: NetworkConfig) -> Web3:
    """
    Create a Web3 connection and verify it targets the configured chain

    Args:
        config: Network settings

    Returns:
        Connected Web3 instance
    """
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    if not w3.is_connected():
        raise NetworkConnectionError(f"Failed to connect to {config.name} at {config.rpc_url}")

    if config.chain_id is not None:
        chain_id = w3.eth.chain_id
        if chain_id != config.chain_id:
            raise NetworkConnectionError(
                f"Network '{config.name}' expects chain id {config.chain_id}, "
                f"but the node reports {chain_id}"
            )

    logger.info(f"Connected to {config.name} (chain id {config.chain_id})")
    return w3
