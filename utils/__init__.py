"""
Utilities Package
Network selection and RPC connection
"""

from .network_config import NetworkConfig, connect, get_network_config, load_networks

__all__ = [
    'NetworkConfig',
    'connect',
    'get_network_config',
    'load_networks'
]
