"""
Deployment Runtime
Wires network, wallet and artifacts together and hands out contract factories
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from blockchain.artifacts import ArtifactStore
from blockchain.contract_factory import ContractFactory
from utils.network_config import NetworkConfig, connect, get_network_config

from .wallet_manager import WalletManager


class DeploymentRuntime:
    """
    Everything a deploy script needs for one network
    """

    def __init__(
        self,
        w3: Web3,
        network: NetworkConfig,
        wallet_manager: WalletManager,
        artifact_store: ArtifactStore
    ):
        self.w3 = w3
        self.network = network
        self.wallet_manager = wallet_manager
        self.artifact_store = artifact_store

    @classmethod
    def from_env(cls, network: Optional[str] = None) -> "DeploymentRuntime":
        """
        Build a runtime from config/networks.json and the environment

        Args:
            network: Network name (None = DEPLOY_NETWORK)
        """
        config = get_network_config(network)
        logger.info(f"Network: {config.name}")

        w3 = connect(config)
        wallet_manager = WalletManager(w3, development=config.development)

        return cls(w3, config, wallet_manager, ArtifactStore())

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Resolve a contract artifact to a deployable factory

        Args:
            name: Bare or fully-qualified contract name
        """
        artifact = self.artifact_store.get_artifact(name)
        return ContractFactory(self.w3, artifact, self.wallet_manager, self.network)
