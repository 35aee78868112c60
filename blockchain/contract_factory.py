"""
Contract Factory
Builds, signs and submits contract-creation transactions
"""

from web3 import Web3
from loguru import logger

from .artifacts import ContractArtifact
from .deployment import DeploymentHandle
from .exceptions import DeploymentError, InvalidArtifactError


class ContractFactory:
    """
    Deploys new instances of one contract artifact
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, wallet_manager, network):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract
            wallet_manager: Deployer wallet
            network: NetworkConfig of the target network
        """
        if not artifact.is_deployable:
            raise InvalidArtifactError(
                f"{artifact.fully_qualified_name} has no bytecode "
                "(abstract contract or interface) and cannot be deployed"
            )

        if artifact.has_unlinked_libraries:
            raise InvalidArtifactError(
                f"{artifact.fully_qualified_name} bytecode references unlinked libraries"
            )

        self.w3 = w3
        self.artifact = artifact
        self.wallet_manager = wallet_manager
        self.network = network
        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    async def deploy(self, *constructor_args) -> DeploymentHandle:
        """
        Submit the deployment transaction

        Does not wait for it to be mined; await handle.deployed() for that.

        Args:
            *constructor_args: Arguments for the contract constructor

        Returns:
            DeploymentHandle for the submitted transaction
        """
        name = self.artifact.contract_name
        logger.info(f"Deploying {name} from {self.wallet_manager.address}...")

        try:
            constructor = self.contract.constructor(*constructor_args)

            if self.wallet_manager.is_local:
                tx_hash = self._send_signed(constructor)
            else:
                tx_hash = constructor.transact({'from': self.wallet_manager.address})

        except DeploymentError:
            raise
        except Exception as e:
            raise DeploymentError(f"Failed to submit {name} deployment: {e}") from e

        handle = DeploymentHandle(
            self.w3,
            self.artifact,
            tx_hash,
            timeout=self.network.confirmation_timeout
        )
        logger.info(f"Transaction sent: {handle.tx_hash_hex}")
        return handle

    def _send_signed(self, constructor) -> bytes:
        """Build, sign and broadcast with the local deployer key"""
        address = self.wallet_manager.address
        tx_params = {'from': address}

        try:
            gas_estimate = constructor.estimate_gas(tx_params)
        except Exception as e:
            raise DeploymentError(
                f"Gas estimation failed for {self.artifact.contract_name}: {e}"
            ) from e

        tx_params['gas'] = int(gas_estimate * self.network.gas_multiplier)
        tx_params['nonce'] = self.w3.eth.get_transaction_count(address, 'pending')
        tx_params['chainId'] = self.network.chain_id or self.w3.eth.chain_id

        logger.info(f"Gas limit: {tx_params['gas']}")

        transaction = constructor.build_transaction(tx_params)
        signed_tx = self.wallet_manager.sign_transaction(transaction)

        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
