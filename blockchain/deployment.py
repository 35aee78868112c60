"""
Deployment Handle
Tracks a submitted contract deployment until it is mined
"""

import asyncio
from typing import Optional
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from .artifacts import ContractArtifact
from .exceptions import DeploymentError


class DeploymentHandle:
    """
    In-flight or completed deployment of a contract artifact

    The address is only available once deployed() has resolved.
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, tx_hash: bytes, timeout: float = 120):
        """
        Initialize Deployment Handle

        Args:
            w3: Web3 instance
            artifact: Artifact being deployed
            tx_hash: Hash of the contract-creation transaction
            timeout: Seconds to wait for the receipt
        """
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.timeout = timeout
        self.receipt = None
        self._address: Optional[str] = None

    @property
    def tx_hash_hex(self) -> str:
        return Web3.to_hex(self.tx_hash)

    @property
    def is_deployed(self) -> bool:
        return self._address is not None

    @property
    def address(self) -> str:
        """Checksummed address of the deployed contract"""
        if self._address is None:
            raise DeploymentError(
                f"{self.artifact.contract_name} deployment {self.tx_hash_hex} is not confirmed yet"
            )
        return self._address

    async def deployed(self) -> "DeploymentHandle":
        """
        Wait until the deployment transaction is mined

        Returns:
            This handle, resolved

        Raises:
            DeploymentError: Timeout, RPC failure, or reverted transaction
        """
        if self._address is not None:
            return self

        logger.info(f"Waiting for confirmation of {self.tx_hash_hex}...")

        try:
            receipt = await asyncio.to_thread(
                self.w3.eth.wait_for_transaction_receipt,
                self.tx_hash,
                timeout=self.timeout
            )
        except TimeExhausted as e:
            raise DeploymentError(
                f"Deployment transaction {self.tx_hash_hex} not mined after {self.timeout} seconds"
            ) from e
        except Exception as e:
            raise DeploymentError(
                f"Error waiting for deployment transaction {self.tx_hash_hex}: {e}"
            ) from e

        if receipt['status'] != 1:
            raise DeploymentError(
                f"{self.artifact.contract_name} deployment transaction {self.tx_hash_hex} reverted"
            )

        contract_address = receipt.get('contractAddress')
        if not contract_address:
            raise DeploymentError(
                f"Receipt for {self.tx_hash_hex} has no contract address"
            )

        self.receipt = receipt
        self._address = Web3.to_checksum_address(contract_address)

        logger.success(f"{self.artifact.contract_name} mined in block {receipt.get('blockNumber')}")
        logger.info(f"Gas used: {receipt.get('gasUsed')}")

        return self
