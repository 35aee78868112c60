"""
Wallet Manager
Resolves the deployer account and signs deployment transactions
"""

import os
from typing import Dict, Optional
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import ConfigurationError

load_dotenv()


class WalletManager:
    """
    Deployer wallet

    Two modes:
    - Local key: DEPLOYER_PRIVATE_KEY, transactions signed in-process
    - Unlocked: first node account on development networks (Hardhat / Anvil)
    """

    def __init__(self, w3: Web3, development: bool = False, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            w3: Web3 instance
            development: Whether the node exposes unlocked accounts
            private_key: Deployer key (defaults to DEPLOYER_PRIVATE_KEY)
        """
        self.w3 = w3
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        if private_key:
            try:
                self.account = Account.from_key(private_key)
            except Exception as e:
                raise ConfigurationError(f"Invalid DEPLOYER_PRIVATE_KEY: {e}") from e
            self.address = self.account.address
        elif development:
            accounts = w3.eth.accounts
            if not accounts:
                raise ConfigurationError("Development node exposes no unlocked accounts")
            self.account = None
            self.address = Web3.to_checksum_address(accounts[0])
        else:
            raise ConfigurationError("DEPLOYER_PRIVATE_KEY must be set in .env")

        logger.info(f"Deployer wallet: {self.address}")

    @property
    def is_local(self) -> bool:
        """True when transactions are signed in-process"""
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if self.account is None:
            raise ValueError(f"{self.address} is a node account and is signed by the node")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_balance(self) -> Decimal:
        """Deployer balance in ether units"""
        balance_wei = self.w3.eth.get_balance(self.address)
        return Decimal(str(self.w3.from_wei(balance_wei, 'ether')))
