"""
Deployer Package
Deployment runtime and deployer wallet
"""

from .runtime import DeploymentRuntime
from .wallet_manager import WalletManager

__all__ = ['DeploymentRuntime', 'WalletManager']
