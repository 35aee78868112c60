"""
Blockchain Interaction Package
Handles artifact lookup, contract factories and deployment tracking
"""

from .artifacts import ArtifactStore, ContractArtifact
from .contract_factory import ContractFactory
from .deployment import DeploymentHandle
from .exceptions import (
    AmbiguousArtifactError,
    ArtifactNotFoundError,
    ConfigurationError,
    DeploymentError,
    InvalidArtifactError,
    NetworkConnectionError,
)

__all__ = [
    'ArtifactStore',
    'ContractArtifact',
    'ContractFactory',
    'DeploymentHandle',
    'DeploymentError',
    'ConfigurationError',
    'NetworkConnectionError',
    'ArtifactNotFoundError',
    'AmbiguousArtifactError',
    'InvalidArtifactError',
]
