"""
Deployment Exceptions
Every failure of a deployment run is a DeploymentError
"""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when network or signer configuration is missing or invalid."""

    pass


class NetworkConnectionError(DeploymentError, ConnectionError):
    """Raised when the RPC endpoint is unreachable or on the wrong chain."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no compiled artifact matches the requested contract name."""

    pass


class AmbiguousArtifactError(DeploymentError, ValueError):
    """Raised when a bare contract name matches more than one artifact."""

    pass


class InvalidArtifactError(DeploymentError, ValueError):
    """Raised when an artifact cannot be parsed or cannot be deployed."""

    pass
