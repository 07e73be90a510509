"""Custom exception classes for forge-deployments."""


class DeploymentError(Exception):
    """Base exception for extraction errors."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a compiled contract artifact is not on disk."""

    pass


class BroadcastNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a chain has no broadcast file for the deploy script."""

    pass


class ChainNotConfiguredError(DeploymentError, ValueError):
    """Raised when a chain id has no entry in the chain registry."""

    pass


class InvalidModeError(DeploymentError, ValueError):
    """Raised when the extraction mode is not 'all', 'abi' or a known chain id."""

    pass
