"""
forge-deployments: extract ABIs and deployed addresses from Foundry output
"""

from importlib.metadata import PackageNotFoundError, version

from .chains import chain_ids, describe_chain
from .config import ExtractorConfig
from .exceptions import (
    ArtifactNotFoundError,
    BroadcastNotFoundError,
    ChainNotConfiguredError,
    DeploymentError,
    InvalidModeError,
)
from .extractor import DeploymentExtractor
from .types import ChainDescriptor, DeploymentRecord

try:
    __version__ = version("forge-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentExtractor",
    "ExtractorConfig",
    "ChainDescriptor",
    "DeploymentRecord",
    "chain_ids",
    "describe_chain",
    "DeploymentError",
    "ArtifactNotFoundError",
    "BroadcastNotFoundError",
    "ChainNotConfiguredError",
    "InvalidModeError",
]
