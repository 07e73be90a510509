"""Chain registry for forge-deployments."""

from typing import List, Optional

from .constants import CHAIN_CONFIG
from .exceptions import ChainNotConfiguredError
from .types import ChainDescriptor


def chain_ids() -> List[str]:
    """Return configured chain ids in registry order."""
    return list(CHAIN_CONFIG.keys())


def describe_chain(chain_id: str) -> Optional[ChainDescriptor]:
    """
    Look up display metadata for a chain.

    Args:
        chain_id: Chain id as used in broadcast paths (e.g. "84532")

    Returns:
        ChainDescriptor, or None if the chain is not configured
    """
    config = CHAIN_CONFIG.get(str(chain_id))
    if config is None:
        return None

    return ChainDescriptor(
        chain_id=config["chain_id"],
        chain_name=config["chain_name"],
        explorer=config["explorer"],
    )


def require_chain(chain_id: str) -> ChainDescriptor:
    """
    Look up a chain that must be configured.

    Raises:
        ChainNotConfiguredError: If chain id is not in the registry
    """
    descriptor = describe_chain(chain_id)
    if descriptor is None:
        raise ChainNotConfiguredError(f"Chain '{chain_id}' is not configured")
    return descriptor
