"""Data types and dataclasses for forge-deployments."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ChainDescriptor:
    """Display metadata for a configured chain."""

    chain_id: int  # e.g. 84532
    chain_name: str  # e.g. "Base Sepolia"
    explorer: str  # Block explorer base URL


@dataclass(frozen=True)
class DeploymentRecord:
    """Contracts deployed on one chain, as found in its latest broadcast."""

    chain_id: int
    chain_name: str
    explorer: str
    timestamp: str  # Extraction time, ISO-8601 UTC
    contracts: Mapping[str, str]  # Contract name -> address

    def __post_init__(self) -> None:
        object.__setattr__(self, "contracts", MappingProxyType(dict(self.contracts)))

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the addresses.json record layout.

        Returns:
            Dictionary with chainId, chainName, explorer, timestamp, contracts
        """
        return {
            "chainId": self.chain_id,
            "chainName": self.chain_name,
            "explorer": self.explorer,
            "timestamp": self.timestamp,
            "contracts": dict(self.contracts),
        }
