"""Configuration constants for forge-deployments."""

from types import MappingProxyType

# Contracts whose ABIs and addresses are published, in output order
CONTRACTS = ("CourseFactory", "CourseNFT")

# Chains we deploy to, keyed by chain id string (broadcast directory name)
CHAIN_CONFIG = MappingProxyType(
    {
        "84532": MappingProxyType(
            {
                "chain_id": 84532,
                "chain_name": "Base Sepolia",
                "explorer": "https://base-sepolia.blockscout.com",
            }
        ),
        "8453": MappingProxyType(
            {
                "chain_id": 8453,
                "chain_name": "Base Mainnet",
                "explorer": "https://base.blockscout.com",
            }
        ),
    }
)

# Foundry writes one broadcast directory per deployment script.
# The deploy script is still named after the forge template.
DEFAULT_DEPLOY_SCRIPT = "Counter.s.sol"
BROADCAST_FILENAME = "run-latest.json"

# Forge project layout, relative to the project root
DEFAULT_OUT_DIR = "out"
DEFAULT_BROADCAST_DIR = "broadcast"
DEFAULT_DEPLOY_DIR = "deployments"

ABI_SUBDIR = "abi"
ADDRESSES_FILENAME = "addresses.json"

CREATE_TRANSACTION = "CREATE"

# Environment overrides
ENV_ROOT = "FORGE_DEPLOYMENTS_ROOT"
ENV_OUT_DIR = "FORGE_OUT_DIR"
ENV_BROADCAST_DIR = "FORGE_BROADCAST_DIR"
ENV_DEPLOY_DIR = "FORGE_DEPLOY_DIR"
ENV_DEPLOY_SCRIPT = "FORGE_DEPLOY_SCRIPT"

JSON_INDENT = 2
