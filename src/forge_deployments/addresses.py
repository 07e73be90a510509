"""Deployed address extraction from forge broadcast files."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from .chains import chain_ids, require_chain
from .constants import CONTRACTS
from .exceptions import BroadcastNotFoundError
from .output import format_timestamp, save_json, utc_now
from .parsers import parse_broadcast_deployments
from .paths import get_broadcast_path
from .types import DeploymentRecord

logger = logging.getLogger(__name__)

AddressRegistry = Dict[str, DeploymentRecord]


def load_chain_contracts(
    broadcast_dir: Path,
    deploy_script: str,
    chain_id: str,
    contract_names: Iterable[str] = CONTRACTS,
) -> Dict[str, str]:
    """
    Read the contracts created on a chain by the latest broadcast.

    Raises:
        BroadcastNotFoundError: If run-latest.json does not exist for the chain
        json.JSONDecodeError: If the broadcast file is malformed
    """
    broadcast_path = get_broadcast_path(broadcast_dir, deploy_script, chain_id)
    if not broadcast_path.exists():
        raise BroadcastNotFoundError(f"No broadcast found: {broadcast_path}")

    logger.debug("Reading broadcast %s", broadcast_path)
    return parse_broadcast_deployments(broadcast_path, contract_names)


def extract_chain_deployment(
    broadcast_dir: Path,
    deploy_script: str,
    chain_id: str,
    now: Callable[[], datetime] = utc_now,
    contract_names: Iterable[str] = CONTRACTS,
) -> Optional[DeploymentRecord]:
    """
    Build the deployment record for a single chain.

    Args:
        broadcast_dir: Forge broadcast directory
        deploy_script: Deploy script directory name, e.g. "Counter.s.sol"
        chain_id: Configured chain id, e.g. "84532"
        now: Clock used for the record timestamp
        contract_names: Contracts to keep

    Returns:
        DeploymentRecord, or None if there is no broadcast or it created
        none of the known contracts

    Raises:
        ChainNotConfiguredError: If chain_id is not in the chain registry
    """
    chain = require_chain(chain_id)

    try:
        contracts = load_chain_contracts(
            broadcast_dir, deploy_script, chain_id, contract_names
        )
    except BroadcastNotFoundError:
        logger.warning("⚠️  No broadcast found for chain %s", chain_id)
        return None

    if not contracts:
        logger.warning("⚠️  No known contracts deployed on chain %s", chain_id)
        return None

    return DeploymentRecord(
        chain_id=int(chain_id),
        chain_name=chain.chain_name,
        explorer=chain.explorer,
        timestamp=format_timestamp(now()),
        contracts=contracts,
    )


def collect_deployments(
    broadcast_dir: Path,
    deploy_script: str,
    chains: Optional[Iterable[str]] = None,
    now: Callable[[], datetime] = utc_now,
    contract_names: Iterable[str] = CONTRACTS,
) -> AddressRegistry:
    """
    Build deployment records for every configured chain that has one.

    Returns:
        Address registry mapping chain id -> DeploymentRecord, in chain order
    """
    if chains is None:
        chains = chain_ids()

    registry: AddressRegistry = {}
    for chain_id in chains:
        record = extract_chain_deployment(
            broadcast_dir, deploy_script, chain_id, now, contract_names
        )
        if record is None:
            continue

        registry[chain_id] = record
        report_deployment(chain_id, record)

    return registry


def report_deployment(chain_id: str, record: DeploymentRecord) -> None:
    logger.info("   ✅ Chain %s (%s)", chain_id, record.chain_name)
    for name, address in record.contracts.items():
        logger.info("      - %s: %s", name, address)


def save_address_registry(registry: AddressRegistry, output_path: Path) -> None:
    """
    Write the registry to addresses.json, replacing the whole file.

    Args:
        registry: Chain id -> DeploymentRecord
        output_path: Destination addresses.json
    """
    save_json(
        {chain_id: record.to_dict() for chain_id, record in registry.items()},
        output_path,
    )


def extract_all_deployments(
    broadcast_dir: Path,
    deploy_script: str,
    output_path: Path,
    now: Callable[[], datetime] = utc_now,
    contract_names: Iterable[str] = CONTRACTS,
) -> AddressRegistry:
    """
    Extract every configured chain and write the consolidated addresses.json.

    Nothing is written when no chain has a deployment, so a previous
    addresses.json is left as it was.

    Returns:
        The address registry (empty if nothing was found)
    """
    logger.info("📍 Extracting addresses...")

    registry = collect_deployments(
        broadcast_dir, deploy_script, now=now, contract_names=contract_names
    )
    if not registry:
        logger.warning("⚠️  No deployments found")
        return registry

    save_address_registry(registry, output_path)
    return registry
