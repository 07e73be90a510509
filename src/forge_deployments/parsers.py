"""Forge artifact and broadcast parsers for forge-deployments."""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .constants import CONTRACTS, CREATE_TRANSACTION


def parse_artifact_abi(file_path: Path) -> List[Dict[str, Any]]:
    """
    Parse a forge build artifact and return its ABI.

    Args:
        file_path: Path to out/<Name>.sol/<Name>.json

    Returns:
        The artifact's "abi" list, untouched

    Raises:
        json.JSONDecodeError: If the artifact is not valid JSON
        KeyError: If the artifact has no "abi" field
    """
    with open(file_path) as f:
        data = json.load(f)

    return data["abi"]


def collect_created_contracts(
    transactions: Iterable[Dict[str, Any]],
    contract_names: Iterable[str] = CONTRACTS,
) -> Dict[str, str]:
    """
    Fold CREATE transactions into a contract name -> address mapping.

    Transactions are applied in order, so a contract created more than once
    maps to the address of its last CREATE.

    Args:
        transactions: Broadcast transaction objects, in log order
        contract_names: Contracts to keep; others are ignored

    Returns:
        Dictionary mapping contract name to deployed address
    """
    wanted = frozenset(contract_names)
    contracts: Dict[str, str] = {}

    for tx in transactions:
        if tx.get("transactionType") != CREATE_TRANSACTION:
            continue

        name = tx.get("contractName")
        if name not in wanted:
            continue

        # Later deployments replace earlier ones
        contracts[name] = tx["contractAddress"]

    return contracts


def parse_broadcast_deployments(
    file_path: Path, contract_names: Iterable[str] = CONTRACTS
) -> Dict[str, str]:
    """
    Parse a forge broadcast file for deployed contract addresses.

    Args:
        file_path: Path to broadcast/<script>/<chain_id>/run-latest.json
        contract_names: Contracts to keep

    Returns:
        Dictionary mapping contract name to deployed address (may be empty)

    Raises:
        json.JSONDecodeError: If the broadcast file is not valid JSON
        KeyError: If the file has no "transactions" list
    """
    with open(file_path) as f:
        data = json.load(f)

    return collect_created_contracts(data["transactions"], contract_names)
