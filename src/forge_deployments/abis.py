"""ABI extraction from forge build artifacts."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .constants import CONTRACTS
from .exceptions import ArtifactNotFoundError
from .output import save_json
from .parsers import parse_artifact_abi
from .paths import get_artifact_path

logger = logging.getLogger(__name__)


def load_abi(out_dir: Path, contract_name: str) -> List[Dict[str, Any]]:
    """
    Load a contract's ABI from forge build output.

    Raises:
        ArtifactNotFoundError: If out/<Name>.sol/<Name>.json does not exist
        json.JSONDecodeError: If the artifact is malformed
        KeyError: If the artifact has no "abi" field
    """
    artifact_path = get_artifact_path(out_dir, contract_name)
    if not artifact_path.exists():
        raise ArtifactNotFoundError(f"Artifact not found: {artifact_path}")

    logger.debug("Reading artifact %s", artifact_path)
    return parse_artifact_abi(artifact_path)


def extract_abi(
    out_dir: Path, abi_dir: Path, contract_name: str
) -> Optional[List[Dict[str, Any]]]:
    """
    Extract one contract's ABI to abi/<Name>.json.

    Args:
        out_dir: Forge build output directory
        abi_dir: Destination directory for ABI files
        contract_name: One of the known contract names

    Returns:
        The ABI written, or None if the artifact was not found
    """
    try:
        abi = load_abi(out_dir, contract_name)
    except ArtifactNotFoundError:
        logger.warning("⚠️  Artifact not found: %s", contract_name)
        return None

    save_json(abi, abi_dir / f"{contract_name}.json")
    return abi


def extract_all_abis(
    out_dir: Path, abi_dir: Path, contract_names: Iterable[str] = CONTRACTS
) -> List[str]:
    """
    Extract ABIs for every known contract, skipping missing artifacts.

    Returns:
        Names of the contracts whose ABI file was written, in order
    """
    logger.info("📦 Extracting ABIs...")

    written = []
    for contract_name in contract_names:
        if extract_abi(out_dir, abi_dir, contract_name) is None:
            continue
        written.append(contract_name)
        logger.info("   ✅ %s.json", contract_name)

    return written
