"""Path management utilities for forge-deployments."""

from pathlib import Path
from typing import Union

from .constants import ABI_SUBDIR, ADDRESSES_FILENAME, BROADCAST_FILENAME


def get_artifact_path(out_dir: Union[Path, str], contract_name: str) -> Path:
    """
    Get the forge build artifact path for a contract.

    Args:
        out_dir: Forge output directory (usually ./out)
        contract_name: Contract name, e.g. "CourseFactory"

    Returns:
        Path to out/<Name>.sol/<Name>.json
    """
    return Path(out_dir) / f"{contract_name}.sol" / f"{contract_name}.json"


def get_broadcast_path(
    broadcast_dir: Union[Path, str], deploy_script: str, chain_id: str
) -> Path:
    """
    Get the latest broadcast file for a deploy script on a chain.

    Returns:
        Path to broadcast/<script>/<chain_id>/run-latest.json
    """
    return Path(broadcast_dir) / deploy_script / str(chain_id) / BROADCAST_FILENAME


def get_output_paths(deploy_dir: Union[Path, str]) -> tuple[Path, Path]:
    """
    Get output locations under the deployment directory.

    Args:
        deploy_dir: Deployment output directory (usually ./deployments)

    Returns:
        Tuple of (abi_dir, addresses_path)
    """
    deploy_dir = Path(deploy_dir)
    return (deploy_dir / ABI_SUBDIR, deploy_dir / ADDRESSES_FILENAME)


def ensure_output_dirs(deploy_dir: Union[Path, str]) -> Path:
    """
    Create the deployment directory and its abi/ subdirectory if missing.

    Returns:
        Path to the abi directory
    """
    abi_dir, _ = get_output_paths(deploy_dir)
    abi_dir.mkdir(parents=True, exist_ok=True)
    return abi_dir


def display_path(path: Path, root: Path) -> str:
    """Render path relative to root when it lives under it."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
