"""Main API for forge-deployments."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from .abis import extract_abi, extract_all_abis
from .addresses import (
    AddressRegistry,
    extract_all_deployments,
    extract_chain_deployment,
    report_deployment,
    save_address_registry,
)
from .chains import describe_chain
from .config import ExtractorConfig
from .exceptions import InvalidModeError
from .output import utc_now
from .paths import display_path, ensure_output_dirs, get_output_paths
from .types import DeploymentRecord

logger = logging.getLogger(__name__)

MODE_ALL = "all"
MODE_ABI = "abi"


class DeploymentExtractor:
    """Extracts ABIs and deployed addresses from a forge project."""

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        now: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the extractor.

        Args:
            config: Paths and deploy script (defaults to ExtractorConfig.from_env())
            now: Clock used to timestamp deployment records
        """
        if config is None:
            config = ExtractorConfig.from_env()

        self.config = config
        self._now = now
        self.abi_dir, self.addresses_path = get_output_paths(config.deploy_dir)

    def ensure_directories(self) -> None:
        """Create deployments/ and deployments/abi/ if they don't exist."""
        ensure_output_dirs(self.config.deploy_dir)

    def extract_abi(self, contract_name: str) -> Optional[list]:
        """Extract one contract's ABI; None if its artifact is missing."""
        self.ensure_directories()
        return extract_abi(self.config.out_dir, self.abi_dir, contract_name)

    def extract_all_abis(self) -> List[str]:
        """Extract every known contract's ABI; returns the names written."""
        self.ensure_directories()
        return extract_all_abis(self.config.out_dir, self.abi_dir)

    def extract_chain(self, chain_id: str) -> Optional[DeploymentRecord]:
        """Build one chain's deployment record without writing anything."""
        return extract_chain_deployment(
            self.config.broadcast_dir,
            self.config.deploy_script,
            chain_id,
            now=self._now,
        )

    def extract_all_addresses(self) -> AddressRegistry:
        """Extract all configured chains into addresses.json."""
        self.ensure_directories()
        registry = extract_all_deployments(
            self.config.broadcast_dir,
            self.config.deploy_script,
            self.addresses_path,
            now=self._now,
        )
        if registry:
            logger.info("")
            logger.info("💾 Saved to: %s", self._display(self.addresses_path))
        return registry

    def extract_single_chain(self, chain_id: str) -> Optional[DeploymentRecord]:
        """
        Extract one chain and write it as the only entry of addresses.json.

        Any chains already in addresses.json are dropped. Nothing is written
        when the chain has no deployment.

        Returns:
            The chain's DeploymentRecord, or None
        """
        self.ensure_directories()
        record = self.extract_chain(chain_id)
        if record is None:
            return None

        report_deployment(chain_id, record)
        save_address_registry({chain_id: record}, self.addresses_path)
        logger.info("")
        logger.info(
            "💾 Saved chain %s to: %s", chain_id, self._display(self.addresses_path)
        )
        return record

    def validate_mode(self, mode: Optional[str]) -> None:
        """
        Check that mode is 'all', 'abi', a configured chain id, or None.

        Raises:
            InvalidModeError: If mode is anything else
        """
        if mode is None or mode in (MODE_ALL, MODE_ABI):
            return
        if describe_chain(mode) is None:
            raise InvalidModeError(f"Invalid argument: {mode}")

    def run(self, mode: Optional[str] = None) -> None:
        """
        Run the extraction selected by mode.

        Args:
            mode: None or "all" for ABIs and every chain, "abi" for ABIs only,
                  or a configured chain id for ABIs and that chain

        Raises:
            InvalidModeError: If mode is not recognized (nothing is extracted)
        """
        self.validate_mode(mode)
        self.ensure_directories()

        if mode is None or mode == MODE_ALL:
            self.extract_all_abis()
            logger.info("")
            self.extract_all_addresses()
        elif mode == MODE_ABI:
            self.extract_all_abis()
        else:
            self.extract_all_abis()
            logger.info("")
            self.extract_single_chain(mode)

        logger.info("")
        logger.info("✨ Done!")

    def _display(self, path) -> str:
        return display_path(path, self.config.project_root)
