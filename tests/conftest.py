"""Shared pytest fixtures for forge-deployments tests."""

import json
import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from forge_deployments.config import ExtractorConfig
from forge_deployments.extractor import DeploymentExtractor

FIXED_NOW = datetime(2025, 1, 31, 12, 0, 0, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2025-01-31T12:00:00.000Z"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by the CLI."""
    package_logger = logging.getLogger("forge_deployments")
    yield
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def forge_project(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Create a forge project root with sample out/ and broadcast/ trees."""
    project = tmp_path / "project"
    shutil.copytree(fixtures_dir / "out", project / "out")
    shutil.copytree(fixtures_dir / "broadcast", project / "broadcast")
    return project


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a forge project root with nothing built or deployed."""
    project = tmp_path / "empty"
    project.mkdir()
    return project


@pytest.fixture
def fixed_now() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_extractor(fixed_now: Callable[[], datetime]) -> Callable[[Path], DeploymentExtractor]:
    """Build an extractor for a project root with a fixed clock."""

    def _make(project: Path) -> DeploymentExtractor:
        config = ExtractorConfig.from_env(project_root=project, environ={})
        return DeploymentExtractor(config, now=fixed_now)

    return _make


@pytest.fixture
def write_broadcast() -> Callable[..., Path]:
    """Write a run-latest.json with the given transactions for a chain."""

    def _write(
        project: Path,
        chain_id: str,
        transactions: List[Dict[str, Any]],
        script: str = "Counter.s.sol",
    ) -> Path:
        path = project / "broadcast" / script / chain_id / "run-latest.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"transactions": transactions}))
        return path

    return _write


@pytest.fixture
def create_tx() -> Callable[..., Dict[str, Any]]:
    """Build a minimal broadcast transaction."""

    def _tx(name: str, address: str, tx_type: str = "CREATE") -> Dict[str, Any]:
        return {
            "transactionType": tx_type,
            "contractName": name,
            "contractAddress": address,
        }

    return _tx


@pytest.fixture
def fixed_timestamp() -> str:
    """ISO-8601 rendering of FIXED_NOW."""
    return FIXED_TIMESTAMP
