"""Extraction configuration for forge-deployments."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .constants import (
    DEFAULT_BROADCAST_DIR,
    DEFAULT_DEPLOY_DIR,
    DEFAULT_DEPLOY_SCRIPT,
    DEFAULT_OUT_DIR,
    ENV_BROADCAST_DIR,
    ENV_DEPLOY_DIR,
    ENV_DEPLOY_SCRIPT,
    ENV_OUT_DIR,
    ENV_ROOT,
)

PathLike = Union[Path, str]


@dataclass(frozen=True)
class ExtractorConfig:
    """Where to read forge output from and where to write deployment files."""

    project_root: Path
    out_dir: Path
    broadcast_dir: Path
    deploy_dir: Path
    deploy_script: str = DEFAULT_DEPLOY_SCRIPT

    @classmethod
    def from_env(
        cls,
        project_root: Optional[PathLike] = None,
        out_dir: Optional[PathLike] = None,
        broadcast_dir: Optional[PathLike] = None,
        deploy_dir: Optional[PathLike] = None,
        deploy_script: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ExtractorConfig":
        """
        Build a configuration from arguments, falling back to the environment.

        Explicit arguments win over $FORGE_* variables, which win over the
        forge defaults (out/, broadcast/, deployments/). Relative directories
        are resolved against the project root.

        Args:
            project_root: Forge project root (defaults to $FORGE_DEPLOYMENTS_ROOT or cwd)
            out_dir: Build artifact directory (defaults to $FORGE_OUT_DIR or out/)
            broadcast_dir: Broadcast directory (defaults to $FORGE_BROADCAST_DIR or broadcast/)
            deploy_dir: Output directory (defaults to $FORGE_DEPLOY_DIR or deployments/)
            deploy_script: Deploy script name (defaults to $FORGE_DEPLOY_SCRIPT or Counter.s.sol)
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ExtractorConfig with absolute paths
        """
        if environ is None:
            environ = os.environ

        if project_root is None:
            project_root = environ.get(ENV_ROOT) or Path.cwd()
        root = Path(project_root).absolute()

        def resolve(value: Optional[PathLike], env_name: str, default: str) -> Path:
            if value is None:
                value = environ.get(env_name) or default
            path = Path(value)
            return path if path.is_absolute() else root / path

        if deploy_script is None:
            deploy_script = environ.get(ENV_DEPLOY_SCRIPT) or DEFAULT_DEPLOY_SCRIPT

        return cls(
            project_root=root,
            out_dir=resolve(out_dir, ENV_OUT_DIR, DEFAULT_OUT_DIR),
            broadcast_dir=resolve(broadcast_dir, ENV_BROADCAST_DIR, DEFAULT_BROADCAST_DIR),
            deploy_dir=resolve(deploy_dir, ENV_DEPLOY_DIR, DEFAULT_DEPLOY_DIR),
            deploy_script=deploy_script,
        )
