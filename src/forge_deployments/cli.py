"""Command line entry point for forge-deployments."""

import argparse
import logging
import sys
from typing import List, Optional

from .chains import chain_ids, describe_chain
from .config import ExtractorConfig
from .exceptions import InvalidModeError
from .extractor import MODE_ABI, MODE_ALL, DeploymentExtractor

PROG = "forge-deployments"


def usage() -> str:
    """Usage text listing every accepted mode."""
    lines = ["Usage:", f"  {PROG} {MODE_ALL:<8} # All chains"]
    for chain_id in chain_ids():
        chain = describe_chain(chain_id)
        lines.append(f"  {PROG} {chain_id:<8} # {chain.chain_name} only")
    lines.append(f"  {PROG} {MODE_ABI:<8} # Just ABIs")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Extract ABIs and deployed addresses from forge output into deployments/.",
        epilog=usage(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=None,
        help="'all' (default), 'abi', or a chain id",
    )
    parser.add_argument("--root", help="Forge project root (default: $FORGE_DEPLOYMENTS_ROOT or cwd)")
    parser.add_argument("--out-dir", help="Build artifact directory (default: out)")
    parser.add_argument("--broadcast-dir", help="Broadcast directory (default: broadcast)")
    parser.add_argument("--deploy-dir", help="Output directory (default: deployments)")
    parser.add_argument("--script", help="Deploy script name (default: Counter.s.sol)")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show files being read")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send package log records to stdout as plain progress lines."""
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("forge_deployments")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False


def report_invalid_mode(error: InvalidModeError) -> int:
    """Print the error and usage to stderr; returns the exit status."""
    print(f"❌ {error}", file=sys.stderr)
    print("", file=sys.stderr)
    print(usage(), file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the extractor from command line arguments.

    Returns:
        Process exit status (0 on success, 1 on an invalid mode)
    """
    args, extra = build_parser().parse_known_args(argv)
    if extra:
        return report_invalid_mode(InvalidModeError(f"Invalid argument: {' '.join(extra)}"))

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    config = ExtractorConfig.from_env(
        project_root=args.root,
        out_dir=args.out_dir,
        broadcast_dir=args.broadcast_dir,
        deploy_dir=args.deploy_dir,
        deploy_script=args.script,
    )
    extractor = DeploymentExtractor(config)

    try:
        extractor.run(args.mode)
    except InvalidModeError as e:
        return report_invalid_mode(e)

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
