"""
Main entry point for the descriptor checksum tool.

Usage:
    python -m descriptor_checksum [--config CONFIG_PATH] compute DESCRIPTOR
    python -m descriptor_checksum [--config CONFIG_PATH] add DESCRIPTOR
    python -m descriptor_checksum [--config CONFIG_PATH] verify DESCRIPTOR
    python -m descriptor_checksum [--config CONFIG_PATH] serve
"""

import argparse
import logging
import sys

import uvicorn

from descriptor_checksum import __version__
from descriptor_checksum.config.loader import load_config, ConfigurationError
from descriptor_checksum.config.models import AppConfig
from descriptor_checksum.utils.logging_setup import setup_logging
from descriptor_checksum.utils.exceptions import DescriptorChecksumException
from descriptor_checksum.checksum.checksum import compute_checksum
from descriptor_checksum.checksum.encoder import add_checksum, verify_checksum
from descriptor_checksum.api.app import create_app


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="Output descriptor checksum tool")
    parser.add_argument(
        "--config",
        type=str,
        default="config.json",
        help="Path to configuration file (default: config.json)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compute = subparsers.add_parser("compute", help="Print the checksum of a descriptor")
    compute.add_argument("descriptor", help="Descriptor without '#checksum' suffix")

    add = subparsers.add_parser("add", help="Print the descriptor with its '#checksum' suffix")
    add.add_argument("descriptor")

    verify = subparsers.add_parser("verify", help="Verify a descriptor's checksum suffix")
    verify.add_argument("descriptor")
    verify.add_argument(
        "--require-checksum",
        action="store_true",
        help="Fail if the descriptor has no checksum (overrides config)"
    )

    subparsers.add_parser("serve", help="Run the HTTP API server")

    return parser


def run_command(args: argparse.Namespace, config: AppConfig) -> int:
    """
    Execute a descriptor subcommand.

    Returns:
        Process exit code.
    """
    try:
        if args.command == "compute":
            print(compute_checksum(args.descriptor))
        elif args.command == "add":
            print(add_checksum(args.descriptor))
        elif args.command == "verify":
            require = args.require_checksum or config.checksum.require_checksum
            verify_checksum(args.descriptor, require_checksum=require)
            print("OK")
    except DescriptorChecksumException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def serve(config: AppConfig) -> int:
    """Run the HTTP API until interrupted."""
    app = create_app(config)

    logger.info("=" * 60)
    logger.info(f"Descriptor Checksum Service v{__version__}")
    logger.info("=" * 60)
    logger.info(f"Starting API server on {config.server.ip}:{config.server.port}")
    logger.info("Press Ctrl+C to stop")

    try:
        uvicorn.run(
            app,
            host=config.server.ip,
            port=config.server.port,
            log_level=config.logging.level.lower(),
            access_log=False
        )
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        return 1
    finally:
        logger.info("Shutdown complete")

    return 0


def main(argv=None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    # Only the server writes a default config file when none exists
    try:
        config = load_config(args.config, create_missing=(args.command == "serve"))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)

    if args.command == "serve":
        return serve(config)

    return run_command(args, config)


if __name__ == "__main__":
    sys.exit(main())
