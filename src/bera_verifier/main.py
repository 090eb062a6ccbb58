#!/usr/bin/env python3
"""
Main entry point for the BeraScan re-verification tool.

This script orchestrates the verification workflow:
1. Parse command-line arguments
2. Build the runtime configuration
3. Fetch the source from RouteScan and normalize it
4. Submit it for verification on BeraScan
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .core.config import load_config
from .core.helpers import ensure_directory_exists
from .core.pipeline import run_verification
from .models import NameStrategy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='verify-bera',
        description='Copy a verified contract source from RouteScan and submit it for verification on BeraScan',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  BERASCAN_API_KEY      BeraScan API key
  WORKING_DIR           Directory for the per-address source file (default: ./bera)
  CHAIN_ID              Chain id on RouteScan (default: 80094)
  REQUEST_TIMEOUT       HTTP timeout in seconds (default: none)

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument(
        'contract_address',
        nargs='?',
        help='Address of the contract to verify'
    )
    parser.add_argument(
        '--strategy',
        choices=[strategy.value for strategy in NameStrategy],
        default=NameStrategy.BY_HINT.value,
        help='How to pick the main source file: by-hint matches the ContractName, '
             'first-key takes the first listed file (default: by-hint)'
    )
    parser.add_argument(
        '--api-key',
        default=None,
        help='BeraScan API key (env: BERASCAN_API_KEY)'
    )
    parser.add_argument(
        '--working-dir',
        default=None,
        help='Directory for the per-address source file (env: WORKING_DIR, default: ./bera)'
    )
    parser.add_argument(
        '--chain-id',
        type=int,
        default=None,
        help='Chain id on RouteScan (env: CHAIN_ID, default: 80094)'
    )
    parser.add_argument(
        '--fail-on-rejection',
        action='store_true',
        default=False,
        help='Exit with status 1 when BeraScan answers with a status other than "1" (default: False)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug logging and write a log file to the working directory (default: False)'
    )
    return parser


def configure_logging(debug: bool, working_dir) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if debug:
        ensure_directory_exists(working_dir)
        file_handler = logging.FileHandler(working_dir / 'verify_bera.log')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(message)s',
        handlers=handlers
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv(override=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.contract_address:
        parser.print_usage(sys.stderr)
        print("Please provide a contract address as a command line argument", file=sys.stderr)
        return 1

    try:
        config = load_config(
            api_key=args.api_key,
            working_dir=args.working_dir,
            chain_id=args.chain_id,
        )
        configure_logging(args.debug, config.working_dir)

        if not config.api_key:
            logger.debug("BERASCAN_API_KEY is not set; BeraScan will reject the request")

        response = run_verification(args.contract_address, config, NameStrategy(args.strategy))
    except Exception as e:
        logger.error(f"❌ Script failed: {e}")
        return 1

    if args.fail_on_rejection and not response.is_accepted:
        logger.error(f"❌ Verification rejected: {response.result}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == '__main__':
    run()
