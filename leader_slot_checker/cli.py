import argparse
import logging
import sys

from solders.pubkey import Pubkey

from .checker import check_validator_slots
from .config import RPC_ENDPOINT
from .exceptions import InvalidPubkeyError, SlotCheckError
from .logging_config import setup_logging
from .rpc import LedgerRpc
from .skip_enrichment import HttpEnrichmentProvider

SCRIPT_NAME = 'leader_slot_checker'


def validate_pubkey(pubkey_str: str) -> Pubkey:
    """Validate and convert a string to a Solana Pubkey."""
    try:
        return Pubkey.from_string(pubkey_str)
    except ValueError as e:
        raise InvalidPubkeyError(pubkey_str) from e


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Check which of a validator's leader slots it actually produced")
    parser.add_argument("-v", "--validator", required=True, help="The validator identity public key")
    parser.add_argument("-e", "--epoch", type=int, default=None,
                        help="Epoch to check the leader schedule for, default: current epoch")
    parser.add_argument("--rpc-url", default=RPC_ENDPOINT, help=f"RPC URL (default: {RPC_ENDPOINT})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="File log level")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    args = parser.parse_args(argv)
    if args.epoch is not None and args.epoch < 0:
        parser.error("epoch must be non-negative")
    return args


def main(argv=None):
    args = parse_args(argv)
    logger = setup_logging(SCRIPT_NAME, level=getattr(logging, args.log_level))

    try:
        validate_pubkey(args.validator)
    except InvalidPubkeyError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Checking leader slots for {args.validator} via {args.rpc_url}")
    try:
        check_validator_slots(
            LedgerRpc(args.rpc_url),
            HttpEnrichmentProvider(),
            args.validator,
            epoch=args.epoch,
            show_progress=not args.no_progress,
        )
    except KeyboardInterrupt:
        print("\nProcessing interrupted by user", file=sys.stderr)
        return 130
    except SlotCheckError as e:
        cause = f" (caused by: {e.__cause__})" if e.__cause__ is not None else ""
        logger.error(f"Fatal error: {e}{cause}")
        return 1
    return 0
