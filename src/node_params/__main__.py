"""
Node parameter resolution CLI entry point.

Resolve the startup parameters of a node against the defaults persisted by
its previous run, print them as JSON, and persist the new choices.

Usage::

    python -m node_params --chain mainnet --pruning auto
    python -m node_params --chain ./custom-spec.json --tracing on
    python -m node_params --chain kovan --mode passive --mode-timeout 600

Options:
    --chain                Chain name or path to a specification file (default: foundation)
    --pruning              auto, archive, light, fast or basic (default: auto)
    --tracing, --fat-db    on, off or auto (default: auto)
    --mode                 active, passive, dark or offline (default: persisted mode)
    --db-path              Directory holding the persisted defaults
    --no-persist           Do not record the resolved choices
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from node_params import config
from node_params.subspecs.accounts import AccountsConfig
from node_params.subspecs.client import parse_mode
from node_params.subspecs.ethspec import parse_spec_type
from node_params.subspecs.miner import (
    DEFAULT_INITIAL_MINIMUM,
    CalibratedGasPricerConfig,
    FixedGasPricerConfig,
    GasPricerConfig,
    MinerExtras,
    ResealPolicy,
)
from node_params.subspecs.node import NodeParams, ParamsRequest, resolve_node_params
from node_params.subspecs.params import (
    Switch,
    parse_pruning,
    to_address,
    to_addresses,
    to_duration,
    to_price,
    to_u256,
)
from node_params.subspecs.storage import SQLiteUserDefaultsStore, UserDefaults
from node_params.types import HexBytes, InvalidTokenError, ParamsError, Uint32

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Tint each record by severity so warnings stand out on a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[2m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[1;31m",
    }
    RESET = "\x1b[0m"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        return text if color is None else f"{color}{text}{self.RESET}"


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging on stderr, keeping stdout for the JSON output."""
    level = logging.DEBUG if verbose or config.DEBUG_BY_DEFAULT else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter_class = logging.Formatter if no_color else ColoredFormatter
    handler.setFormatter(formatter_class(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Values stay strings; `build_request` parses them."""
    parser = argparse.ArgumentParser(
        prog="node-params",
        description="Resolve node startup parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    chain = parser.add_argument_group("chain and database")
    chain.add_argument("--chain", default="foundation", help="Chain name or spec file path")
    chain.add_argument("--pruning", default="auto", help="auto, archive, light, fast or basic")
    chain.add_argument("--tracing", default="auto", help="Transaction tracing: on, off or auto")
    chain.add_argument("--fat-db", default="auto", help="Fat database: on, off or auto")
    chain.add_argument("--mode", default=None, help="active, passive, dark or offline")
    chain.add_argument("--mode-timeout", default="300", help="Seconds idle before sleeping")
    chain.add_argument("--mode-alarm", default="3600", help="Seconds between passive wake-ups")
    chain.add_argument(
        "--db-path",
        type=Path,
        default=config.DATA_DIR,
        help=f"Directory holding persisted defaults (default: {config.DATA_DIR})",
    )
    chain.add_argument(
        "--no-persist", action="store_true", help="Do not record the resolved choices"
    )

    miner = parser.add_argument_group("miner")
    miner.add_argument("--reseal-on-txs", default="all", help="none, own, ext or all")
    miner.add_argument("--author", default=None, help="Block reward beneficiary address")
    miner.add_argument("--engine-signer", default=None, help="Authority engine signer address")
    miner.add_argument("--extra-data", default=None, help="Block extra-data, as hex or plain text")
    miner.add_argument("--gas-floor-target", default="4700000", help="Gas limit floor target")
    miner.add_argument("--gas-cap", default="6283184", help="Gas limit ceiling target")
    miner.add_argument("--tx-queue-size", type=int, default=1024, help="Pending queue limit")
    miner.add_argument("--gasprice", default=None, help="Fixed minimum gas price, in wei")
    miner.add_argument(
        "--min-gas-price",
        default=str(int(DEFAULT_INITIAL_MINIMUM)),
        help="Initial minimum gas price for calibrated pricing, in wei",
    )
    miner.add_argument("--usd-per-tx", default="0.0025", help="Target USD per transaction")
    miner.add_argument("--price-update-period", default="hourly", help="Recalibration period")

    accounts = parser.add_argument_group("accounts")
    accounts.add_argument("--keys-iterations", default="10240", help="KDF iterations")
    accounts.add_argument("--unlock", default=None, help="Comma-separated accounts to unlock")
    accounts.add_argument(
        "--password", action="append", default=[], dest="passwords", help="Password file"
    )
    accounts.add_argument(
        "--no-hardware-wallets", action="store_true", help="Disable hardware wallets"
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-color", action="store_true", help="Disable colored logging output")
    return parser


def _to_iterations(text: str) -> Uint32:
    try:
        return Uint32(text)
    except (ValueError, OverflowError):
        raise InvalidTokenError("iterations", text, f"Invalid numeric value: {text}") from None


def build_gas_pricer_config(args: argparse.Namespace) -> GasPricerConfig:
    """A fixed price wins; otherwise calibrate from the initial minimum."""
    if args.gasprice is not None:
        return FixedGasPricerConfig(price=to_u256(args.gasprice))
    return CalibratedGasPricerConfig(
        initial_minimum=to_u256(args.min_gas_price),
        usd_per_tx=to_price(args.usd_per_tx),
        recalibration_period=to_duration(args.price_update_period),
    )


def build_request(args: argparse.Namespace) -> ParamsRequest:
    """
    Parse every selector on the command line.

    Raises:
        InvalidTokenError: On the first selector that does not parse.
    """
    mode = None
    if args.mode is not None:
        mode = parse_mode(
            args.mode,
            to_duration(args.mode_timeout),
            to_duration(args.mode_alarm),
        )

    extras = MinerExtras(
        author=to_address(args.author),
        engine_signer=to_address(args.engine_signer),
        gas_floor_target=to_u256(args.gas_floor_target),
        gas_ceil_target=to_u256(args.gas_cap),
        transactions_limit=args.tx_queue_size,
    )
    if args.extra_data is not None:
        try:
            extra_data = HexBytes(args.extra_data)
        except ValueError:
            extra_data = HexBytes(args.extra_data.encode())
        extras = extras.model_copy(update={"extra_data": extra_data})

    return ParamsRequest(
        spec_type=parse_spec_type(args.chain),
        pruning=parse_pruning(args.pruning),
        tracing=Switch.from_str(args.tracing),
        fat_db=Switch.from_str(args.fat_db),
        mode=mode,
        reseal=ResealPolicy.from_str(args.reseal_on_txs),
        accounts=AccountsConfig(
            iterations=_to_iterations(args.keys_iterations),
            password_files=list(args.passwords),
            unlocked_accounts=to_addresses(args.unlock),
            enable_hardware_wallets=not args.no_hardware_wallets,
        ),
        miner_extras=extras,
        gas_pricer=build_gas_pricer_config(args),
    )


def run(args: argparse.Namespace) -> NodeParams:
    """
    Resolve against the persisted defaults and record the outcome.

    The defaults are only saved after resolution succeeded, so a rejected
    request leaves the previous run's choices untouched.
    """
    request = build_request(args)
    db_file = args.db_path / config.USER_DEFAULTS_FILENAME

    if args.no_persist and not db_file.exists():
        logger.debug("No defaults at %s and nothing to persist, using first launch", db_file)
        return resolve_node_params(request, UserDefaults())

    with SQLiteUserDefaultsStore(db_file) as store:
        user_defaults = store.load()
        params = resolve_node_params(request, user_defaults)
        if not args.no_persist:
            store.save(params.to_user_defaults())
            logger.debug("Persisted resolved choices to %s", db_file)

    return params


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        params = run(args)
    except ParamsError as e:
        logger.error("%s", e.message)
        return 1

    json.dump(params.to_json_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
