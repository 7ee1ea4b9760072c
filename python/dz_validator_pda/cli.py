"""Command line interface for validator deposit PDAs.

Usage:
    dz-validator-pda pda-address <identity>
    dz-validator-pda pda-balance <identity>
    dz-validator-pda pda-fund-address <identity> <keypair_path> <amount>
"""

import argparse
import asyncio
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from .balance import BalanceReader
from .config import DepositConfig
from .errors import DepositError
from .funding import FundingOrchestrator
from .identity import encode_identity, parse_identity
from .liveness import LivenessOracle
from .pda import DepositAddressDeriver
from .types import Liveness

logger = logging.getLogger(__name__)

EXAMPLE_IDENTITY = "FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL"

_LIVENESS_LINES = {
    Liveness.ACTIVE: "Validator is active in gossip",
    Liveness.INACTIVE: "Warning: validator not found in gossip",
    Liveness.UNKNOWN: "Warning: gossip registry unreachable, liveness unknown",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dz-validator-pda",
        description="Derive, inspect and fund DoubleZero validator deposit PDAs.",
        epilog=f"Example: dz-validator-pda pda-address {EXAMPLE_IDENTITY}",
    )
    parser.add_argument("--rpc-url", help="Solana RPC endpoint (default: mainnet-beta)")
    parser.add_argument("--registry-url", help="Gossip registry endpoint (default: --rpc-url)")
    parser.add_argument("--timeout", type=float, help="Network timeout in seconds")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="operation", required=True)

    address = sub.add_parser("pda-address", help="Generate PDA address for validator")
    address.add_argument("identity", help="Validator identity pubkey")

    balance = sub.add_parser("pda-balance", help="Show balance of PDA address for validator")
    balance.add_argument("identity", help="Validator identity pubkey")

    fund = sub.add_parser("pda-fund-address", help="Transfer SOL to the validator's PDA")
    fund.add_argument("identity", help="Validator identity pubkey")
    fund.add_argument("keypair", help="Path to the funding keypair file")
    fund.add_argument("amount", help="Amount in SOL (e.g. 1.5)")

    return parser


async def _show_address(args: argparse.Namespace, config: DepositConfig) -> int:
    identity = parse_identity(args.identity)
    deposit = DepositAddressDeriver(config).derive(identity)

    print(f"Validator pubkey {encode_identity(identity)}")
    print(f"PDA Address: {deposit.address}")

    liveness = await LivenessOracle.from_config(config).check(identity)
    print(_LIVENESS_LINES[liveness])

    if args.operation == "pda-balance":
        report = await BalanceReader.from_config(config).report(deposit.address)
        print(f"PDA Balance: {report.lamports} lamports ({report.sol} SOL)")
    return 0


async def _fund(args: argparse.Namespace, config: DepositConfig) -> int:
    orchestrator = FundingOrchestrator(config)
    result = await orchestrator.fund(args.identity, args.keypair, args.amount)

    if result.deposit_address is not None:
        print(f"PDA Address: {result.deposit_address}")
    if result.liveness is not None:
        print(_LIVENESS_LINES[result.liveness])

    result.raise_for_status()

    print(f"Transferred {args.amount} SOL ({result.lamports} lamports)")
    print(f"Transaction: {result.transaction}")
    return 0


async def run(args: argparse.Namespace, config: DepositConfig) -> int:
    if args.operation == "pda-fund-address":
        return await _fund(args, config)
    return await _show_address(args, config)


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DepositConfig.from_env().with_overrides(
            rpc_url=args.rpc_url,
            registry_url=args.registry_url,
            timeout_seconds=args.timeout,
        )
        logger.debug("Using RPC %s, registry %s", config.rpc_url, config.effective_registry_url)
        return asyncio.run(run(args, config))
    except DepositError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
