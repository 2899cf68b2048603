"""
One-shot command line entry point.

    market-stats covariance            # btc vs snp
    market-stats covariance eth sol
    market-stats volatility btc

Prints the result as JSON. Exits 2 on an unrecognized instrument and 1 when
the computation fails.
"""

import argparse
import asyncio
import json
import sys

from market_stats.common.exceptions import MarketStatsError, UnrecognizedInstrumentError
from market_stats.config import get_config
from market_stats.infrastructure.observability import get_api_logger, setup_logging
from market_stats.ingestion.dependency_container import (
    MarketStatsContainer,
    create_container_from_settings,
)
from market_stats.ingestion.models.enums import Instrument

log = get_api_logger("cli")


def _instrument(field: str, value: str) -> Instrument:
    instrument = Instrument.from_alias(value)
    if instrument is None:
        raise UnrecognizedInstrumentError(field, value)
    return instrument


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="market-stats",
        description="Covariance and realized volatility of daily closes",
    )
    parser.add_argument("--config-dir", help="Configuration directory", default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    cov = sub.add_parser("covariance", help="Covariance and correlation of two instruments")
    cov.add_argument("token_1", nargs="?", default="btc")
    cov.add_argument("token_2", nargs="?", default="snp")

    vol = sub.add_parser("volatility", help="Annualized realized volatility")
    vol.add_argument("token")
    return parser


async def run(args: argparse.Namespace, container: MarketStatsContainer) -> object:
    """Execute the parsed command and return a JSON-serializable result."""
    async with container.stats_service() as service:
        if args.command == "covariance":
            result = await service.calculate_covariance(
                _instrument("token_1", args.token_1),
                _instrument("token_2", args.token_2),
            )
            return result.to_dict()

        result = await service.calculate_realized_volatility(
            _instrument("token", args.token)
        )
        return result.to_json_value()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    config = get_config(args.config_dir)
    setup_logging(level=config.logging.level, json_logs=config.logging.json_logs)
    container = create_container_from_settings(config)

    try:
        output = asyncio.run(run(args, container))
    except UnrecognizedInstrumentError as e:
        print(e.message, file=sys.stderr)
        sys.exit(2)
    except MarketStatsError as e:
        log.error("command_failed", command=args.command, error=e.message)
        print(e.message, file=sys.stderr)
        sys.exit(1)

    print(json.dumps(output))


if __name__ == "__main__":
    main()
