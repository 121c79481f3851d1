"""
Command-line interface for exercising the NVP client.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple

import requests

from .api import ConfigurationError, NvpError, create_nvp_client, load_nvp_config
from .core.shaping import ack_succeeded


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _key_value(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Values must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Key must not be empty")
    return key, val


def _collect_pairs(pairs: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    collected: Dict[str, str] = {}
    for key, value in pairs:
        collected[key] = value
    return collected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nvp-payments",
        description="Call the PayPal NVP API and print the shaped response as JSON",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing NVP_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--field",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Extra NVP request field, e.g. --field CURRENCYCODE=USD",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Send requests to the sandbox endpoint",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    balance = commands.add_parser("balance", help="Run GetBalance")
    balance.add_argument(
        "--all-currencies",
        action="store_true",
        help="Return balances in every held currency",
    )

    details = commands.add_parser("details", help="Run GetTransactionDetails")
    details.add_argument("transaction_id", help="Transaction to look up")

    search = commands.add_parser("search", help="Run TransactionSearch")
    search.add_argument(
        "--start-date",
        required=True,
        help="Earliest transaction date, e.g. 2017-07-29T00:00:00Z",
    )
    search.add_argument("--end-date", help="Latest transaction date")

    call = commands.add_parser("call", help="Run any configured method")
    call.add_argument("method", help="NVP method name, e.g. GetBalance")
    call.add_argument(
        "--errors-only",
        action="store_true",
        help="Only group the ERRORS list, leave data list fields flat",
    )
    return parser


def _request_options(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    if args.command == "balance" and args.all_currencies:
        options["RETURNALLCURRENCIES"] = 1
    elif args.command == "details":
        options["TRANSACTIONID"] = args.transaction_id
    elif args.command == "search":
        options["STARTDATE"] = args.start_date
        if args.end_date:
            options["ENDDATE"] = args.end_date
    options.update(_collect_pairs(args.field or ()))
    return options


def _print_response(shaped: Mapping[str, Any]) -> None:
    json.dump(shaped, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_pairs(args.set or ())

    try:
        config = load_nvp_config(
            env_file=args.env_file,
            overrides=overrides,
            sandbox=True if args.sandbox else None,
        )
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_nvp_client(config=config, session=requests.Session())
    options = _request_options(args)

    try:
        if args.command == "balance":
            shaped = client.get_balance(options)
        elif args.command == "details":
            shaped = client.get_transaction_details(options)
        elif args.command == "search":
            shaped = client.transaction_search(options)
        elif args.errors_only:
            shaped = client.call(args.method, options)
        else:
            shaped = client.call_shaped(args.method, options)
    except NvpError as exc:
        logging.error("NVP request failed: %s", exc)
        return 1

    _print_response(shaped)
    if not ack_succeeded(shaped):
        logging.error("NVP call was not acknowledged: ACK=%s", shaped.get("ACK"))
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())
