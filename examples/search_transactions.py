"""
Minimal script that uses the public API to search recent transactions.
"""

from __future__ import annotations

import argparse
import logging
import sys

from nvp_payments import ConfigurationError, NvpError, create_nvp_client, load_nvp_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search transactions through the NVP API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing NVP_* settings",
    )
    parser.add_argument(
        "--start-date",
        required=True,
        help="Earliest transaction date, e.g. 2017-07-29T00:00:00Z",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Use the sandbox endpoint instead of the live one",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_nvp_config(
            env_file=args.env_file,
            sandbox=True if args.sandbox else None,
        )
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_nvp_client(config=config)
    try:
        result = client.transaction_search({"STARTDATE": args.start_date})
    except NvpError as exc:
        logging.error("Transaction search failed: %s", exc)
        return 1

    for error in result.get("ERRORS", []):
        logging.error("%s: %s", error.get("ERRORCODE"), error.get("LONGMESSAGE"))

    for transaction in result.get("TRANSACTIONS", []):
        logging.info(
            "%s %s %s %s %s",
            transaction.get("TIMESTAMP"),
            transaction.get("TRANSACTIONID"),
            transaction.get("STATUS"),
            transaction.get("AMT"),
            transaction.get("CURRENCYCODE"),
        )
    return 0 if result.get("ACK", "").startswith("Success") else 1


if __name__ == "__main__":
    sys.exit(main())
