"""
Minimal script that uses the public API to run a sale and print its outcome.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from paygate import ConfigError, GatewayError, create_gateway, load_gateway_config


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a sale through the gateway")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYGATE_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--amount", default="10.00", help="Sale amount (default: 10.00)")
    parser.add_argument(
        "--payment-method-nonce",
        default="fake-valid-nonce",
        help="Nonce identifying the payment method to charge",
    )
    parser.add_argument(
        "--submit-for-settlement",
        action="store_true",
        help="Submit the sale for settlement immediately",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        config = load_gateway_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_gateway(config=config) as gateway:
        try:
            result = gateway.transaction.sale(
                {
                    "amount": args.amount,
                    "payment_method_nonce": args.payment_method_nonce,
                    "options": {"submit_for_settlement": args.submit_for_settlement},
                }
            )
        except GatewayError as exc:
            logging.error("Sale request failed: %r", exc)
            return 1

    if result.is_success:
        logging.info(
            "Transaction %s is %s for %s",
            result.transaction.id,
            result.transaction.status,
            result.transaction.amount,
        )
        return 0

    logging.error("Sale rejected: %s", result.message)
    for error in result.errors.deep_errors:
        logging.error("  %s %s: %s", error.code, error.attribute, error.message)
    return 1


if __name__ == "__main__":
    sys.exit(main())
