"""
Command-line interface for creating OCPay payment links and polling their status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, Sequence, Tuple

from .api import create_ocpay_client
from .core.config import ConfigError, load_client_config
from .core.exceptions import ApiException
from .core.types import (
    CheckPaymentResponse,
    CreateLinkRequest,
    CreateLinkResponse,
    FeeMode,
    ProductInfo,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocpay",
        description="Create OCPay payment links and check their status",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing OCPAY_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-link", help="Create a payment link")
    create.add_argument("--title", required=True, help="Product or service name")
    create.add_argument("--amount", required=True, type=int, help="Amount in DZD")
    create.add_argument("--description", help="Optional product description")
    create.add_argument(
        "--fee-mode",
        choices=[mode.value for mode in FeeMode],
        help="Who pays the processing fee (default: NO_FEE)",
    )
    create.add_argument("--success-message", help="Message shown after payment")
    create.add_argument("--redirect-url", help="Where to send the customer afterwards")

    check = commands.add_parser("check-payment", help="Check a payment's status")
    check.add_argument("payment_ref", help="Payment reference, e.g. OCPL-A1B2C3-D4E5")
    return parser


def _link_summary(result: CreateLinkResponse) -> Dict[str, Any]:
    return {
        "paymentRef": result.payment_ref,
        "paymentUrl": result.payment_url,
        "isSandbox": result.payment_link.is_sandbox,
        "createdAt": result.payment_link.created_at,
    }


def _status_summary(result: CheckPaymentResponse) -> Dict[str, Any]:
    summary: Dict[str, Any] = {
        "paymentRef": result.payment_ref,
        "status": result.status.value,
        "message": result.message,
    }
    details = result.transaction_details
    if details is not None:
        summary["transactionDetails"] = {
            "transactionRef": details.transaction_ref,
            "amount": details.amount,
            "fee": details.fee,
            "netAmount": details.net_amount,
            "paymentMethod": details.payment_method,
            "completedAt": details.completed_at,
        }
    return summary


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_ocpay_client(config=config)

    try:
        if args.command == "create-link":
            request = CreateLinkRequest(
                product_info=ProductInfo(
                    title=args.title,
                    amount=args.amount,
                    description=args.description,
                ),
                fee_mode=args.fee_mode,
                success_message=args.success_message,
                redirect_url=args.redirect_url,
            )
            summary = _link_summary(client.create_link(request))
        else:
            summary = _status_summary(client.check_payment(args.payment_ref))
    except ValueError as exc:
        logging.error("Invalid request: %s", exc)
        return 1
    except ApiException as exc:
        logging.error(
            "%s (status %s, request id %s): %s",
            type(exc).__name__,
            exc.status_code,
            exc.request_id,
            exc.message,
        )
        return 1

    print(json.dumps(summary, indent=2))
    return 0


def main() -> None:
    sys.exit(run_cli())
