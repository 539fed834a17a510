"""
Minimal script that uses the public API to create a payment link and report
its current status.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ocpay import (
    ApiException,
    ConfigError,
    CreateLinkRequest,
    FeeMode,
    PaymentExpiredException,
    ProductInfo,
    UnauthorizedException,
    create_ocpay_client,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an OCPay payment link using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing OCPAY_* settings",
    )
    parser.add_argument(
        "--access-token",
        help="Provide the access token without relying on environment data",
    )
    parser.add_argument(
        "--base-url",
        help="Override the API base URL (default: https://api.oneclickdz.com)",
    )
    parser.add_argument("--title", default="Premium Subscription")
    parser.add_argument("--amount", type=int, default=5000, help="Amount in DZD")
    parser.add_argument(
        "--fee-mode",
        choices=[mode.value for mode in FeeMode],
        default=FeeMode.NO_FEE.value,
    )
    parser.add_argument("--redirect-url", help="Where to send the customer after paying")
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
        client = create_ocpay_client(
            env_file=args.env_file,
            access_token=args.access_token,
            base_url=args.base_url,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    request = CreateLinkRequest(
        product_info=ProductInfo(title=args.title, amount=args.amount),
        fee_mode=FeeMode(args.fee_mode),
        redirect_url=args.redirect_url,
    )

    try:
        link = client.create_link(request)
        status = client.check_payment(link.payment_ref)
    except ValueError as exc:
        logging.error("Request rejected locally: %s", exc)
        return 1
    except UnauthorizedException:
        logging.error("The access token was rejected; check OCPAY_ACCESS_TOKEN")
        return 1
    except PaymentExpiredException as exc:
        logging.error("Payment link expired before it was paid: %s", exc.message)
        return 1
    except ApiException as exc:
        logging.error("OCPay error %s (request id %s): %s", exc.status_code, exc.request_id, exc.message)
        return 1

    logging.info("Share this URL with the customer: %s", link.payment_url)
    logging.info("Save this reference with the order: %s", link.payment_ref)
    logging.info("Current status: %s", status.status.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
