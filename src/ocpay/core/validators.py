"""
Client-side checks run on a payment link request before it is sent.

Every check raises :class:`ValueError` with a rule-specific message and stops
at the first violation.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlsplit

from .types import CreateLinkRequest, FeeMode, ProductInfo

__all__ = [
    "MAX_AMOUNT",
    "MIN_AMOUNT",
    "is_valid_url",
    "validate_create_link_request",
    "validate_fee_mode",
    "validate_product_info",
]

MIN_AMOUNT = 500
MAX_AMOUNT = 500_000
MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000
MAX_SUCCESS_MESSAGE_LENGTH = 500


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def validate_product_info(product_info: ProductInfo) -> None:
    title = product_info.title
    if not isinstance(title, str) or not title.strip():
        raise ValueError("Product title is required")

    if len(title) > MAX_TITLE_LENGTH:
        raise ValueError("Product title must not exceed 200 characters")

    amount = product_info.amount
    if not _is_whole_number(amount):
        raise ValueError("Amount must be a whole number (no decimals)")

    if amount < MIN_AMOUNT:
        raise ValueError("Amount must be at least 500 DZD")

    if amount > MAX_AMOUNT:
        raise ValueError("Amount must not exceed 500,000 DZD")

    description = product_info.description
    if description and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValueError("Product description must not exceed 1000 characters")


def validate_fee_mode(fee_mode: Any) -> None:
    try:
        FeeMode(fee_mode)
    except ValueError:
        choices = ", ".join(mode.value for mode in FeeMode)
        raise ValueError(f"Invalid fee mode. Must be one of: {choices}") from None


def is_valid_url(url: Optional[str]) -> bool:
    """Return ``True`` for absolute ``http``/``https`` URLs with a host."""
    if not isinstance(url, str) or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(host)


def validate_create_link_request(request: Optional[CreateLinkRequest]) -> None:
    if request is None or request.product_info is None:
        raise ValueError("Product info is required")

    validate_product_info(request.product_info)

    if request.fee_mode:
        validate_fee_mode(request.fee_mode)

    success_message = request.success_message
    if success_message and len(success_message) > MAX_SUCCESS_MESSAGE_LENGTH:
        raise ValueError("Success message must not exceed 500 characters")

    if request.redirect_url and not is_valid_url(request.redirect_url):
        raise ValueError("Redirect URL must be a valid HTTP/HTTPS URL")
