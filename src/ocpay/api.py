"""
Public, high-level helpers for talking to the OCPay API.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.config import ClientConfig, load_client_config
from .core.service import OCPay, RequestLike
from .core.types import CheckPaymentResponse, CreateLinkResponse

__all__ = [
    "check_payment",
    "create_link",
    "create_ocpay_client",
]


def create_ocpay_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    timeout_ms: Optional[int | str] = None,
    base_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> OCPay:
    """
    Construct an :class:`OCPay` client.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from ``OCPAY_*`` environment data and keyword arguments.
    """
    if config is not None:
        extras = (overrides, base, access_token, timeout_ms, base_url, headers)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            access_token=access_token,
            timeout_ms=timeout_ms,
            base_url=base_url,
            headers=headers,
        )
    return OCPay(cfg, session=session)


def create_link(
    request: RequestLike,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    access_token: Optional[str] = None,
) -> CreateLinkResponse:
    """One-shot helper: build a client and create a single payment link."""
    client = create_ocpay_client(
        config=config,
        session=session,
        env_file=env_file,
        access_token=access_token,
    )
    return client.create_link(request)


def check_payment(
    payment_ref: str,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    access_token: Optional[str] = None,
) -> CheckPaymentResponse:
    """One-shot helper: build a client and fetch the status of ``payment_ref``."""
    client = create_ocpay_client(
        config=config,
        session=session,
        env_file=env_file,
        access_token=access_token,
    )
    return client.check_payment(payment_ref)
