"""
Payment link operations built on top of :class:`ocpay.core.client.Client`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import requests

from .client import Client
from .config import ClientConfig
from .types import CheckPaymentResponse, CreateLinkRequest, CreateLinkResponse
from .validators import validate_create_link_request

__all__ = ["OCPay", "OCPayService", "RequestLike"]

ENDPOINT_CREATE_LINK = "/v3/ocpay/createLink"
ENDPOINT_CHECK_PAYMENT = "/v3/ocpay/checkPayment"

RequestLike = Union[CreateLinkRequest, Mapping[str, Any]]


def _as_request(request: Optional[RequestLike]) -> Optional[CreateLinkRequest]:
    if request is None or isinstance(request, CreateLinkRequest):
        return request
    return CreateLinkRequest.from_mapping(request)


class OCPayService:
    def __init__(self, client: Client) -> None:
        self.client = client

    def create_link(self, request: RequestLike) -> CreateLinkResponse:
        """
        Validate ``request`` locally and create a payment link.

        Raises :class:`ValueError` before any network call when the request is
        malformed, and an :class:`~ocpay.core.exceptions.ApiException` subclass
        when the API rejects it.
        """
        resolved = _as_request(request)
        if resolved is not None:
            resolved = resolved.with_defaults()
        validate_create_link_request(resolved)

        payload = resolved.to_payload()
        logging.info(
            "Creating payment link for '%s' (%s DZD, %s)",
            resolved.product_info.title,
            payload["productInfo"]["amount"],
            payload["feeMode"],
        )
        result = self.client.post(
            ENDPOINT_CREATE_LINK,
            payload,
            parse=CreateLinkResponse.from_response,
        )
        logging.info("Created payment link %s", result.payment_ref)
        return result

    def check_payment(self, payment_ref: str) -> CheckPaymentResponse:
        """
        Fetch the current status of ``payment_ref`` (e.g. ``OCPL-A1B2C3-D4E5``).

        Links that stay unpaid for 20 minutes expire; the API then answers with
        :class:`~ocpay.core.exceptions.PaymentExpiredException`.
        """
        if not isinstance(payment_ref, str) or not payment_ref.strip():
            raise ValueError("Payment reference is required")

        endpoint = f"{ENDPOINT_CHECK_PAYMENT}/{quote(payment_ref, safe='')}"
        result = self.client.get(endpoint, parse=CheckPaymentResponse.from_response)
        logging.info("Payment %s is %s", result.payment_ref, result.status.value)
        return result


class OCPay:
    """
    Entry point for integrators: wires a :class:`Client` to an :class:`OCPayService`.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.client = Client(config, session=session)
        self.service = OCPayService(self.client)

    def create_link(self, request: RequestLike) -> CreateLinkResponse:
        return self.service.create_link(request)

    def check_payment(self, payment_ref: str) -> CheckPaymentResponse:
        return self.service.check_payment(payment_ref)
