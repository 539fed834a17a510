"""
Request and response models for the OCPay endpoints.

Field names are snake_case in Python and camelCase on the wire; each model
knows how to convert itself in the direction it travels.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

__all__ = [
    "FeeMode",
    "PaymentStatus",
    "ProductInfo",
    "CreateLinkRequest",
    "PaymentLink",
    "CreateLinkResponse",
    "TransactionDetails",
    "CheckPaymentResponse",
]


class FeeMode(str, Enum):
    """Which party absorbs the processing fee."""

    NO_FEE = "NO_FEE"
    SPLIT_FEE = "SPLIT_FEE"
    CUSTOMER_FEE = "CUSTOMER_FEE"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.PENDING


def _pick(values: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in values:
        return values[camel]
    return values.get(snake)


@dataclass(frozen=True)
class ProductInfo:
    title: str
    amount: Union[int, float]
    description: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ProductInfo":
        return cls(
            title=values.get("title"),
            amount=values.get("amount"),
            description=values.get("description"),
        )

    def to_payload(self) -> Dict[str, Any]:
        amount = self.amount
        if isinstance(amount, float) and amount.is_integer():
            amount = int(amount)
        payload: Dict[str, Any] = {"title": self.title, "amount": amount}
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class CreateLinkRequest:
    """
    Body of ``POST /v3/ocpay/createLink``.

    ``fee_mode`` may be left as ``None``; :meth:`with_defaults` resolves it to
    :attr:`FeeMode.NO_FEE` before the request is validated and sent.
    """

    product_info: Optional[ProductInfo]
    fee_mode: Optional[Union[FeeMode, str]] = None
    success_message: Optional[str] = None
    redirect_url: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.product_info, Mapping):
            object.__setattr__(self, "product_info", ProductInfo.from_mapping(self.product_info))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CreateLinkRequest":
        """Accept either camelCase (wire) or snake_case keys."""
        return cls(
            product_info=_pick(values, "productInfo", "product_info"),
            fee_mode=_pick(values, "feeMode", "fee_mode"),
            success_message=_pick(values, "successMessage", "success_message"),
            redirect_url=_pick(values, "redirectUrl", "redirect_url"),
        )

    def with_defaults(self) -> "CreateLinkRequest":
        if self.fee_mode:
            return self
        return replace(self, fee_mode=FeeMode.NO_FEE)

    def to_payload(self) -> Dict[str, Any]:
        fee_mode = self.fee_mode
        if isinstance(fee_mode, FeeMode):
            fee_mode = fee_mode.value
        payload: Dict[str, Any] = {
            "productInfo": self.product_info.to_payload(),
            "feeMode": fee_mode,
        }
        if self.success_message is not None:
            payload["successMessage"] = self.success_message
        if self.redirect_url is not None:
            payload["redirectUrl"] = self.redirect_url
        return payload


@dataclass(frozen=True)
class PaymentLink:
    payment_ref: str
    payment_url: str
    product_info: ProductInfo
    fee_mode: FeeMode
    is_sandbox: bool
    created_at: str
    success_message: Optional[str] = None
    redirect_url: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentLink":
        return cls(
            payment_ref=payload["paymentRef"],
            payment_url=payload["paymentUrl"],
            product_info=ProductInfo.from_mapping(payload.get("productInfo") or {}),
            fee_mode=FeeMode(payload.get("feeMode", FeeMode.NO_FEE.value)),
            is_sandbox=bool(payload.get("isSandbox")),
            created_at=payload.get("createdAt", ""),
            success_message=payload.get("successMessage"),
            redirect_url=payload.get("redirectUrl"),
        )


@dataclass(frozen=True)
class CreateLinkResponse:
    payment_link: PaymentLink
    payment_url: str
    payment_ref: str
    raw: Mapping[str, Any]

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CreateLinkResponse":
        link = PaymentLink.from_response(payload["paymentLink"])
        return cls(
            payment_link=link,
            payment_url=payload.get("paymentUrl", link.payment_url),
            payment_ref=payload.get("paymentRef", link.payment_ref),
            raw=payload,
        )


@dataclass(frozen=True)
class TransactionDetails:
    transaction_ref: str
    amount: int
    fee: int
    net_amount: int
    payment_method: str
    completed_at: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "TransactionDetails":
        return cls(
            transaction_ref=payload["transactionRef"],
            amount=payload["amount"],
            fee=payload["fee"],
            net_amount=payload["netAmount"],
            payment_method=payload["paymentMethod"],
            completed_at=payload["completedAt"],
        )


@dataclass(frozen=True)
class CheckPaymentResponse:
    status: PaymentStatus
    message: str
    payment_ref: str
    transaction_details: Optional[TransactionDetails]
    raw: Mapping[str, Any]

    @property
    def is_confirmed(self) -> bool:
        return self.status is PaymentStatus.CONFIRMED

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CheckPaymentResponse":
        details = payload.get("transactionDetails")
        return cls(
            status=PaymentStatus(payload["status"]),
            message=payload.get("message", ""),
            payment_ref=payload["paymentRef"],
            transaction_details=(
                TransactionDetails.from_response(details) if details else None
            ),
            raw=payload,
        )
