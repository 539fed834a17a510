"""
Public facade for the OCPay client package.

The module re-exports the pieces integrators need so they can
``from ocpay import ...`` without navigating the package.
"""

from .api import check_payment, create_link, create_ocpay_client
from .core import (
    ApiException,
    CheckPaymentResponse,
    Client,
    ClientConfig,
    ConfigError,
    CreateLinkRequest,
    CreateLinkResponse,
    FeeMode,
    NotFoundException,
    OCPay,
    OCPayException,
    OCPayService,
    PaymentExpiredException,
    PaymentLink,
    PaymentStatus,
    ProductInfo,
    TransactionDetails,
    UnauthorizedException,
    ValidationException,
    classify_error,
    load_client_config,
    validate_create_link_request,
)

__all__ = (
    "ApiException",
    "CheckPaymentResponse",
    "Client",
    "ClientConfig",
    "ConfigError",
    "CreateLinkRequest",
    "CreateLinkResponse",
    "FeeMode",
    "NotFoundException",
    "OCPay",
    "OCPayException",
    "OCPayService",
    "PaymentExpiredException",
    "PaymentLink",
    "PaymentStatus",
    "ProductInfo",
    "TransactionDetails",
    "UnauthorizedException",
    "ValidationException",
    "check_payment",
    "classify_error",
    "create_link",
    "create_ocpay_client",
    "load_client_config",
    "validate_create_link_request",
)
