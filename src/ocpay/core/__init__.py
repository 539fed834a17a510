"""
Core primitives of the OCPay client: models, validation, transport and errors.
"""

from .client import Client
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    ConfigError,
    load_client_config,
)
from .environment import build_environment, read_env_file
from .exceptions import (
    ApiException,
    NotFoundException,
    OCPayException,
    PaymentExpiredException,
    UnauthorizedException,
    ValidationException,
    classify_error,
)
from .service import OCPay, OCPayService
from .types import (
    CheckPaymentResponse,
    CreateLinkRequest,
    CreateLinkResponse,
    FeeMode,
    PaymentLink,
    PaymentStatus,
    ProductInfo,
    TransactionDetails,
)
from .validators import (
    is_valid_url,
    validate_create_link_request,
    validate_fee_mode,
    validate_product_info,
)

__all__ = [
    "ApiException",
    "CheckPaymentResponse",
    "Client",
    "ClientConfig",
    "ConfigError",
    "CreateLinkRequest",
    "CreateLinkResponse",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
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
    "build_environment",
    "classify_error",
    "is_valid_url",
    "load_client_config",
    "read_env_file",
    "validate_create_link_request",
    "validate_fee_mode",
    "validate_product_info",
]
