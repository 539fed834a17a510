"""
Exception types raised by the OCPay client and the status-code classifier.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

__all__ = [
    "OCPayException",
    "ApiException",
    "ValidationException",
    "UnauthorizedException",
    "NotFoundException",
    "PaymentExpiredException",
    "classify_error",
    "extract_request_id",
]


class OCPayException(Exception):
    """Base class for every error returned by the OCPay API."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        request_id: Optional[str] = None,
        error_data: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        self.error_data = error_data

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, request_id={self.request_id!r})"
        )


class ApiException(OCPayException):
    """Any API failure without a more specific class, including network errors."""


class ValidationException(ApiException):
    """HTTP 400: the API rejected the request data."""


class UnauthorizedException(ApiException):
    """HTTP 403: the access token is missing or invalid."""


class NotFoundException(ApiException):
    """HTTP 404: the payment reference does not exist."""


class PaymentExpiredException(ApiException):
    """HTTP 410: the payment link expired (20 minutes after creation)."""


_STATUS_TO_EXCEPTION: Dict[int, type] = {
    400: ValidationException,
    403: UnauthorizedException,
    404: NotFoundException,
    410: PaymentExpiredException,
}


def extract_request_id(payload: Optional[Mapping[str, Any]]) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    meta = payload.get("meta")
    if not isinstance(meta, Mapping):
        return None
    return meta.get("requestId")


def classify_error(
    status_code: Optional[int],
    payload: Optional[Mapping[str, Any]],
    default_message: str,
) -> ApiException:
    """
    Map a failed call onto the matching :class:`ApiException` subclass.

    ``status_code`` is ``0`` (or ``None``) when no HTTP response was received.
    A 2xx status is only passed here when the body reported ``success: false``,
    which always yields a plain :class:`ApiException`. The exception is
    returned, not raised, so callers can chain it onto the transport error.
    """
    code = status_code or 0
    message = default_message
    if isinstance(payload, Mapping) and payload.get("message"):
        message = str(payload["message"])

    exc_type = _STATUS_TO_EXCEPTION.get(code, ApiException)
    return exc_type(message, code, extract_request_id(payload), payload)
