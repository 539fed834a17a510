"""Shared pytest fixtures for the OCPay client tests."""

import json
from unittest.mock import Mock

import pytest
import requests

from ocpay import ClientConfig, OCPay

ACCESS_TOKEN = "test-token"
BASE_URL = "https://sandbox.example.test"


def make_response(status_code, body=None, text=None):
    """Build a real ``requests.Response`` carrying ``body`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def config():
    return ClientConfig(access_token=ACCESS_TOKEN, base_url=BASE_URL)


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def ocpay(config, session):
    return OCPay(config, session=session)


@pytest.fixture
def link_data():
    """``data`` section of a successful createLink envelope."""
    link = {
        "paymentRef": "OCPL-A1B2C3-D4E5",
        "paymentUrl": "https://pay.oneclickdz.com/OCPL-A1B2C3-D4E5",
        "productInfo": {
            "title": "Premium Subscription",
            "amount": 5000,
            "description": "Monthly access",
        },
        "feeMode": "NO_FEE",
        "isSandbox": True,
        "createdAt": "2025-01-15T10:30:00.000Z",
        "successMessage": "Thank you!",
        "redirectUrl": "https://shop.example.com/success",
    }
    return {
        "paymentLink": link,
        "paymentUrl": link["paymentUrl"],
        "paymentRef": link["paymentRef"],
    }


@pytest.fixture
def confirmed_data():
    """``data`` section of a checkPayment envelope for a confirmed payment."""
    return {
        "status": "CONFIRMED",
        "message": "Payment confirmed",
        "paymentRef": "OCPL-A1B2C3-D4E5",
        "transactionDetails": {
            "transactionRef": "TXN-998877",
            "amount": 5000,
            "fee": 150,
            "netAmount": 4850,
            "paymentMethod": "CIB",
            "completedAt": "2025-01-15T10:35:00.000Z",
        },
    }
