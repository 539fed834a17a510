"""Tests for the HTTP transport in ocpay.core.client."""

import pytest
import requests

from conftest import ACCESS_TOKEN, BASE_URL, make_response
from ocpay.core.client import Client
from ocpay.core.config import ClientConfig
from ocpay.core.exceptions import (
    ApiException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)


@pytest.fixture
def client(config, session):
    return Client(config, session=session)


class TestRequests:
    def test_post_sends_json_with_headers_and_timeout(self, client, session):
        session.request.return_value = make_response(200, {"success": True, "data": {"ok": 1}})

        result = client.post("/v3/ocpay/createLink", {"feeMode": "NO_FEE"})

        assert result == {"success": True, "data": {"ok": 1}}
        session.request.assert_called_once_with(
            "POST",
            f"{BASE_URL}/v3/ocpay/createLink",
            json={"feeMode": "NO_FEE"},
            headers={
                "X-Access-Token": ACCESS_TOKEN,
                "Content-Type": "application/json",
            },
            timeout=30.0,
        )

    def test_get_has_no_body(self, client, session):
        session.request.return_value = make_response(200, {"success": True, "data": {}})

        client.get("/v3/ocpay/checkPayment/OCPL-1")

        args, kwargs = session.request.call_args
        assert args == ("GET", f"{BASE_URL}/v3/ocpay/checkPayment/OCPL-1")
        assert kwargs["json"] is None

    def test_custom_headers_and_timeout(self, session):
        config = ClientConfig(
            access_token="tok",
            timeout_ms=5000,
            headers={"X-Trace": "abc", "Content-Type": "application/json; charset=utf-8"},
        )
        session.request.return_value = make_response(200, {"success": True, "data": {}})

        Client(config, session=session).get("/ping")

        _, kwargs = session.request.call_args
        assert kwargs["timeout"] == 5.0
        assert kwargs["headers"] == {
            "X-Access-Token": "tok",
            "Content-Type": "application/json; charset=utf-8",
            "X-Trace": "abc",
        }

    def test_default_session_is_created(self, config):
        assert isinstance(Client(config).session, requests.Session)


class TestErrorHandling:
    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (400, ValidationException),
            (403, UnauthorizedException),
            (404, NotFoundException),
            (500, ApiException),
        ],
    )
    def test_http_errors_are_classified(self, client, session, status_code, expected):
        body = {"success": False, "message": "nope", "meta": {"requestId": "req-42"}}
        session.request.return_value = make_response(status_code, body)

        with pytest.raises(expected) as exc_info:
            client.get("/v3/ocpay/checkPayment/OCPL-1")

        error = exc_info.value
        assert error.status_code == status_code
        assert error.message == "nope"
        assert error.request_id == "req-42"
        assert error.error_data == body

    def test_http_error_without_json_body(self, client, session):
        session.request.return_value = make_response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(ApiException) as exc_info:
            client.get("/anything")

        assert exc_info.value.message == "Request failed with status code 502"
        assert exc_info.value.error_data is None

    def test_network_failure_has_status_zero(self, client, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(ApiException) as exc_info:
            client.get("/anything")

        error = exc_info.value
        assert type(error) is ApiException
        assert error.status_code == 0
        assert "connection refused" in error.message
        assert isinstance(error.__cause__, requests.ConnectionError)

    def test_timeout_has_status_zero(self, client, session):
        session.request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(ApiException) as exc_info:
            client.post("/v3/ocpay/createLink", {})

        assert exc_info.value.status_code == 0

    def test_success_false_inside_200_is_generic_failure(self, client, session):
        body = {"success": False, "message": "insufficient balance"}
        session.request.return_value = make_response(200, body)

        with pytest.raises(ApiException) as exc_info:
            client.post("/v3/ocpay/createLink", {})

        error = exc_info.value
        assert type(error) is ApiException
        assert error.message == "insufficient balance"
        assert error.error_data == body

    def test_success_false_without_message(self, client, session):
        session.request.return_value = make_response(200, {"success": False})

        with pytest.raises(ApiException, match="API request failed"):
            client.get("/anything")

    def test_invalid_json_on_success(self, client, session):
        session.request.return_value = make_response(200, text="not json")

        with pytest.raises(ApiException, match="Failed to parse JSON") as exc_info:
            client.get("/anything")

        assert exc_info.value.status_code == 200

    def test_non_http_errors_propagate(self, client, session):
        session.request.side_effect = KeyError("bug")

        with pytest.raises(KeyError):
            client.get("/anything")

    def test_parse_errors_become_api_exceptions(self, client, session):
        body = {"success": True, "data": {"ok": 1}, "meta": {"requestId": "req-7"}}
        session.request.return_value = make_response(200, body)

        def parse(data):
            return data["missing"]

        with pytest.raises(ApiException) as exc_info:
            client.get("/anything", parse=parse)

        error = exc_info.value
        assert error.status_code == 200
        assert error.request_id == "req-7"
        assert error.error_data == body
        assert isinstance(error.__cause__, KeyError)

    def test_parse_receives_data(self, client, session):
        session.request.return_value = make_response(200, {"success": True, "data": {"ok": 1}})

        assert client.post("/anything", {}, parse=lambda data: data["ok"]) == 1
