"""
HTTP transport for the OCPay API.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from .config import ClientConfig
from .exceptions import ApiException, classify_error, extract_request_id

__all__ = ["Client"]

HEADER_ACCESS_TOKEN = "X-Access-Token"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"


def _decode_json(response: requests.Response) -> Optional[Any]:
    try:
        return response.json()
    except ValueError:
        return None


class Client:
    """
    Sends requests to the OCPay API and turns failures into :class:`ApiException`.

    Every response envelope looks like ``{"success": ..., "data": ...,
    "message": ..., "meta": {"requestId": ...}}``. Successful envelopes are
    returned as plain dictionaries, or passed through ``parse`` when given.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {
            HEADER_ACCESS_TOKEN: config.access_token,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            **config.headers,
        }

    def post(
        self,
        endpoint: str,
        data: Mapping[str, Any],
        *,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        return self._request("POST", endpoint, body=data, parse=parse)

    def get(
        self,
        endpoint: str,
        *,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        return self._request("GET", endpoint, parse=parse)

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        url = f"{self.config.base_url}{endpoint}"
        logging.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                json=body,
                headers=self.headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            error = classify_error(0, None, str(exc))
            logging.warning("OCPay %s %s failed: %s", method, endpoint, exc)
            raise error from exc

        payload = _decode_json(response)
        if response.status_code >= 400:
            error = classify_error(
                response.status_code,
                payload,
                f"Request failed with status code {response.status_code}",
            )
            logging.warning(
                "OCPay %s %s responded with %s (request id %s): %s",
                method,
                endpoint,
                error.status_code,
                error.request_id,
                error.message,
            )
            raise error

        if not isinstance(payload, dict):
            raise ApiException(
                f"Failed to parse JSON from OCPay at {url}: {response.text}",
                response.status_code,
            )
        envelope = self._handle_response(payload, response.status_code)
        if parse is None:
            return envelope
        return self._parse_data(envelope, response.status_code, parse)

    @staticmethod
    def _handle_response(payload: Dict[str, Any], status_code: int) -> Dict[str, Any]:
        # The envelope's own flag wins over a 2xx transport status.
        if payload.get("success") is False:
            error = classify_error(status_code, payload, "API request failed")
            logging.warning(
                "OCPay reported failure (request id %s): %s",
                error.request_id,
                error.message,
            )
            raise error
        return payload

    @staticmethod
    def _parse_data(
        envelope: Dict[str, Any],
        status_code: int,
        parse: Callable[[Any], Any],
    ) -> Any:
        try:
            return parse(envelope["data"])
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logging.warning("OCPay returned an unexpected response: %r", envelope)
            raise ApiException(
                f"Unexpected response from OCPay: {exc!r}",
                status_code,
                extract_request_id(envelope),
                envelope,
            ) from exc
