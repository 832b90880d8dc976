"""
Requests Transport Implementation

Concrete implementation of HttpTransportInterface on top of a
requests.Session carrying the bearer token.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.auth import AuthBase

from assets.constants import HEADER_AUTHORIZATION
from assets.interfaces.transport_interface import (
    HttpTransportInterface,
    RequestBody,
    RequestHeaders,
    TransportResponse,
    merge_headers,
)
from config.settings import HTTP_TIMEOUT, RESTLI_PROTOCOL_VERSION


class _NoAuthorization(AuthBase):
    """Keeps session auth and netrc credentials off a request"""

    def __call__(self, request):
        request.headers.pop(HEADER_AUTHORIZATION, None)
        return request


class RequestsTransport(HttpTransportInterface):
    """
    Authenticated HTTP transport.

    Features:
    - Shared session (connection pooling)
    - Bearer token and Rest.li headers on every request
    - Per-request header removal (header mapped to None)
    - Same timeout for connect and read
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        default_timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize transport.

        Args:
            access_token: OAuth 2.0 bearer token (optional for anonymous use)
            default_timeout: Timeout when a call does not pass one (seconds)
            session: Preconfigured session (optional)

        Example:
            transport = RequestsTransport(access_token=token_manager.get_access_token())
        """
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.default_timeout = default_timeout

        self.default_headers: Dict[str, str] = {
            "X-Restli-Protocol-Version": RESTLI_PROTOCOL_VERSION,
        }
        if access_token:
            self.default_headers[HEADER_AUTHORIZATION] = f"Bearer {access_token}"

    def get(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        return self._request("GET", url, headers=headers, timeout=timeout)

    def post(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        return self._request(
            "POST",
            url,
            headers=headers,
            data=data,
            json=json,
            timeout=timeout,
        )

    def put(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        return self._request("PUT", url, headers=headers, data=data, timeout=timeout)

    def _request(
        self,
        method: str,
        url: str,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """
        Send one request.

        Headers mapped to None are passed on as None so requests also drops
        them from the session defaults. A removed Authorization header also
        overrides session auth and netrc credentials.

        Raises:
            requests.RequestException: On network-level failures
        """
        removed = [name for name, value in (headers or {}).items() if value is None]
        final_headers: Dict[str, Optional[str]] = dict(
            merge_headers(self.default_headers, headers),
        )
        final_headers.update({name: None for name in removed})

        auth = None
        if any(name.lower() == HEADER_AUTHORIZATION.lower() for name in removed):
            auth = _NoAuthorization()

        request_timeout = timeout if timeout is not None else self.default_timeout

        self.logger.debug(f"{method} {url} (timeout: {request_timeout}s)")

        response = self.session.request(
            method,
            url,
            headers=final_headers,
            data=data,
            json=json,
            auth=auth,
            timeout=(request_timeout, request_timeout),
        )

        self.logger.debug(f"{method} {url} -> {response.status_code}")

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )

    def close(self) -> None:
        """Release pooled connections"""
        self.session.close()
