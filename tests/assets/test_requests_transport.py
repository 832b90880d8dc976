"""
Requests Transport Tests

The requests.Session is replaced with a Mock, or mounted with an adapter that
records requests, so nothing touches the network.

Tests cover:
1. Bearer and Rest.li headers on every call
2. Header removal with None values
3. Timeout applied to connect and read
4. Response conversion
5. Session headers and session auth never reach a signed destination
"""

from unittest.mock import Mock

import pytest
import requests
import requests.adapters

from assets.implementations.requests_transport import RequestsTransport
from assets.interfaces.transport_interface import merge_headers
from assets.models.asset import UploadDestination, UploadHeaders
from assets.services.transferer import MediaTransferer


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.request.return_value = Mock(
        status_code=201,
        headers={"Content-Type": "application/json"},
        content=b'{"ok": true}',
    )
    return session


def sent_kwargs(session):
    return session.request.call_args.kwargs


# =============================================================================
# HEADER MERGING
# =============================================================================


class TestMergeHeaders:
    """merge_headers"""

    def test_extra_headers_override_defaults(self):
        merged = merge_headers({"Accept": "*/*"}, {"accept": "application/json"})

        assert merged == {"accept": "application/json"}

    def test_none_removes_header_case_insensitively(self):
        merged = merge_headers(
            {"Authorization": "Bearer t", "X-Other": "1"},
            {"authorization": None},
        )

        assert merged == {"X-Other": "1"}

    def test_no_extra_headers(self):
        defaults = {"A": "1"}

        assert merge_headers(defaults, None) == defaults
        assert merge_headers(defaults, None) is not defaults


# =============================================================================
# REQUESTS
# =============================================================================


class TestRequestsTransport:
    """RequestsTransport against a mocked session"""

    def test_bearer_token_on_every_request(self, session):
        transport = RequestsTransport(access_token="tok", session=session)

        transport.get("https://api.test/v2/assets/1")

        headers = sent_kwargs(session)["headers"]
        assert headers["Authorization"] == "Bearer tok"
        assert headers["X-Restli-Protocol-Version"] == "2.0.0"

    def test_no_token_no_authorization(self, session):
        transport = RequestsTransport(session=session)

        transport.get("https://api.test/v2/assets/1")

        assert "Authorization" not in sent_kwargs(session)["headers"]

    def test_put_can_drop_authorization(self, session):
        transport = RequestsTransport(access_token="tok", session=session)

        transport.put(
            "https://upload.test/1",
            headers={"Authorization": None, "Content-Type": "image/png"},
            data=b"bytes",
            timeout=9,
        )

        args = session.request.call_args.args
        kwargs = sent_kwargs(session)
        assert args == ("PUT", "https://upload.test/1")
        assert kwargs["headers"]["Authorization"] is None
        assert kwargs["auth"] is not None
        assert kwargs["headers"]["Content-Type"] == "image/png"
        assert kwargs["data"] == b"bytes"
        assert kwargs["timeout"] == (9, 9)

    def test_default_timeout(self, session):
        transport = RequestsTransport(session=session, default_timeout=30)

        transport.post("https://api.test/v2/assets", json={"a": 1})

        kwargs = sent_kwargs(session)
        assert kwargs["timeout"] == (30, 30)
        assert kwargs["json"] == {"a": 1}

    def test_response_conversion(self, session):
        transport = RequestsTransport(session=session)

        response = transport.get("https://api.test/v2/assets/1")

        assert response.status_code == 201
        assert response.ok is True
        assert response.json() == {"ok": True}
        assert response.headers == {"Content-Type": "application/json"}

    def test_network_errors_propagate(self, session):
        session.request.side_effect = requests.ConnectionError("refused")
        transport = RequestsTransport(session=session)

        with pytest.raises(requests.ConnectionError):
            transport.get("https://api.test/v2/assets/1")

    def test_close_closes_session(self, session):
        RequestsTransport(session=session).close()

        session.close.assert_called_once()


# =============================================================================
# REAL SESSION
# =============================================================================


class CapturingAdapter(requests.adapters.BaseAdapter):
    """Records prepared requests instead of sending them"""

    def __init__(self):
        super().__init__()
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = requests.Response()
        response.status_code = 201
        response._content = b""
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture
def adapter():
    return CapturingAdapter()


@pytest.fixture
def capturing_session(adapter):
    session = requests.Session()
    session.mount("https://", adapter)
    return session


class TestRealSessionHeaders:
    """Header merging through an actual requests.Session"""

    def test_signed_transfer_drops_session_authorization(
        self, adapter, capturing_session, png_source,
    ):
        capturing_session.headers["Authorization"] = "Bearer caller-secret"
        transport = RequestsTransport(access_token="tok", session=capturing_session)
        destination = UploadDestination(
            upload_url="https://upload.test/put/1",
            headers=UploadHeaders(content_type="image/png"),
        )

        MediaTransferer(transport).transfer(destination, png_source, "image/png", 10)

        sent = adapter.sent[-1]
        assert sent.method == "PUT"
        assert "Authorization" not in sent.headers
        assert sent.headers["Content-Type"] == "image/png"

    def test_signed_transfer_ignores_session_auth(self, adapter, capturing_session):
        capturing_session.auth = ("user", "password")
        transport = RequestsTransport(session=capturing_session)

        transport.put(
            "https://upload.test/put/1",
            headers={"Authorization": None},
            data=b"bytes",
        )

        assert "Authorization" not in adapter.sent[-1].headers

    def test_api_calls_keep_bearer_token(self, adapter, capturing_session):
        capturing_session.headers["Authorization"] = "Bearer caller-secret"
        transport = RequestsTransport(access_token="tok", session=capturing_session)

        transport.get("https://api.test/v2/assets/1")

        assert adapter.sent[-1].headers["Authorization"] == "Bearer tok"
