"""
Mock Transport Implementation

Simulated Assets API for testing without LinkedIn.
Answers registration, transfer and status calls from a script and records
every outgoing request.
"""

import json as jsonlib
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from assets.constants import (
    HEADER_AUTHORIZATION,
    UPLOAD_MECHANISM,
    AssetStatus,
)
from assets.interfaces.transport_interface import (
    HttpTransportInterface,
    RequestBody,
    RequestHeaders,
    TransportResponse,
    merge_headers,
)

MOCK_UPLOAD_HOST = "https://mock-upload.linkedin.test"


@dataclass
class RecordedRequest:
    """One request as it would have gone on the wire"""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    json: Any = None
    body_size: Optional[int] = None
    timeout: Optional[float] = None

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup"""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None


class MockTransport(HttpTransportInterface):
    """
    Mock Assets API for tests and offline development.

    Routing:
    - POST .../assets?action=registerUpload -> registration payload
    - PUT <upload url>                      -> transfer_status
    - GET .../assets/<id>                   -> next scripted status

    The last scripted status repeats once the script runs out.

    Example:
        transport = MockTransport(statuses=["PROCESSING", "AVAILABLE"])
        transport = MockTransport(transfer_status=403)
    """

    def __init__(
        self,
        asset_entity: Optional[str] = None,
        upload_url: Optional[str] = None,
        upload_headers: Optional[Dict[str, str]] = None,
        statuses: Sequence[str] = (AssetStatus.AVAILABLE.value,),
        transfer_status: int = 201,
        registration_status: int = 200,
        status_code: int = 200,
        registration_payload: Optional[Dict[str, Any]] = None,
        access_token: Optional[str] = "mock-token",
    ):
        """
        Initialize mock transport.

        Args:
            asset_entity: URN returned by registration (random when omitted)
            upload_url: Destination returned by registration
            upload_headers: Provider headers block (None = plain destination)
            statuses: Status values returned by successive polls
            transfer_status: HTTP status for the PUT
            registration_status: HTTP status for the registration POST
            status_code: HTTP status for status GETs
            registration_payload: Raw registration body, overrides the above
            access_token: Token put in the default Authorization header
        """
        self.logger = logging.getLogger(__name__)

        self.asset_entity = asset_entity or (
            f"urn:li:digitalmediaAsset:{random.randint(10**8, 10**9 - 1)}"
        )
        self.upload_url = upload_url or (
            f"{MOCK_UPLOAD_HOST}/upload/{self.asset_entity.split(':')[-1]}"
        )
        self.upload_headers = upload_headers
        self.statuses = list(statuses) or [AssetStatus.AVAILABLE.value]
        self.transfer_status = transfer_status
        self.registration_status = registration_status
        self.status_code = status_code
        self.registration_payload = registration_payload

        self.default_headers: Dict[str, str] = {}
        if access_token:
            self.default_headers[HEADER_AUTHORIZATION] = f"Bearer {access_token}"

        # Track requests for testing
        self.requests: List[RecordedRequest] = []
        self._poll_index = 0

        self.logger.info(
            f"Mock Transport initialized "
            f"(entity: {self.asset_entity}, statuses: {self.statuses})",
        )

    def get(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        self._record("GET", url, headers, timeout=timeout)

        if "/assets/" not in url:
            return TransportResponse(status_code=404)

        status = self.statuses[min(self._poll_index, len(self.statuses) - 1)]
        self._poll_index += 1

        self.logger.debug(f"[MOCK] Status poll #{self._poll_index}: {status}")

        return self._json_response(
            self.status_code,
            {
                "id": url.rsplit("/", 1)[-1],
                "mediaTypeFamily": "STILLIMAGE",
                "recipes": [
                    {
                        "recipe": "urn:li:digitalmediaRecipe:feedshare-image",
                        "status": status,
                    },
                ],
            },
        )

    def post(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        self._record("POST", url, headers, json=json, data=data, timeout=timeout)

        if "registerUpload" not in url:
            return TransportResponse(status_code=404)

        self.logger.debug(f"[MOCK] Registered upload: {self.asset_entity}")
        return self._json_response(
            self.registration_status,
            self.registration_payload or self._registration_body(),
        )

    def put(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        self._record("PUT", url, headers, data=data, timeout=timeout)
        self.logger.debug(f"[MOCK] Transfer to {url}: {self.transfer_status}")
        return TransportResponse(status_code=self.transfer_status)

    def _registration_body(self) -> Dict[str, Any]:
        mechanism: Dict[str, Any] = {"uploadUrl": self.upload_url}
        if self.upload_headers is not None:
            mechanism["headers"] = self.upload_headers

        return {
            "value": {
                "asset": self.asset_entity,
                "mediaArtifact": (
                    "urn:li:digitalmediaMediaArtifact:"
                    f"({self.asset_entity},urn:li:digitalmediaMediaArtifactClass:feedshare-uploadedImage)"
                ),
                "uploadMechanism": {UPLOAD_MECHANISM: mechanism},
            },
        }

    def _record(
        self,
        method: str,
        url: str,
        headers: Optional[RequestHeaders],
        json: Any = None,
        data: RequestBody = None,
        timeout: Optional[float] = None,
    ) -> None:
        body_size = None
        if isinstance(data, (bytes, bytearray)):
            body_size = len(data)
        elif data is not None:
            body_size = len(data.read())

        self.requests.append(
            RecordedRequest(
                method=method,
                url=url,
                headers=merge_headers(self.default_headers, headers),
                json=json,
                body_size=body_size,
                timeout=timeout,
            ),
        )

    @staticmethod
    def _json_response(status_code: int, body: Any) -> TransportResponse:
        return TransportResponse(
            status_code=status_code,
            headers={"Content-Type": "application/json"},
            content=jsonlib.dumps(body).encode("utf-8"),
        )

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_requests(self, method: Optional[str] = None) -> List[RecordedRequest]:
        """
        Get recorded requests, optionally filtered by HTTP method.

        Returns:
            List of recorded requests in call order
        """
        if method is None:
            return list(self.requests)
        return [request for request in self.requests if request.method == method]

    def get_last_request(self, method: Optional[str] = None) -> Optional[RecordedRequest]:
        """Most recent request, or None"""
        matching = self.get_requests(method)
        return matching[-1] if matching else None

    @property
    def poll_count(self) -> int:
        """Number of status GETs served"""
        return len(self.get_requests("GET"))

    def clear_history(self) -> None:
        """Clear recorded requests and restart the status script"""
        self.requests.clear()
        self._poll_index = 0
        self.logger.debug("[MOCK] Request history cleared")
