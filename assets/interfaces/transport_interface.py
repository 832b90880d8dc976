"""
HTTP Transport Interface

Abstract interface for the authenticated HTTP transport used by the upload
components. High-level code depends on this abstraction, not on requests.
"""

import json as jsonlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, Mapping, Optional, Union

# A header mapped to None is removed from the outgoing request
RequestHeaders = Mapping[str, Optional[str]]
RequestBody = Union[bytes, BinaryIO, None]


@dataclass
class TransportResponse:
    """
    Result of an HTTP call.

    Attributes:
        status_code: HTTP status code
        headers: Response headers
        content: Raw response body
    """

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def ok(self) -> bool:
        """True for 2xx responses"""
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON
        """
        return jsonlib.loads(self.content)


class HttpTransportInterface(ABC):
    """
    Abstract base class for HTTP transports.

    Implementations carry their own default headers (typically the
    Authorization header) and merge per-request headers over them.
    """

    @abstractmethod
    def get(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """
        Issue a GET request.

        Args:
            url: Absolute URL
            headers: Extra headers; None values remove a default header
            timeout: Connect and read timeout in seconds

        Returns:
            TransportResponse
        """

    @abstractmethod
    def post(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """
        Issue a POST request with either a raw or a JSON body.
        """

    @abstractmethod
    def put(
        self,
        url: str,
        *,
        headers: Optional[RequestHeaders] = None,
        data: RequestBody = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """
        Issue a PUT request with a raw body.

        Args:
            url: Absolute URL
            headers: Extra headers; None values remove a default header
            data: Bytes or a readable binary stream
            timeout: Used for both connection establishment and the response

        Example:
            transport.put(
                upload_url,
                headers={"Content-Type": "image/png", "Authorization": None},
                data=stream,
                timeout=300,
            )
        """


def merge_headers(
    defaults: Mapping[str, str],
    extra: Optional[RequestHeaders],
) -> Dict[str, str]:
    """
    Merge request headers over transport defaults.

    Header names compare case-insensitively. A None value in `extra` drops
    the header entirely.
    """
    merged = dict(defaults)
    for name, value in (extra or {}).items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        if value is not None:
            merged[name] = value
    return merged
