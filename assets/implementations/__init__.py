"""
Implementations Package

Concrete transport and clock implementations.
"""

from assets.implementations.mock_clock import MockClock
from assets.implementations.mock_transport import MockTransport, RecordedRequest
from assets.implementations.requests_transport import RequestsTransport
from assets.implementations.system_clock import SystemClock

__all__ = [
    "MockClock",
    "MockTransport",
    "RecordedRequest",
    "RequestsTransport",
    "SystemClock",
]
