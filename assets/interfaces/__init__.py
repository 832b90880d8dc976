"""
Interfaces Package

Abstract interfaces for the transport and clock collaborators.
"""

from assets.interfaces.clock_interface import ClockInterface
from assets.interfaces.transport_interface import (
    HttpTransportInterface,
    TransportResponse,
    merge_headers,
)

__all__ = [
    "ClockInterface",
    "HttpTransportInterface",
    "TransportResponse",
    "merge_headers",
]
