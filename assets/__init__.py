"""
Assets Module

Media asset upload to the LinkedIn Assets API:
register upload -> transfer bytes -> poll processing status.

Public API:
    - UploadOrchestrator: High-level upload coordinator
    - UploadRequest: Upload input value
    - AssetStatus: Processing states
    - UploadFailed and subclasses: Failure taxonomy
    - create_orchestrator: Factory function

Usage:
    from assets import create_orchestrator

    orchestrator = create_orchestrator()
    asset = orchestrator.upload(
        owner="urn:li:organization:5590506",
        source="https://example.com/photo.png",
    )
"""

from assets.constants import AssetStatus, UploadPhase
from assets.controllers.upload_orchestrator import UploadOrchestrator
from assets.exceptions import (
    UploadClientError,
    UploadFailed,
    UploadIncomplete,
    UploadRegistrationFailed,
    UploadStatusError,
    UploadTimeout,
)
from assets.factory import AssetUploaderFactory, create_orchestrator
from assets.models.asset import AssetStatusResponse, UploadRequest

# Public API
__all__ = [
    "AssetStatus",
    "AssetStatusResponse",
    "AssetUploaderFactory",
    "UploadClientError",
    "UploadFailed",
    "UploadIncomplete",
    "UploadOrchestrator",
    "UploadPhase",
    "UploadRegistrationFailed",
    "UploadRequest",
    "UploadStatusError",
    "UploadTimeout",
    "create_orchestrator",
]
