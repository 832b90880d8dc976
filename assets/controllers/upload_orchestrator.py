"""
Upload Orchestrator

High-level coordinator for asset uploads.
Runs register -> transfer -> poll as one blocking call and returns the asset
entity.

- Clean, simple API for callers
- One attempt end-to-end per call; retrying is up to the caller
- Every failure surfaces as an UploadFailed subclass tagged with its phase
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from assets.constants import DEFAULT_ASSET_TYPE
from assets.exceptions import UploadFailed
from assets.interfaces.clock_interface import ClockInterface
from assets.interfaces.transport_interface import HttpTransportInterface
from assets.models.asset import AssetStatusResponse, UploadRequest
from assets.models.media_source import MediaSource, open_media_source
from assets.services.content_type import ContentTypeResolver
from assets.services.registrar import UploadRegistrar
from assets.services.status_poller import UploadStatusPoller
from assets.services.transferer import MediaTransferer
from config.settings import (
    ASSET_POLL_INTERVAL,
    ASSET_POLL_TIMEOUT,
    ASSET_UPLOAD_TIMEOUT,
    LINKEDIN_API_URL,
    LINKEDIN_API_VERSION,
)

MediaLocation = Union[str, Path, MediaSource]


class UploadOrchestrator:
    """
    Asset upload coordinator.

    This class:
    - Registers the upload slot
    - Opens the source and resolves its content type
    - Transfers the bytes and always releases the source
    - Polls until the platform finishes processing

    Usage:
        orchestrator = UploadOrchestrator(transport=RequestsTransport(token))

        asset = orchestrator.upload(
            owner="urn:li:organization:5590506",
            source="https://example.com/photo.png",
        )
    """

    def __init__(
        self,
        transport: HttpTransportInterface,
        api_base: Optional[str] = None,
        poll_interval: float = ASSET_POLL_INTERVAL,
        poll_timeout: float = ASSET_POLL_TIMEOUT,
        clock: Optional[ClockInterface] = None,
        resolver: Optional[ContentTypeResolver] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            transport: Authenticated HTTP transport
            api_base: API URL including version (from settings by default)
            poll_interval: Sleep between status polls (seconds)
            poll_timeout: Overall polling budget (seconds)
            clock: Time source for polling (real clock by default)
            resolver: Content type resolver (default resolver if omitted)
        """
        self.logger = logging.getLogger(__name__)

        self.transport = transport
        self.api_base = api_base or f"{LINKEDIN_API_URL}{LINKEDIN_API_VERSION}"

        self.registrar = UploadRegistrar(transport, self.api_base)
        self.transferer = MediaTransferer(transport)
        self.poller = UploadStatusPoller(
            transport,
            self.api_base,
            interval=poll_interval,
            timeout=poll_timeout,
            clock=clock,
        )
        self.resolver = resolver or ContentTypeResolver()

        self.logger.info(f"Upload Orchestrator initialized ({self.api_base})")

    def upload(
        self,
        owner: str,
        source: MediaLocation,
        asset_type: str = DEFAULT_ASSET_TYPE,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Upload one media asset.

        Args:
            owner: Owner URN
            source: URL, local path or open MediaSource (always closed)
            asset_type: "image" (default) or "video"
            timeout: Transfer timeout in seconds (ASSET_UPLOAD_TIMEOUT if
                omitted); polling has its own budget

        Returns:
            Asset entity URN, e.g. "urn:li:digitalmediaAsset:C5522AQHn46pwH96hxQ"

        Raises:
            UploadRegistrationFailed: Registration refused or malformed
            UploadFailed: Transfer answered with a non-success status
            UploadIncomplete / UploadClientError: Platform rejected the asset
            UploadTimeout: Platform did not finish within the poll budget
            UploadStatusError: Status endpoint failed

        Example:
            try:
                asset = orchestrator.upload(owner, "/tmp/clip.mp4", asset_type="video")
            except UploadFailed as e:
                logger.error(f"Upload failed during {e.phase.value}: {e}")
        """
        start_time = time.time()
        if timeout is None:
            timeout = ASSET_UPLOAD_TIMEOUT

        try:
            asset_entity, destination = self.registrar.register(owner, asset_type)
        except Exception:
            if isinstance(source, MediaSource):
                source.close()
            raise

        media = open_media_source(source)
        try:
            content_type = self.resolver.resolve(media)
            self.transferer.transfer(destination, media, content_type, timeout)
        except UploadFailed as e:
            e.asset_entity = e.asset_entity or asset_entity
            self.logger.error(f"❌ Transfer failed for {asset_entity}: {e}")
            raise
        finally:
            media.close()

        self.poller.poll(asset_entity)

        self.logger.info(
            f"✅ Upload successful: {asset_entity} ({time.time() - start_time:.1f}s)",
        )
        return asset_entity

    def upload_request(self, request: UploadRequest) -> str:
        """Upload from an UploadRequest value"""
        return self.upload(
            owner=request.owner,
            source=request.source,
            asset_type=request.asset_type,
            timeout=request.timeout,
        )

    def upload_status(self, asset_entity: str) -> AssetStatusResponse:
        """
        Fetch the current status of an asset once.

        Example:
            status = orchestrator.upload_status("urn:li:digitalmediaAsset:123")
            print(status.status)  # "AVAILABLE"
        """
        return self.poller.fetch_status(asset_entity)
