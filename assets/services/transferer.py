"""
Media Transferer

Streams the media bytes to the pre-signed upload destination.
"""

import logging
from typing import Dict, Optional

from assets.constants import (
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_SSE,
    HEADER_SSE_KMS_KEY_ID,
)
from assets.exceptions import UploadFailed
from assets.interfaces.transport_interface import HttpTransportInterface
from assets.models.asset import UploadDestination
from assets.models.media_source import MediaSource


def build_transfer_headers(
    destination: UploadDestination,
    content_type: str,
    content_length: int,
) -> Dict[str, Optional[str]]:
    """
    Select the headers for the PUT.

    A destination with provider headers is pre-signed: its declared
    headers are used and the caller's Authorization header is removed
    (mapped to None). A plain destination only gets the resolved type.
    """
    headers: Dict[str, Optional[str]] = {}

    if destination.has_headers:
        signed = destination.headers
        headers[HEADER_CONTENT_TYPE] = signed.content_type or content_type
        if signed.x_amz_server_side_encryption_aws_kms_key_id:
            headers[HEADER_SSE_KMS_KEY_ID] = (
                signed.x_amz_server_side_encryption_aws_kms_key_id
            )
        if signed.x_amz_server_side_encryption:
            headers[HEADER_SSE] = signed.x_amz_server_side_encryption
        headers[HEADER_AUTHORIZATION] = None
    else:
        headers[HEADER_CONTENT_TYPE] = content_type

    headers[HEADER_CONTENT_LENGTH] = str(content_length)
    return headers


class MediaTransferer:
    """
    PUTs a media source to an upload destination.

    A non-success response is terminal: the whole register/transfer/poll
    flow has to be restarted for another attempt.
    """

    def __init__(self, transport: HttpTransportInterface):
        self.logger = logging.getLogger(__name__)
        self.transport = transport

    def transfer(
        self,
        destination: UploadDestination,
        media: MediaSource,
        content_type: str,
        timeout: float,
    ) -> None:
        """
        Transfer the bytes.

        Args:
            destination: Registered upload destination
            media: Source to stream (read from the beginning)
            content_type: Resolved MIME type of the source
            timeout: Connect and read timeout (seconds)

        Raises:
            UploadFailed: Destination answered with a non-success status
        """
        size = media.size
        headers = build_transfer_headers(destination, content_type, size)

        self.logger.info(
            f"Transferring {media.filename or media.uri} "
            f"({size} bytes, {headers[HEADER_CONTENT_TYPE]})",
        )

        response = self.transport.put(
            destination.upload_url,
            headers=headers,
            data=media.rewind(),
            timeout=timeout,
        )

        if not response.ok:
            raise UploadFailed(
                f"Media transfer failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        self.logger.info(f"Transfer complete (HTTP {response.status_code})")
