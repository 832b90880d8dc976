"""
Services Package

The individual steps of an asset upload.
"""

from assets.services.content_type import ContentTypeResolver
from assets.services.registrar import UploadRegistrar, build_register_upload_body
from assets.services.status_poller import UploadStatusPoller
from assets.services.transferer import MediaTransferer, build_transfer_headers

__all__ = [
    "ContentTypeResolver",
    "MediaTransferer",
    "UploadRegistrar",
    "UploadStatusPoller",
    "build_register_upload_body",
    "build_transfer_headers",
]
