"""
Content Type Resolver

Determines the MIME type of a media source from its filename extension,
falling back to sniffing the leading bytes.
"""

import logging
import mimetypes
from typing import Optional

import filetype

from assets.constants import FALLBACK_CONTENT_TYPE, SNIFF_HEADER_BYTES
from assets.models.media_source import MediaSource


class ContentTypeResolver:
    """
    Resolve a media source's content type.

    Unknown extensions are never an error: they trigger the byte sniff.
    """

    def __init__(self, fallback: str = FALLBACK_CONTENT_TYPE):
        self.logger = logging.getLogger(__name__)
        self.fallback = fallback

    def resolve(self, media: MediaSource) -> str:
        """
        Return the MIME type for `media`.

        Example:
            resolver.resolve(MediaSource.open("https://cdn.test/a/photo.png?x=1"))
            # "image/png"
        """
        extension = self.extension(media.filename)
        content_type = self.lookup_extension(extension)

        if content_type:
            self.logger.debug(f"Content type from extension '{extension}': {content_type}")
            return content_type

        content_type = self.sniff(media)
        self.logger.debug(
            f"No table entry for extension '{extension}', sniffed: {content_type}",
        )
        return content_type

    @staticmethod
    def extension(filename: str) -> str:
        """Text after the last '.', or '' when there is none"""
        if "." not in filename:
            return ""
        return filename.rsplit(".", 1)[-1]

    @staticmethod
    def lookup_extension(extension: str) -> Optional[str]:
        """Look up the extension table; None when absent"""
        if not extension:
            return None
        content_type, _ = mimetypes.guess_type(
            f"file.{extension.lower()}",
            strict=False,
        )
        return content_type

    def sniff(self, media: MediaSource) -> str:
        """Identify the content from its magic bytes"""
        kind = filetype.guess(media.peek(SNIFF_HEADER_BYTES))
        if kind is None:
            return self.fallback
        return kind.mime
