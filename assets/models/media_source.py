"""
Media Source

Readable byte stream with a discoverable name, opened from a local path or
downloaded from an http(s) URL. The orchestrator owns the handle for the
duration of one upload and closes it after the transfer step.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional, Union
from urllib.parse import unquote, urlparse

import requests

from config.settings import SOURCE_DOWNLOAD_TIMEOUT

# Downloads above this size spill from memory to a temporary file
SPOOL_MAX_MEMORY_BYTES = 16 * 1024 * 1024  # 16 MB
DOWNLOAD_CHUNK_SIZE = 1024 * 1024  # 1 MB

REMOTE_SCHEMES = ("http", "https")

logger = logging.getLogger(__name__)


class MediaSource:
    """
    A seekable binary stream plus the URI it came from.

    Usage:
        with MediaSource.open("https://example.com/photo.png") as media:
            print(media.filename, media.size)
    """

    def __init__(self, stream: BinaryIO, uri: str):
        self.stream = stream
        self.uri = uri

    @classmethod
    def open(
        cls,
        location: Union[str, Path],
        timeout: float = SOURCE_DOWNLOAD_TIMEOUT,
    ) -> "MediaSource":
        """
        Open a media source from a URL or a local path.

        Args:
            location: http(s) URL, file:// URL or filesystem path
            timeout: Download timeout for remote sources (seconds)

        Raises:
            FileNotFoundError: If a local path does not exist
            requests.RequestException: If a remote download fails
        """
        location = str(location)
        scheme = urlparse(location).scheme.lower()

        if scheme in REMOTE_SCHEMES:
            return cls.from_url(location, timeout=timeout)
        if scheme == "file":
            return cls.from_path(unquote(urlparse(location).path))
        return cls.from_path(location)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "MediaSource":
        """Open a local file for reading"""
        file_path = Path(path)
        stream = open(file_path, "rb")  # noqa: SIM115 - closed by MediaSource.close
        return cls(stream, uri=file_path.resolve().as_uri())

    @classmethod
    def from_url(
        cls,
        url: str,
        timeout: float = SOURCE_DOWNLOAD_TIMEOUT,
    ) -> "MediaSource":
        """
        Download a remote source into a spooled temporary file.

        The download uses a plain session: platform credentials are never
        sent to third-party media hosts.
        """
        logger.debug(f"Downloading media source: {url}")
        spool = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_MEMORY_BYTES)

        try:
            with requests.get(url, stream=True, timeout=timeout) as response:
                response.raise_for_status()
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    spool.write(chunk)
        except Exception:
            spool.close()
            raise

        spool.seek(0)
        return cls(spool, uri=url)

    @property
    def filename(self) -> str:
        """Last path segment of the URI, without query string"""
        return os.path.basename(unquote(urlparse(self.uri).path))

    @property
    def size(self) -> int:
        """Total byte size of the stream (position is preserved)"""
        position = self.stream.tell()
        self.stream.seek(0, os.SEEK_END)
        size = self.stream.tell()
        self.stream.seek(position)
        return size

    def peek(self, num_bytes: int) -> bytes:
        """Read the first bytes without moving the stream position"""
        position = self.stream.tell()
        self.stream.seek(0)
        head = self.stream.read(num_bytes)
        self.stream.seek(position)
        return head

    def rewind(self) -> BinaryIO:
        """Seek back to the start and return the stream for reading"""
        self.stream.seek(0)
        return self.stream

    @property
    def closed(self) -> bool:
        return self.stream.closed

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()

    def __enter__(self) -> "MediaSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MediaSource(uri={self.uri!r})"


def open_media_source(
    source: Union[str, Path, MediaSource],
    timeout: Optional[float] = None,
) -> MediaSource:
    """Return `source` unchanged if already open, otherwise open it"""
    if isinstance(source, MediaSource):
        return source
    return MediaSource.open(source, timeout=timeout or SOURCE_DOWNLOAD_TIMEOUT)
