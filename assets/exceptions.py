"""
Upload Exceptions

Every upload failure derives from UploadFailed so callers can catch one type
and still tell the phases apart through the subclass or the `phase` attribute.

Network errors from the HTTP transport are not wrapped here; they reach the
caller as requests exceptions.
"""

from typing import Optional

from assets.constants import UploadPhase


class UploadFailed(Exception):
    """
    Exception raised when an asset upload cannot complete.

    Raised directly for a non-success response to the byte transfer.
    """

    default_phase = UploadPhase.TRANSFER

    def __init__(
        self,
        message: str = "Asset upload failed",
        phase: Optional[UploadPhase] = None,
        status_code: Optional[int] = None,
        asset_entity: Optional[str] = None,
    ):
        super().__init__(message)
        self.phase = phase or self.default_phase
        self.status_code = status_code
        self.asset_entity = asset_entity


class UploadRegistrationFailed(UploadFailed):
    """Registration endpoint refused the request or answered with garbage"""

    default_phase = UploadPhase.REGISTRATION


class UploadStatusError(UploadFailed):
    """Status endpoint refused the request or answered with garbage"""

    default_phase = UploadPhase.POLL


class UploadTimeout(UploadFailed):
    """Poll budget elapsed before the asset reached a terminal state"""

    default_phase = UploadPhase.POLL


class UploadIncomplete(UploadFailed):
    """Platform reported INCOMPLETE (partial or corrupt upload)"""

    default_phase = UploadPhase.POLL


class UploadClientError(UploadFailed):
    """Platform reported CLIENT_ERROR (request itself rejected)"""

    default_phase = UploadPhase.POLL


class ResponseDecodeError(ValueError):
    """
    A platform response could not be decoded into the expected structure.

    Raised by the model decoders; the component owning the phase wraps it
    into the matching UploadFailed subclass.
    """
