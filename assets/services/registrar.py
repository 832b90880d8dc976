"""
Upload Registrar

Reserves an upload slot with the registerUpload action and decodes the
asset entity and upload destination from the response.
"""

import logging
from typing import Any, Dict, Tuple

from assets.constants import (
    DEFAULT_ASSET_TYPE,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    RECIPE_URN_FORMAT,
    REGISTER_UPLOAD_PATH,
    SERVICE_RELATIONSHIP_IDENTIFIER,
    SERVICE_RELATIONSHIP_TYPE,
)
from assets.exceptions import UploadRegistrationFailed
from assets.interfaces.transport_interface import HttpTransportInterface
from assets.models.asset import RegisteredUpload, UploadDestination
from config.settings import HTTP_TIMEOUT


def build_register_upload_body(owner: str, asset_type: str) -> Dict[str, Any]:
    """
    Build the registerUpload request body.

    Example:
        build_register_upload_body("urn:li:person:abc", "video")
        # {"registerUploadRequest": {"owner": "urn:li:person:abc",
        #   "recipes": ["urn:li:digitalmediaRecipe:feedshare-video"], ...}}
    """
    return {
        "registerUploadRequest": {
            "owner": owner,
            "recipes": [RECIPE_URN_FORMAT.format(asset_type=asset_type)],
            "serviceRelationships": [
                {
                    "identifier": SERVICE_RELATIONSHIP_IDENTIFIER,
                    "relationshipType": SERVICE_RELATIONSHIP_TYPE,
                },
            ],
        },
    }


class UploadRegistrar:
    """
    Calls the registration endpoint.

    No retry at this layer: any failure is final for the upload attempt.
    """

    def __init__(
        self,
        transport: HttpTransportInterface,
        api_base: str,
        timeout: float = HTTP_TIMEOUT,
    ):
        """
        Initialize registrar.

        Args:
            transport: Authenticated HTTP transport
            api_base: API URL including version, e.g. "https://api.linkedin.com/v2"
            timeout: Request timeout (seconds)
        """
        self.logger = logging.getLogger(__name__)
        self.transport = transport
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}{REGISTER_UPLOAD_PATH}"

    def register(
        self,
        owner: str,
        asset_type: str = DEFAULT_ASSET_TYPE,
    ) -> Tuple[str, UploadDestination]:
        """
        Register an upload slot.

        Args:
            owner: Owner URN
            asset_type: Recipe suffix ("image", "video")

        Returns:
            (asset entity URN, upload destination)

        Raises:
            UploadRegistrationFailed: Non-success status or malformed response
        """
        self.logger.info(f"Registering {asset_type} upload for {owner}")

        response = self.transport.post(
            self.endpoint,
            headers={
                HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
                HEADER_ACCEPT: JSON_CONTENT_TYPE,
            },
            json=build_register_upload_body(owner, asset_type),
            timeout=self.timeout,
        )

        if not response.ok:
            raise UploadRegistrationFailed(
                f"Upload registration failed: HTTP {response.status_code} "
                f"{response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            registered = RegisteredUpload.from_dict(response.json())
        except ValueError as e:  # invalid JSON or ResponseDecodeError
            raise UploadRegistrationFailed(
                f"Malformed registration response: {e}",
                status_code=response.status_code,
            ) from e

        self.logger.info(
            f"Registered asset {registered.asset_entity} "
            f"(signed headers: {registered.destination.has_headers})",
        )
        return registered.as_tuple()
