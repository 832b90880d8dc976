"""
Asset Models

Data classes for the values exchanged during an upload. Decoders are
non-strict: unknown fields are ignored, missing required fields raise
ResponseDecodeError.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from assets.constants import (
    DEFAULT_ASSET_TYPE,
    UPLOAD_MECHANISM,
    AssetStatus,
)
from assets.exceptions import ResponseDecodeError
from assets.models.media_source import MediaSource


def asset_id_from_entity(asset_entity: str) -> str:
    """
    Extract the numeric id from an asset URN.

    Example:
        asset_id_from_entity("urn:li:digitalmediaAsset:123")  # "123"
    """
    return asset_entity.split(":")[-1]


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ResponseDecodeError(f"Expected an object at {where}")
    return value


def _require_str(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value:
        raise ResponseDecodeError(f"Expected a non-empty string at {where}")
    return value


def _normalize_key(key: str) -> str:
    return key.lower().replace("-", "_")


@dataclass(frozen=True)
class UploadHeaders:
    """
    Provider-specific headers the pre-signed destination expects.

    Keys arrive either as HTTP header names ("Content-Type") or in snake
    case ("content_type"); both are accepted.
    """

    content_type: Optional[str] = None
    x_amz_server_side_encryption: Optional[str] = None
    x_amz_server_side_encryption_aws_kms_key_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional["UploadHeaders"]:
        """Decode a headers block; None when absent or empty"""
        if data is None:
            return None
        block = _require_mapping(data, "uploadMechanism.headers")
        if not block:
            return None

        normalized = {_normalize_key(str(key)): value for key, value in block.items()}
        return cls(
            content_type=normalized.get("content_type"),
            x_amz_server_side_encryption=normalized.get(
                "x_amz_server_side_encryption",
            ),
            x_amz_server_side_encryption_aws_kms_key_id=normalized.get(
                "x_amz_server_side_encryption_aws_kms_key_id",
            ),
        )


@dataclass(frozen=True)
class UploadDestination:
    """
    Where and how to transfer the bytes.

    Produced once by registration and consumed once by the transfer.
    """

    upload_url: str
    headers: Optional[UploadHeaders] = None

    @property
    def has_headers(self) -> bool:
        """True when the destination expects provider-specific headers"""
        return self.headers is not None


@dataclass(frozen=True)
class RegisteredUpload:
    """Decoded registerUpload response"""

    asset_entity: str
    destination: UploadDestination

    @classmethod
    def from_dict(cls, payload: Any) -> "RegisteredUpload":
        """
        Decode the registration response body.

        Raises:
            ResponseDecodeError: If asset or upload URL are missing
        """
        root = _require_mapping(payload, "response")
        value = _require_mapping(root.get("value"), "value")
        asset_entity = _require_str(value.get("asset"), "value.asset")

        mechanisms = _require_mapping(
            value.get("uploadMechanism"),
            "value.uploadMechanism",
        )
        mechanism = _require_mapping(
            mechanisms.get(UPLOAD_MECHANISM),
            f"value.uploadMechanism[{UPLOAD_MECHANISM}]",
        )
        upload_url = _require_str(
            mechanism.get("uploadUrl", mechanism.get("upload_url")),
            "uploadMechanism.uploadUrl",
        )

        return cls(
            asset_entity=asset_entity,
            destination=UploadDestination(
                upload_url=upload_url,
                headers=UploadHeaders.from_dict(mechanism.get("headers")),
            ),
        )

    def as_tuple(self) -> Tuple[str, UploadDestination]:
        return self.asset_entity, self.destination


@dataclass(frozen=True)
class UploadRequest:
    """
    Caller input for a single upload.

    Attributes:
        owner: Owner URN, e.g. "urn:li:organization:5590506"
        source: URL, local path, or an open MediaSource
        asset_type: Recipe suffix, "image" or "video"
        timeout: Transfer timeout in seconds, None for the configured default
    """

    owner: str
    source: Union[str, MediaSource]
    asset_type: str = DEFAULT_ASSET_TYPE
    timeout: Optional[float] = None


@dataclass(frozen=True)
class RecipeStatus:
    """Processing state of one recipe of an asset"""

    status: Optional[str]
    recipe: Optional[str] = None


@dataclass
class AssetStatusResponse:
    """
    Decoded response of the status endpoint.

    Only the fields the uploader needs are modeled; the full body is kept
    in `raw`.
    """

    recipes: List[RecipeStatus]
    id: Optional[str] = None
    media_type_family: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def status(self) -> str:
        """Raw status string of the first recipe"""
        return self.recipes[0].status

    @property
    def asset_status(self) -> Optional[AssetStatus]:
        """First recipe status as AssetStatus, or None if unrecognized"""
        try:
            return AssetStatus(self.status)
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, payload: Any) -> "AssetStatusResponse":
        """
        Decode the status endpoint body.

        Only recipes[0].status is required. Any string is accepted there;
        values outside AssetStatus decode to an unrecognized status.

        Raises:
            ResponseDecodeError: If recipes[0].status is missing
        """
        root = _require_mapping(payload, "response")
        recipes_data = root.get("recipes")
        if not isinstance(recipes_data, list) or not recipes_data:
            raise ResponseDecodeError("Expected a non-empty list at recipes")

        first = _require_mapping(recipes_data[0], "recipes[0]")
        first_status = first.get("status")
        if not isinstance(first_status, str):
            raise ResponseDecodeError("Expected a string at recipes[0].status")

        recipes = [RecipeStatus(status=first_status, recipe=first.get("recipe"))]
        for item in recipes_data[1:]:
            if not isinstance(item, Mapping):
                continue
            status = item.get("status")
            recipes.append(
                RecipeStatus(
                    status=status if isinstance(status, str) else None,
                    recipe=item.get("recipe"),
                ),
            )

        return cls(
            recipes=recipes,
            id=root.get("id"),
            media_type_family=root.get("mediaTypeFamily"),
            raw=dict(root),
        )
