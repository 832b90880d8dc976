"""
Models Package

Data classes for assets, destinations, status responses and media sources.
"""

from assets.models.asset import (
    AssetStatusResponse,
    RecipeStatus,
    RegisteredUpload,
    UploadDestination,
    UploadHeaders,
    UploadRequest,
    asset_id_from_entity,
)
from assets.models.media_source import MediaSource, open_media_source

__all__ = [
    "AssetStatusResponse",
    "MediaSource",
    "RecipeStatus",
    "RegisteredUpload",
    "UploadDestination",
    "UploadHeaders",
    "UploadRequest",
    "asset_id_from_entity",
    "open_media_source",
]
