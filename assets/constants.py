"""
Asset Constants

Centralized configuration for the LinkedIn Assets upload module.
Protocol values here are fixed by the platform; tunable values live in
config/settings.py.
"""

from enum import Enum

# =============================================================================
# ASSETS API CONFIGURATION
# =============================================================================

# Registration endpoint, relative to API URL + version
# https://learn.microsoft.com/en-us/linkedin/marketing/integrations/community-management/shares/vector-asset-api
REGISTER_UPLOAD_PATH = "/assets?action=registerUpload"

# Status endpoint, formatted with the numeric asset id
ASSET_STATUS_PATH = "/assets/{asset_id}"

# Mechanism key inside value.uploadMechanism of the registration response
UPLOAD_MECHANISM = "com.linkedin.digitalmedia.uploading.MediaUploadHttpRequest"

# Recipe URN, formatted with the asset type ("image", "video")
RECIPE_URN_FORMAT = "urn:li:digitalmediaRecipe:feedshare-{asset_type}"

# Ownership relationship declared on every registration
SERVICE_RELATIONSHIP_IDENTIFIER = "urn:li:userGeneratedContent"
SERVICE_RELATIONSHIP_TYPE = "OWNER"

# Content type for JSON API calls
JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

DEFAULT_ASSET_TYPE = "image"

# Transfer timeout and overall poll budget (seconds)
DEFAULT_TIMEOUT_SECONDS = 300

# Sleep between status polls (seconds)
POLL_SLEEP_SECONDS = 5

# Used when neither the extension table nor byte sniffing identifies the media
FALLBACK_CONTENT_TYPE = "application/octet-stream"

# Bytes needed by the content sniffer to recognize every supported signature
SNIFF_HEADER_BYTES = 261

# =============================================================================
# HTTP HEADERS
# =============================================================================

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_ACCEPT = "Accept"
HEADER_SSE = "x-amz-server-side-encryption"
HEADER_SSE_KMS_KEY_ID = "x-amz-server-side-encryption-aws-kms-key-id"

# =============================================================================
# ASSET STATUS
# =============================================================================


class AssetStatus(Enum):
    """Processing states reported by the status endpoint"""

    WAITING_UPLOAD = "WAITING_UPLOAD"
    PROCESSING = "PROCESSING"
    INCOMPLETE = "INCOMPLETE"
    CLIENT_ERROR = "CLIENT_ERROR"
    AVAILABLE = "AVAILABLE"


# States after which the poller keeps waiting
PENDING_STATUSES = (AssetStatus.WAITING_UPLOAD, AssetStatus.PROCESSING)


class UploadPhase(Enum):
    """Which step of the three-phase upload an error came from"""

    REGISTRATION = "registration"
    TRANSFER = "transfer"
    POLL = "poll"
