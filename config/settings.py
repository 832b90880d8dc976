"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Secrets (access tokens) should be in .env, NOT here
- Import these settings in modules: from config.settings import LINKEDIN_API_URL
- Protocol constants fixed by the platform live in assets/constants.py
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# =============================================================================
# API CONFIGURATION
# =============================================================================

# Base URL and version prefix, joined as f"{LINKEDIN_API_URL}{LINKEDIN_API_VERSION}"
LINKEDIN_API_URL = os.getenv("LINKEDIN_API_URL", "https://api.linkedin.com")
LINKEDIN_API_VERSION = os.getenv("LINKEDIN_API_VERSION", "/v2")

# Rest.li protocol version header sent with every API call
RESTLI_PROTOCOL_VERSION = os.getenv("RESTLI_PROTOCOL_VERSION", "2.0.0")

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# Transfer timeout (seconds) - used for both connect and read
ASSET_UPLOAD_TIMEOUT = float(os.getenv("ASSET_UPLOAD_TIMEOUT", "300"))

# Overall budget for status polling (seconds), independent of the transfer
ASSET_POLL_TIMEOUT = float(os.getenv("ASSET_POLL_TIMEOUT", "300"))

# Sleep between status polls (seconds)
ASSET_POLL_INTERVAL = float(os.getenv("ASSET_POLL_INTERVAL", "5"))

# Timeout for registration and status API calls (seconds)
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Timeout for downloading URL sources before upload (seconds)
SOURCE_DOWNLOAD_TIMEOUT = float(os.getenv("SOURCE_DOWNLOAD_TIMEOUT", "60"))

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: These should NEVER be committed to version control!
# Create a .env file in the project root with these values

# Inline token wins over the token file
LINKEDIN_ACCESS_TOKEN = os.getenv("LINKEDIN_ACCESS_TOKEN", "")
LINKEDIN_TOKEN_PATH = os.getenv(
    "LINKEDIN_TOKEN_PATH",
    "credentials/linkedin_token.json",
)

# Default owner URN for the CLI (e.g. urn:li:organization:5590506)
LINKEDIN_OWNER = os.getenv("LINKEDIN_OWNER", "")
