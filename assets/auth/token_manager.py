"""
Access Token Manager

Supplies the OAuth 2.0 bearer token for the LinkedIn API.

Sources, in order:
1. Token passed explicitly (or LINKEDIN_ACCESS_TOKEN from .env)
2. Token file (LINKEDIN_TOKEN_PATH): {"access_token": "...", "expires_at": 1767225600}

Tokens are obtained out of band (LinkedIn developer portal or an
authorization-code flow); this class only loads, checks and stores them.
"""

import json
import logging
import os
import time
from typing import Optional


class AccessTokenManager:
    """
    Manages the LinkedIn access token.

    This class:
    - Loads the token from the environment or token file
    - Tracks expiry (when known)
    - Saves tokens obtained elsewhere
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        token_path: Optional[str] = None,
    ):
        """
        Initialize token manager.

        Args:
            access_token: Inline token (takes precedence over the file)
            token_path: Path to the token JSON file

        Example:
            tokens = AccessTokenManager(token_path="credentials/linkedin_token.json")
            transport = RequestsTransport(access_token=tokens.get_access_token())
        """
        self.logger = logging.getLogger(__name__)
        self.token_path = token_path
        self.access_token: Optional[str] = access_token or None
        self.expires_at: Optional[float] = None

        if not self.access_token and token_path:
            self._load_token()

        self.logger.info(
            f"Access Token Manager initialized "
            f"(source: {'inline' if access_token else token_path})",
        )

    def _load_token(self) -> None:
        """
        Load the token file if present.

        Raises:
            RuntimeError: If the file exists but cannot be parsed
        """
        if not os.path.exists(self.token_path):
            self.logger.debug(f"Token file not found: {self.token_path}")
            return

        try:
            with open(self.token_path) as token_file:
                data = json.load(token_file)
        except (OSError, ValueError) as e:
            raise RuntimeError(
                f"Cannot read token file {self.token_path}: {e}",
            ) from e

        self.access_token = data.get("access_token") or None
        self.expires_at = data.get("expires_at")
        self.logger.debug("Access token loaded from token file")

    def save_token(self, access_token: str, expires_in: Optional[int] = None) -> None:
        """
        Store a new token in memory and in the token file.

        Args:
            access_token: Bearer token
            expires_in: Lifetime in seconds as returned by the token endpoint
        """
        self.access_token = access_token
        self.expires_at = time.time() + expires_in if expires_in else None

        if not self.token_path:
            return

        directory = os.path.dirname(self.token_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(self.token_path, "w") as token_file:
            json.dump(
                {"access_token": self.access_token, "expires_at": self.expires_at},
                token_file,
            )
        self.logger.info(f"Access token saved to: {self.token_path}")

    @property
    def expired(self) -> bool:
        return self.expires_at is not None and time.time() >= self.expires_at

    def get_access_token(self) -> str:
        """
        Get a usable access token.

        Raises:
            RuntimeError: If no token is configured or it has expired
        """
        if not self.access_token:
            raise RuntimeError(
                "No LinkedIn access token. Set LINKEDIN_ACCESS_TOKEN in .env "
                f"or create {self.token_path}",
            )

        if self.expired:
            raise RuntimeError(
                "LinkedIn access token expired. Obtain a new token and save it "
                f"to {self.token_path}",
            )

        return self.access_token

    def is_authenticated(self) -> bool:
        """
        Check if a valid token is available.

        Returns:
            True if a token is present and not expired
        """
        return bool(self.access_token) and not self.expired
