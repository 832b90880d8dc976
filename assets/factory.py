"""
Upload Factory

Factory pattern for creating a wired UploadOrchestrator.
Automatically configures from config.settings (environment variables).
"""

import logging
from typing import Literal, Optional

from assets.auth.token_manager import AccessTokenManager
from assets.controllers.upload_orchestrator import UploadOrchestrator
from assets.implementations.mock_transport import MockTransport
from assets.implementations.requests_transport import RequestsTransport
from assets.interfaces.clock_interface import ClockInterface
from assets.interfaces.transport_interface import HttpTransportInterface
from config.settings import (
    ASSET_POLL_INTERVAL,
    ASSET_POLL_TIMEOUT,
    LINKEDIN_ACCESS_TOKEN,
    LINKEDIN_TOKEN_PATH,
)

# Type alias
TransportMode = Literal["auto", "linkedin", "mock"]


class AssetUploaderFactory:
    """
    Factory for creating upload orchestrators.

    Reads configuration from environment variables:
    - LINKEDIN_ACCESS_TOKEN: Inline bearer token
    - LINKEDIN_TOKEN_PATH: Token file used when no inline token is set
    - ASSET_POLL_INTERVAL / ASSET_POLL_TIMEOUT: Polling behaviour

    Usage:
        # Auto-detect from environment
        orchestrator = AssetUploaderFactory.create_orchestrator()

        # Force mock for testing
        orchestrator = AssetUploaderFactory.create_orchestrator(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_orchestrator(
        cls,
        mode: TransportMode = "auto",
        poll_interval: float = ASSET_POLL_INTERVAL,
        poll_timeout: float = ASSET_POLL_TIMEOUT,
        clock: Optional[ClockInterface] = None,
    ) -> UploadOrchestrator:
        """
        Create an orchestrator.

        Args:
            mode: "auto" (from env), "linkedin" (force real), "mock" (force sim)
            poll_interval: Sleep between status polls (seconds)
            poll_timeout: Overall polling budget (seconds)
            clock: Time source override

        Raises:
            RuntimeError: If mode="linkedin" but no usable token is configured
        """
        transport = cls.create_transport(mode)
        return UploadOrchestrator(
            transport=transport,
            poll_interval=poll_interval,
            poll_timeout=poll_timeout,
            clock=clock,
        )

    @classmethod
    def create_transport(cls, mode: TransportMode = "auto") -> HttpTransportInterface:
        """Create the HTTP transport for the given mode"""
        if mode == "mock":
            cls._logger.info("Creating Mock Transport (forced)")
            return MockTransport()

        if mode == "linkedin":
            try:
                transport = cls._create_linkedin_transport()
                cls._logger.info("Creating LinkedIn Transport (forced)")
                return transport
            except Exception as e:
                raise RuntimeError(
                    f"LinkedIn transport requested but not available: {e}",
                ) from e

        # mode == "auto" - try LinkedIn first, fall back to mock
        try:
            transport = cls._create_linkedin_transport()
            cls._logger.info("Creating LinkedIn Transport (auto-detected)")
            return transport
        except Exception as e:
            cls._logger.warning(
                f"LinkedIn transport not available ({e}), using Mock Transport",
            )
            return MockTransport()

    @classmethod
    def _create_linkedin_transport(cls) -> RequestsTransport:
        """
        Create an authenticated transport from environment configuration.

        Raises:
            RuntimeError: If no token is configured or it has expired
        """
        token_manager = AccessTokenManager(
            access_token=LINKEDIN_ACCESS_TOKEN,
            token_path=LINKEDIN_TOKEN_PATH,
        )
        return RequestsTransport(access_token=token_manager.get_access_token())

    @classmethod
    def is_linkedin_available(cls) -> bool:
        """
        Check if a real transport can be created.

        Returns:
            True if a usable access token is configured
        """
        try:
            cls._create_linkedin_transport()
            return True
        except Exception:
            return False


# Convenience function for quick creation
def create_orchestrator(force_mock: bool = False) -> UploadOrchestrator:
    """
    Quick orchestrator creation with simple mock override.

    Example:
        orchestrator = create_orchestrator()
        orchestrator = create_orchestrator(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return AssetUploaderFactory.create_orchestrator(mode=mode)
