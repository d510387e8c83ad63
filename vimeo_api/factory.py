"""
Client Factory

Factory pattern for creating Vimeo clients.
Automatically configures from environment variables.
"""

import logging
from typing import Literal

from vimeo_api.client.vimeo_client import VimeoClient
from vimeo_api.config import settings
from vimeo_api.implementations.mock_session import MockSession
from vimeo_api.implementations.mock_uploader import MockUploader
from vimeo_api.implementations.tus_uploader import TusUploader

# Type alias
ClientMode = Literal["auto", "vimeo", "mock"]


class ClientFactory:
    """
    Factory for creating Vimeo clients.

    Reads configuration from environment variables:
    - VIMEO_CLIENT_ID: Application client identifier
    - VIMEO_CLIENT_SECRET: Application client secret
    - VIMEO_ACCESS_TOKEN: Access token (optional)
    - VIMEO_API_HOSTNAME: API host (default: api.vimeo.com)

    Usage:
        # Auto-detect from environment
        client = ClientFactory.create_client()

        # Force mock for testing
        client = ClientFactory.create_client(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_client(cls, mode: ClientMode = "auto") -> VimeoClient:
        """
        Create a client instance.

        Args:
            mode: "auto" (from env), "vimeo" (force real), "mock" (force offline)

        Returns:
            Configured VimeoClient

        Raises:
            RuntimeError: If mode="vimeo" but credentials not available
        """
        if mode == "mock":
            cls._logger.info("Creating mock Vimeo client (forced)")
            return cls._create_mock_client()

        if mode == "vimeo":
            try:
                client = cls._create_vimeo_client()
                cls._logger.info("Creating Vimeo client (forced)")
                return client
            except ValueError as e:
                raise RuntimeError(
                    f"Vimeo client requested but not available: {e}"
                ) from e

        # mode == "auto" - try real credentials first, fall back to mock
        try:
            client = cls._create_vimeo_client()
            cls._logger.info("Creating Vimeo client (auto-detected)")
            return client
        except ValueError as e:
            cls._logger.warning(f"Vimeo credentials not available ({e}), using mock client")
            return cls._create_mock_client()

    @classmethod
    def _create_vimeo_client(cls) -> VimeoClient:
        """
        Create a client from environment configuration.

        Raises:
            ValueError: If neither an access token nor a client id/secret
                pair is configured
        """
        client_id = settings.VIMEO_CLIENT_ID
        client_secret = settings.VIMEO_CLIENT_SECRET
        access_token = settings.VIMEO_ACCESS_TOKEN

        if not access_token and not (client_id and client_secret):
            raise ValueError(
                "VIMEO_ACCESS_TOKEN or VIMEO_CLIENT_ID/VIMEO_CLIENT_SECRET not set. "
                "Add them to .env: VIMEO_ACCESS_TOKEN=your-token"
            )

        return VimeoClient(
            client_id,
            client_secret,
            access_token or None,
            uploader=TusUploader(chunk_size=settings.VIMEO_UPLOAD_CHUNK_SIZE),
            timeout=settings.VIMEO_HTTP_TIMEOUT,
            hostname=settings.VIMEO_API_HOSTNAME,
        )

    @classmethod
    def _create_mock_client(cls) -> VimeoClient:
        return VimeoClient(
            "mock_client_id",
            "mock_client_secret",
            "mock_access_token",
            session=MockSession(),
            uploader=MockUploader(),
        )

    @classmethod
    def is_vimeo_available(cls) -> bool:
        """True if real credentials are configured"""
        try:
            cls._create_vimeo_client()
            return True
        except ValueError:
            return False


# Convenience function for quick creation
def create_client(force_mock: bool = False) -> VimeoClient:
    """
    Quick client creation with simple mock override.

    Example:
        client = create_client()
        client = create_client(force_mock=True)  # Testing
    """
    mode = "mock" if force_mock else "auto"
    return ClientFactory.create_client(mode=mode)
