"""
Test Configuration and Fixtures

Shared pytest fixtures for the Vimeo client tests.
Nothing here talks to the network: HTTP goes through MockSession and
byte transfer through MockUploader.

To use pytest:
    pip install -e ".[test]"
    pytest tests/
"""

import pytest

from vimeo_api.client.vimeo_client import VimeoClient
from vimeo_api.implementations.mock_session import MockSession
from vimeo_api.implementations.mock_uploader import MockUploader

VIDEO_BYTES = b"fake video data" * 1000  # 15 KB


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def mock_session():
    """Fresh MockSession for each test"""
    return MockSession()


@pytest.fixture
def mock_uploader():
    """MockUploader with small chunks so progress fires several times"""
    return MockUploader(chunk_size=4096)


@pytest.fixture
def client(mock_session, mock_uploader):
    """
    VimeoClient with id, secret and token, wired to the mocks.

    Usage:
        def test_something(client, mock_session):
            client.request("/me")
            assert mock_session.get_last_request()["path"] == "/me"
    """
    return VimeoClient(
        "id",
        "secret",
        "token",
        session=mock_session,
        uploader=mock_uploader,
    )


@pytest.fixture
def app_client(mock_session, mock_uploader):
    """VimeoClient without an access token (client credentials only)"""
    return VimeoClient(
        "id",
        "secret",
        session=mock_session,
        uploader=mock_uploader,
    )


# =============================================================================
# FILE FIXTURES
# =============================================================================


@pytest.fixture
def temp_video_file(tmp_path):
    """
    Create a small fake video file.

    Returns:
        Path to the file (as str, like callers pass it)
    """
    video_path = tmp_path / "test_video.mp4"
    video_path.write_bytes(VIDEO_BYTES)
    return str(video_path)


@pytest.fixture
def video_size():
    """Size in bytes of temp_video_file"""
    return len(VIDEO_BYTES)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
