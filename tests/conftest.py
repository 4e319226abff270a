"""
Pytest configuration and fixtures for fontident tests.
"""

from unittest.mock import Mock

import pytest

from fontident.core.config import ReleaseClientConfig
from fontident.fonts import FontDescriptor, StyleKind, WeightScale
from fontident.releases import ReleaseClient


@pytest.fixture
def arial_bold():
    """Create a bold Arial descriptor."""
    return FontDescriptor(
        "rbxasset://fonts/families/Arial.json", WeightScale.BOLD, StyleKind.NORMAL
    )


@pytest.fixture
def italic_descriptor():
    """Create an extra bold italic descriptor."""
    return FontDescriptor("Test", WeightScale.EXTRA_BOLD, StyleKind.ITALIC)


@pytest.fixture
def release_config():
    """Release client configuration that never reads the environment."""
    return ReleaseClientConfig(
        _env_file=None,
        owner="test-owner",
        repo="test-repo",
        api_url="https://api.example.com",
        show_progress=False,
        chunk_size=4,
    )


@pytest.fixture
def sample_releases_payload():
    """Release API payload with two releases."""
    return [
        {
            "id": 2,
            "url": "https://api.example.com/repos/test-owner/test-repo/releases/2",
            "tag_name": "v0.2.0",
            "name": "0.2.0",
            "body": "Second release",
            "draft": False,
            "prerelease": True,
            "html_url": "https://example.com/releases/v0.2.0",
            "assets": [],
        },
        {
            "id": 1,
            "url": "https://api.example.com/repos/test-owner/test-repo/releases/1",
            "tag_name": "v0.1.0",
            "name": "0.1.0",
            "body": None,
            "draft": False,
            "prerelease": False,
            "assets": [
                {
                    "id": 10,
                    "url": "https://api.example.com/repos/test-owner/test-repo/releases/assets/10",
                    "name": "fontident-0.1.0-linux.zip",
                    "label": None,
                    "content_type": "application/zip",
                    "size": 11,
                },
                {
                    "id": 11,
                    "url": "https://api.example.com/repos/test-owner/test-repo/releases/assets/11",
                    "name": None,
                    "label": "unnamed",
                    "content_type": "application/octet-stream",
                    "size": 0,
                },
            ],
        },
    ]


@pytest.fixture
def mock_session(sample_releases_payload):
    """Mock requests session answering release and asset requests."""
    session = Mock()

    def get(url, **kwargs):
        response = Mock()
        response.raise_for_status.return_value = None
        if url.endswith("/releases"):
            response.json.return_value = sample_releases_payload
        else:
            response.headers = {"content-length": "11"}
            response.iter_content.return_value = [b"font", b"", b"data", b"!!!"]
        return response

    session.get.side_effect = get
    return session


@pytest.fixture
def release_client(release_config, mock_session):
    """Release client with its HTTP session replaced by a mock."""
    client = ReleaseClient(release_config)
    client.session = mock_session
    return client
