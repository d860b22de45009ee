"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ghactions import GitHubClient  # noqa: E402

API_URL = "https://api.github.com"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_transport():
    """Build a RecordingTransport from a request handler."""
    return RecordingTransport


@pytest.fixture
def make_client():
    """Build a token-authenticated GitHubClient served by a mock handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> GitHubClient:
        transport = RecordingTransport(handler)
        client = GitHubClient(token="test-token", base_url=API_URL, transport=transport, **kwargs)
        client.transport = transport
        return client

    return _make


@pytest.fixture(scope="session")
def rsa_private_key_pem() -> str:
    """RSA private key in PEM format for GitHub App JWT tests."""
    from cryptography.hazmat.primitives import serialization
    from cryptography.hazmat.primitives.asymmetric import rsa

    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
