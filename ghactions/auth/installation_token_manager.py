"""
GitHub App Installation Access Token Manager

Manages installation access tokens for GitHub App authentication.
Handles token generation, caching, and automatic refresh.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

import httpx

from ghactions.auth.jwt_generator import GitHubAppJWTGenerator
from ghactions.config import GITHUB_API_URL, GITHUB_API_VERSION, GITHUB_USER_AGENT
from ghactions.errors import GitHubConnectionError, error_from_response

logger = logging.getLogger(__name__)


@dataclass
class InstallationToken:
    """Represents a GitHub App installation access token."""

    token: str
    expires_at: str  # ISO 8601 format
    permissions: Dict[str, str] = field(default_factory=dict)
    repository_selection: str = "all"

    def is_expired(self, buffer_seconds: int = 300) -> bool:
        """
        Check if token is expired or will expire soon.

        Args:
            buffer_seconds: Consider token expired this many seconds before actual expiration

        Returns:
            True if token is expired, will expire within buffer, or has an unreadable expiry
        """
        try:
            expires_at = datetime.fromisoformat(self.expires_at.replace("Z", "+00:00"))
        except ValueError as e:
            logger.warning(f"Failed to parse token expiration: {e}")
            return True

        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        time_until_expiry = (expires_at - datetime.now(timezone.utc)).total_seconds()
        return time_until_expiry <= buffer_seconds


class InstallationTokenManager:
    """Manages GitHub App installation access tokens with caching."""

    def __init__(
        self,
        jwt_generator: Optional[GitHubAppJWTGenerator] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize installation token manager.

        Args:
            jwt_generator: JWT generator instance (creates new if not provided)
            base_url: API root (defaults to config)
            transport: Optional httpx transport, used by tests
        """
        self.jwt_generator = jwt_generator or GitHubAppJWTGenerator()
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self._transport = transport
        self._token_cache: Dict[int, InstallationToken] = {}
        self._cache_lock = asyncio.Lock()

    async def get_installation_token(self, installation_id: int) -> str:
        """
        Get installation access token for a GitHub App installation.

        Uses cached token if available and not expired, otherwise requests new token.

        Args:
            installation_id: GitHub App installation ID

        Returns:
            Installation access token as string
        """
        async with self._cache_lock:
            cached_token = self._token_cache.get(installation_id)

            if cached_token and not cached_token.is_expired():
                logger.debug(f"Using cached installation token for installation {installation_id}")
                return cached_token.token

            logger.info(f"Requesting new installation token for installation {installation_id}")
            token = await self._request_installation_token(installation_id)
            self._token_cache[installation_id] = token

            return token.token

    async def _request_installation_token(self, installation_id: int) -> InstallationToken:
        """
        Request a new installation access token from GitHub API.

        Raises:
            GitHubAPIError: If GitHub rejects the request
            GitHubConnectionError: If GitHub cannot be reached
        """
        jwt_token = self.jwt_generator.generate_jwt()

        url = f"{self.base_url}/app/installations/{installation_id}/access_tokens"
        headers = {
            "Authorization": f"Bearer {jwt_token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": GITHUB_USER_AGENT,
        }

        try:
            timeout_config = httpx.Timeout(30.0, connect=10.0)
            async with httpx.AsyncClient(
                timeout=timeout_config, trust_env=False, transport=self._transport
            ) as client:
                response = await client.post(url, headers=headers)
        except httpx.RequestError as e:
            error_msg = f"Network error requesting installation token: {e}"
            logger.error(error_msg)
            raise GitHubConnectionError(error_msg) from e

        if response.status_code != 201:
            error = error_from_response(response)
            logger.error(f"Failed to get installation token: {error.message}")
            raise error

        response_data = response.json()
        token = InstallationToken(
            token=response_data["token"],
            expires_at=response_data["expires_at"],
            permissions=response_data.get("permissions", {}),
            repository_selection=response_data.get("repository_selection", "all"),
        )
        logger.info(
            f"Obtained installation token for installation {installation_id} "
            f"(expires at {token.expires_at})"
        )
        return token

    def clear_cache(self, installation_id: Optional[int] = None) -> None:
        """
        Clear token cache.

        Args:
            installation_id: If provided, clear only this installation's token.
                           If None, clear all cached tokens.
        """
        if installation_id is not None:
            if self._token_cache.pop(installation_id, None) is not None:
                logger.info(f"Cleared cached token for installation {installation_id}")
        else:
            self._token_cache.clear()
            logger.info("Cleared all cached installation tokens")
