"""
GitHub API client for making authenticated requests.
Supports both personal access tokens and GitHub App installation tokens.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import httpx

from ghactions.auth.installation_token_manager import InstallationTokenManager
from ghactions.config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_CONNECT_TIMEOUT,
    GITHUB_INSTALLATION_ID,
    GITHUB_PER_PAGE,
    GITHUB_REQUEST_TIMEOUT,
    GITHUB_TOKEN,
    GITHUB_USER_AGENT,
)
from ghactions.errors import GitHubConnectionError, NotFoundError, error_from_response
from ghactions.models.types import RateLimit

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class GitHubAPIClient:
    """Base client for GitHub API interactions with dual-mode authentication."""

    DEFAULT_ACCEPT = "application/vnd.github+json"

    def __init__(
        self,
        token: Optional[str] = None,
        installation_id: Optional[int] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        per_page: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        token_manager: Optional[InstallationTokenManager] = None,
    ):
        """Initialize GitHub API client.

        Args:
            token: Personal access token (defaults to config)
            installation_id: GitHub App installation ID; when set, requests use
                installation tokens instead of ``token``
            base_url: API root, e.g. a GitHub Enterprise ``/api/v3`` URL (defaults to config)
            api_version: Value of the X-GitHub-Api-Version header (defaults to config)
            per_page: Default page size for ``paginate`` (defaults to config)
            timeout: Request timeout in seconds (defaults to config)
            transport: Optional httpx transport, used by tests
            token_manager: Installation token manager (created on demand)
        """
        self.token = token or GITHUB_TOKEN
        if installation_id is None and not self.token:
            installation_id = GITHUB_INSTALLATION_ID
        self.installation_id = installation_id
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self.api_version = api_version or GITHUB_API_VERSION
        self.per_page = per_page or GITHUB_PER_PAGE
        self.timeout = timeout or GITHUB_REQUEST_TIMEOUT
        self._transport = transport
        self._installation_token_manager = token_manager
        self.last_response: Optional[httpx.Response] = None

        if self.installation_id:
            if self._installation_token_manager is None:
                self._installation_token_manager = InstallationTokenManager(
                    base_url=self.base_url, transport=transport
                )
            logger.info(f"GitHub API client initialized with installation ID: {self.installation_id}")
        elif not self.token:
            logger.warning("GitHub API client initialized without credentials - only public data is reachable")

    async def _get_token(self) -> Optional[str]:
        """Get authentication token (installation token or personal access token)."""
        if self.installation_id and self._installation_token_manager:
            return await self._installation_token_manager.get_installation_token(self.installation_id)
        return self.token

    async def _get_headers(self, accept: Optional[str] = None) -> Dict[str, str]:
        token = await self._get_token()
        headers = {
            "Accept": accept or self.DEFAULT_ACCEPT,
            "X-GitHub-Api-Version": self.api_version,
            "User-Agent": GITHUB_USER_AGENT,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Drop unset options and convert values to their query string form."""
        if not params:
            return None

        cleaned: Dict[str, Any] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, bool):
                value = "true" if value else "false"
            cleaned[key] = value
        return cleaned or None

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        accept: Optional[str] = None,
    ) -> Any:
        """Make a GitHub API request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: API path relative to the base URL, or an absolute URL
            data: Request body data, sent as JSON
            params: Query parameters; None values are dropped
            accept: Accept header override

        Returns:
            Decoded response body: parsed JSON, text, raw bytes, or {} when empty

        Raises:
            GitHubAPIError: If the response status is not 2xx
            GitHubConnectionError: If the request fails before a response arrives
            ValueError: If the HTTP method is unsupported
        """
        method_upper = method.upper()
        if method_upper not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self._build_url(path)
        headers = await self._get_headers(accept)

        try:
            response = await self._execute_http_request(
                method_upper, url, headers, data, self._clean_params(params)
            )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise GitHubConnectionError(error_msg) from e

        self.last_response = response
        return self._process_response(response, method_upper, url)

    async def _execute_http_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
    ) -> httpx.Response:
        timeout_config = httpx.Timeout(self.timeout, connect=GITHUB_CONNECT_TIMEOUT)

        # Artifact and log downloads answer with a redirect to blob storage
        async with httpx.AsyncClient(
            timeout=timeout_config,
            trust_env=False,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            return await client.request(method, url, headers=headers, params=params, json=data)

    def _process_response(self, response: httpx.Response, method: str, url: str) -> Any:
        """Decode a successful response or raise the matching GitHubAPIError."""
        if response.is_success:
            logger.info(
                f"GitHub API {method} request to {url} "
                f"successful (status: {response.status_code})"
            )
            return self._decode_body(response)

        error = error_from_response(response)
        logger.error(f"GitHub API {method} request to {url} failed: {error.message}")
        raise error

    @staticmethod
    def _decode_body(response: httpx.Response) -> Union[Dict[str, Any], List[Any], str, bytes]:
        if not response.content:
            return {}

        content_type = response.headers.get("content-type", "").lower()
        if "json" in content_type:
            try:
                return response.json()
            except ValueError:
                return response.text
        if content_type.startswith("text/"):
            return response.text
        return response.content

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, data=data)

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("PUT", path, data=data)

    async def patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("PATCH", path, data=data)

    async def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("DELETE", path, params=params)

    async def boolean_from_response(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Make a request and report success as a boolean.

        Returns:
            True for any 2xx status, False for 404

        Raises:
            GitHubAPIError: For any other unsuccessful status
        """
        try:
            await self.request(method, path, data=data, params=params)
        except NotFoundError:
            return False
        return True

    async def paginate(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        key: Optional[str] = None,
        max_pages: Optional[int] = None,
    ) -> Any:
        """Fetch every page of a list endpoint by following ``rel="next"`` links.

        Args:
            path: API path of the first page
            params: Query parameters for the first page
            key: Name of the list inside wrapped responses such as
                ``{"total_count": 2, "workflow_runs": [...]}``; detected when omitted
            max_pages: Stop after this many pages

        Returns:
            The first page with the items of all later pages appended
        """
        params = dict(params or {})
        if self.per_page and "per_page" not in params:
            params["per_page"] = self.per_page

        data = await self.get(path, params=params)
        pages = 1
        next_url = self._next_page_url()

        while next_url and (max_pages is None or pages < max_pages):
            # The next link already carries the query string
            page = await self.get(next_url)
            pages += 1
            data = self._merge_page(data, page, key)
            next_url = self._next_page_url()

        logger.debug(f"Fetched {pages} page(s) from {path}")
        return data

    def _next_page_url(self) -> Optional[str]:
        if self.last_response is None:
            return None
        return self.last_response.links.get("next", {}).get("url")

    @staticmethod
    def _merge_page(data: Any, page: Any, key: Optional[str]) -> Any:
        if isinstance(data, list) and isinstance(page, list):
            data.extend(page)
            return data

        if isinstance(data, dict) and isinstance(page, dict):
            if key is None:
                key = next((k for k, v in data.items() if isinstance(v, list)), None)
            if key is not None:
                data.setdefault(key, []).extend(page.get(key) or [])
                return data

        logger.warning("Cannot merge paginated responses of different shapes; keeping the first page")
        return data

    @property
    def rate_limit(self) -> RateLimit:
        """Rate limit reported by the most recent response."""
        if self.last_response is None:
            return RateLimit()
        return RateLimit.from_headers(self.last_response.headers)

    async def get_rate_limit(self) -> RateLimit:
        """Fetch the current rate limit; this call does not count against it."""
        await self.get("rate_limit")
        return self.rate_limit
