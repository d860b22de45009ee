"""
Exceptions raised by the GitHub API client.

Every non-2xx response is converted into a GitHubAPIError subclass chosen by
status code, so callers can catch NotFoundError or RateLimitExceededError
without inspecting raw responses.
"""

from typing import Dict, Optional, Type

import httpx


class GitHubAPIError(Exception):
    """Raised when the GitHub API returns a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    @property
    def documentation_url(self) -> Optional[str]:
        """Documentation link GitHub attaches to error bodies, if any."""
        body = _json_body(self.response)
        return body.get("documentation_url") if body else None


class GitHubConnectionError(GitHubAPIError):
    """Raised when the request never produced a response."""

    pass


class ClientError(GitHubAPIError):
    """Raised on 4xx responses without a more specific class."""

    pass


class BadRequestError(ClientError):
    pass


class UnauthorizedError(ClientError):
    pass


class ForbiddenError(ClientError):
    pass


class RateLimitExceededError(ClientError):
    """Raised on 429, or on 403 once the rate limit is exhausted."""

    pass


class NotFoundError(ClientError):
    pass


class ConflictError(ClientError):
    pass


class UnprocessableEntityError(ClientError):
    pass


class ServerError(GitHubAPIError):
    """Raised on 5xx responses."""

    pass


class WorkflowRunTimeoutError(Exception):
    """Raised when a workflow run does not complete in time."""

    pass


_STATUS_ERRORS: Dict[int, Type[GitHubAPIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitExceededError,
}


def _json_body(response: Optional[httpx.Response]) -> Optional[dict]:
    if response is None or not response.content:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def error_class_for(response: httpx.Response) -> Type[GitHubAPIError]:
    """Pick the exception class for an unsuccessful response."""
    status = response.status_code

    if status == 403 and response.headers.get("x-ratelimit-remaining") == "0":
        return RateLimitExceededError
    if status in _STATUS_ERRORS:
        return _STATUS_ERRORS[status]
    if 400 <= status < 500:
        return ClientError
    if status >= 500:
        return ServerError
    return GitHubAPIError


def error_from_response(response: httpx.Response) -> GitHubAPIError:
    """Build the exception for an unsuccessful response.

    Args:
        response: HTTP response with a non-2xx status

    Returns:
        GitHubAPIError subclass instance carrying the response
    """
    body = _json_body(response)
    detail = body.get("message") if body and body.get("message") else response.text
    message = f"GitHub API request failed (status {response.status_code}): {detail}"

    error_class = error_class_for(response)
    return error_class(message, status_code=response.status_code, response=response)
