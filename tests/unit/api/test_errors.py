"""Tests for response to exception mapping."""

import httpx
import pytest

from ghactions.errors import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    GitHubAPIError,
    NotFoundError,
    RateLimitExceededError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
    error_from_response,
)


class TestErrorFromResponse:
    """Test error_from_response status mapping."""

    @pytest.mark.parametrize(
        "status, error_class",
        [
            (400, BadRequestError),
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ConflictError),
            (410, ClientError),
            (422, UnprocessableEntityError),
            (429, RateLimitExceededError),
            (500, ServerError),
            (503, ServerError),
        ],
    )
    def test_status_mapping(self, status, error_class):
        error = error_from_response(httpx.Response(status, json={"message": "boom"}))

        assert type(error) is error_class
        assert isinstance(error, GitHubAPIError)
        assert error.status_code == status

    def test_forbidden_with_exhausted_rate_limit(self):
        response = httpx.Response(403, json={"message": "API rate limit exceeded"}, headers={"X-RateLimit-Remaining": "0"})

        error = error_from_response(response)

        assert isinstance(error, RateLimitExceededError)
        assert not isinstance(error, ForbiddenError)
        assert isinstance(error, ClientError)

    def test_too_many_requests_is_not_forbidden(self):
        error = error_from_response(httpx.Response(429, json={"message": "You have exceeded a secondary rate limit"}))

        assert isinstance(error, RateLimitExceededError)
        assert isinstance(error, ClientError)
        assert not isinstance(error, ForbiddenError)

    def test_constructor_keywords(self):
        error = GitHubAPIError("boom", status_code=418)

        assert error.message == "boom"
        assert error.status_code == 418
        assert error.response is None

    def test_message_uses_github_message(self):
        response = httpx.Response(
            404,
            json={"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
        )

        error = error_from_response(response)

        assert error.message == "GitHub API request failed (status 404): Not Found"
        assert error.documentation_url == "https://docs.github.com/rest"
        assert error.response is response

    def test_message_falls_back_to_text(self):
        error = error_from_response(httpx.Response(500, text="upstream timeout"))

        assert str(error) == "GitHub API request failed (status 500): upstream timeout"
        assert error.documentation_url is None
