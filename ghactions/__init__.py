"""
ghactions - async client for the GitHub Actions REST API.

Main Components:
- GitHubClient: client exposing artifacts, secrets, workflows, jobs and runs
- GitHubAPIClient: client core (auth, verbs, errors, pagination)
- Repository: repository reference resolution
"""

from ghactions.api.client import GitHubAPIClient
from ghactions.client import GitHubClient
from ghactions.errors import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    GitHubAPIError,
    GitHubConnectionError,
    NotFoundError,
    RateLimitExceededError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
    WorkflowRunTimeoutError,
)
from ghactions.models.types import RateLimit, WorkflowConclusion, WorkflowStatus
from ghactions.repository import InvalidRepositoryError, Repository

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "GitHubAPIClient",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubConnectionError",
    "InvalidRepositoryError",
    "NotFoundError",
    "RateLimit",
    "RateLimitExceededError",
    "Repository",
    "ServerError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "WorkflowConclusion",
    "WorkflowRunTimeoutError",
    "WorkflowStatus",
]
