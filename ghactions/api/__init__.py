"""
GitHub API Module

Client core shared by every endpoint binding: authenticated HTTP verbs,
response decoding, error mapping, pagination and rate limit tracking.
"""

from ghactions.api.client import GitHubAPIClient

__all__ = [
    "GitHubAPIClient",
]
