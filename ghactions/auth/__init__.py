"""
GitHub App Authentication Module

Handles GitHub App authentication including:
- JWT token generation for GitHub App
- Installation access token management
- Token caching and refresh
"""

from ghactions.auth.installation_token_manager import InstallationToken, InstallationTokenManager
from ghactions.auth.jwt_generator import GitHubAppJWTGenerator

__all__ = [
    "GitHubAppJWTGenerator",
    "InstallationToken",
    "InstallationTokenManager",
]
