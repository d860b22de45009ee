"""
GitHub App JWT Token Generator

Generates JSON Web Tokens (JWT) for authenticating as a GitHub App.
JWTs are used to request installation access tokens.
"""

import logging
import time
from pathlib import Path
from typing import Optional

import jwt

from ghactions.config import (
    GITHUB_APP_ID,
    GITHUB_APP_PRIVATE_KEY_CONTENT,
    GITHUB_APP_PRIVATE_KEY_PATH,
)

logger = logging.getLogger(__name__)

# GitHub rejects app JWTs valid for longer than ten minutes
MAX_EXPIRATION_SECONDS = 600
# Backdate iat to tolerate clock drift between us and GitHub
CLOCK_DRIFT_SECONDS = 60


class GitHubAppJWTGenerator:
    """Generates JWT tokens for GitHub App authentication."""

    def __init__(
        self,
        app_id: Optional[str] = None,
        private_key_path: Optional[str] = None,
        private_key: Optional[str] = None,
    ):
        """
        Initialize JWT generator.

        Args:
            app_id: GitHub App ID (defaults to config)
            private_key_path: Path to private key .pem file (defaults to config)
            private_key: PEM content, takes precedence over the path (defaults to config)
        """
        self.app_id = app_id or GITHUB_APP_ID
        self.private_key_path = private_key_path or GITHUB_APP_PRIVATE_KEY_PATH
        self._private_key = private_key or GITHUB_APP_PRIVATE_KEY_CONTENT

        if not self.app_id:
            raise ValueError(
                "GitHub App ID is required. Set GITHUB_APP_ID in environment."
            )

        if not self._private_key and not self.private_key_path:
            raise ValueError(
                "GitHub App private key is required. Set GITHUB_APP_PRIVATE_KEY_PATH "
                "or GITHUB_APP_PRIVATE_KEY_CONTENT in environment."
            )

    def _load_private_key(self) -> str:
        """
        Load private key from memory or from the configured .pem file.

        Returns:
            Private key content as string

        Raises:
            FileNotFoundError: If private key file doesn't exist
            ValueError: If private key is empty
        """
        if self._private_key:
            return self._private_key

        key_path = Path(self.private_key_path).expanduser()
        if not key_path.exists():
            raise FileNotFoundError(
                f"GitHub App private key not found at: {key_path}. "
                f"Set GITHUB_APP_PRIVATE_KEY_PATH or GITHUB_APP_PRIVATE_KEY_CONTENT."
            )

        content = key_path.read_text()
        if not content.strip():
            raise ValueError(f"Private key file {key_path} is empty")

        logger.info(f"Loaded GitHub App private key from {key_path}")
        self._private_key = content
        return content

    def generate_jwt(self, expiration_seconds: int = MAX_EXPIRATION_SECONDS) -> str:
        """
        Generate a JWT token for GitHub App authentication.

        GitHub requires:
        - Algorithm: RS256
        - Issued at (iat): Current time
        - Expiration (exp): Max 10 minutes from now
        - Issuer (iss): GitHub App ID

        Args:
            expiration_seconds: Token expiration in seconds (max 600 = 10 minutes)

        Returns:
            JWT token as string

        Raises:
            ValueError: If expiration is invalid or token generation fails
        """
        if expiration_seconds < 1:
            raise ValueError("Expiration must be at least 1 second")

        if expiration_seconds > MAX_EXPIRATION_SECONDS:
            logger.warning(
                f"Requested expiration {expiration_seconds}s exceeds GitHub's 10-minute limit. "
                f"Using {MAX_EXPIRATION_SECONDS} seconds instead."
            )
            expiration_seconds = MAX_EXPIRATION_SECONDS

        private_key = self._load_private_key()
        now = int(time.time())
        payload = {
            "iat": now - CLOCK_DRIFT_SECONDS,
            "exp": now + expiration_seconds,
            "iss": str(self.app_id),
        }

        try:
            token = jwt.encode(payload, private_key, algorithm="RS256")
        except Exception as e:
            logger.error(f"Failed to generate JWT token: {e}")
            raise ValueError(f"Failed to generate GitHub App JWT: {e}") from e

        logger.debug(f"Generated GitHub App JWT (expires in {expiration_seconds}s, app_id={self.app_id})")
        return token
