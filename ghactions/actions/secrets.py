"""
GitHub Actions secret operations.

Secret values must be encrypted with the repository public key
(libsodium sealed box) before they are passed to ``create_secret``.
"""

from typing import Any

from ghactions.repository import Repository, RepositoryRef


class SecretOperations:
    """Repository secret endpoints, mixed into GitHubClient."""

    async def public_key(self, repo: RepositoryRef) -> Any:
        """Get the repository public key used to encrypt secrets.

        Returns:
            Response with ``key_id`` and base64 ``key``
        """
        return await self.get(f"{Repository.path(repo)}/actions/secrets/public-key")

    async def secrets(self, repo: RepositoryRef) -> Any:
        """List secrets for a repository (names and timestamps only)."""
        return await self.get(f"{Repository.path(repo)}/actions/secrets")

    async def secret(self, repo: RepositoryRef, name: str) -> Any:
        """Get secret metadata."""
        return await self.get(f"{Repository.path(repo)}/actions/secrets/{name}")

    async def create_secret(self, repo: RepositoryRef, name: str, id: str, value: str) -> Any:
        """Create or update a secret for a repository.

        Args:
            repo: A GitHub repository
            name: Secret name
            id: ID of the repository public key used for encryption
            value: Secret value encrypted with that public key, base64 encoded

        Returns:
            Response body ({} when GitHub answers 201/204 without content)
        """
        return await self.put(
            f"{Repository.path(repo)}/actions/secrets/{name}",
            {"encrypted_value": value, "key_id": id},
        )

    async def delete_secret(self, repo: RepositoryRef, name: str) -> bool:
        """Delete a secret from a repository.

        Returns:
            True if the secret was deleted
        """
        return await self.boolean_from_response("DELETE", f"{Repository.path(repo)}/actions/secrets/{name}")
