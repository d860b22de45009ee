"""
GitHub Actions artifact operations.

https://docs.github.com/en/rest/actions/artifacts
"""

from typing import Any, Union

from ghactions.repository import Repository, RepositoryRef


class ArtifactOperations:
    """Artifact endpoints, mixed into GitHubClient."""

    async def action_run_artifacts(self, repo: RepositoryRef, id: Union[int, str], **options: Any) -> Any:
        """List workflow run artifacts.

        Args:
            repo: A GitHub repository
            id: The ID of the workflow run
            **options: Query parameters such as ``page`` and ``per_page``

        Returns:
            Response with ``total_count`` and ``artifacts``
        """
        return await self.get(f"{Repository.path(repo)}/actions/runs/{id}/artifacts", options)

    async def artifact(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        """Get an artifact."""
        return await self.get(f"{Repository.path(repo)}/actions/artifacts/{id}")

    async def download_artifact(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        """Download an artifact.

        Returns:
            The zip archive as bytes
        """
        return await self.get(f"{Repository.path(repo)}/actions/artifacts/{id}/zip")

    async def delete_artifact(self, repo: RepositoryRef, id: Union[int, str]) -> bool:
        """Delete an artifact.

        Returns:
            True if the artifact was deleted
        """
        return await self.boolean_from_response("DELETE", f"{Repository.path(repo)}/actions/artifacts/{id}")
