"""
GitHub Actions workflow job operations.
"""

from typing import Any, Union

from ghactions.repository import Repository, RepositoryRef


class WorkflowJobOperations:
    """Workflow job endpoints, mixed into GitHubClient."""

    async def workflow_run_jobs(self, repo: RepositoryRef, id: Union[int, str], **options: Any) -> Any:
        """List jobs for a workflow run.

        Args:
            repo: A GitHub repository
            id: The ID of the workflow run
            **options: Query parameters such as ``filter`` (``latest``/``all``), ``page``

        Returns:
            Response with ``total_count`` and ``jobs``
        """
        return await self.get(f"{Repository.path(repo)}/actions/runs/{id}/jobs", options)

    async def workflow_job(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        return await self.get(f"{Repository.path(repo)}/actions/jobs/{id}")

    async def workflow_job_logs(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        """Download the plain text log of a workflow job."""
        return await self.get(f"{Repository.path(repo)}/actions/jobs/{id}/logs")
