"""
GitHub Actions workflow run operations.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Union

from ghactions.actions.logs import extract_log_archive
from ghactions.errors import WorkflowRunTimeoutError
from ghactions.models.types import WorkflowStatus
from ghactions.repository import Repository, RepositoryRef

logger = logging.getLogger(__name__)


class WorkflowRunOperations:
    """Workflow run endpoints, mixed into GitHubClient."""

    async def workflow_runs(self, repo: RepositoryRef, id: Union[int, str], **options: Any) -> Any:
        """List runs of one workflow.

        Args:
            repo: A GitHub repository
            id: The ID or file name of the workflow
            **options: Query parameters: ``actor``, ``branch``, ``event``,
                ``status`` (str or WorkflowStatus/WorkflowConclusion), ``page``, ``per_page``

        Returns:
            Response with ``total_count`` and ``workflow_runs``
        """
        return await self.get(f"{Repository.path(repo)}/actions/workflows/{id}/runs", options)

    async def all_workflow_runs(self, repo: RepositoryRef, **options: Any) -> Any:
        """List workflow runs of every workflow in a repository.

        Accepts the same filters as ``workflow_runs``.
        """
        return await self.get(f"{Repository.path(repo)}/actions/runs", options)

    async def workflow_run(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        return await self.get(f"{Repository.path(repo)}/actions/runs/{id}")

    async def rerun_workflow_run(self, repo: RepositoryRef, id: Union[int, str]) -> bool:
        """Re-run a workflow run.

        Returns:
            True if the re-run was requested
        """
        return await self.boolean_from_response("POST", f"{Repository.path(repo)}/actions/runs/{id}/rerun")

    async def cancel_workflow_run(self, repo: RepositoryRef, id: Union[int, str]) -> bool:
        """Cancel a workflow run.

        Returns:
            True if the cancellation was requested
        """
        return await self.boolean_from_response("POST", f"{Repository.path(repo)}/actions/runs/{id}/cancel")

    async def workflow_run_logs(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        """Download the log archive of a workflow run.

        Returns:
            The zip archive as bytes
        """
        return await self.get(f"{Repository.path(repo)}/actions/runs/{id}/logs")

    async def workflow_run_log_files(self, repo: RepositoryRef, id: Union[int, str]) -> Dict[str, str]:
        """Download and unpack the logs of a workflow run.

        Returns:
            Dict mapping log file names to their text
        """
        content = await self.workflow_run_logs(repo, id)
        return extract_log_archive(content)

    async def wait_for_workflow_run(
        self,
        repo: RepositoryRef,
        id: Union[int, str],
        poll_interval: float = 30,
        timeout: float = 3600,
    ) -> Any:
        """Poll a workflow run until it completes.

        Args:
            repo: A GitHub repository
            id: The ID of the workflow run
            poll_interval: Seconds between status checks
            timeout: Maximum seconds to wait

        Returns:
            The completed workflow run

        Raises:
            WorkflowRunTimeoutError: If the run is still pending after ``timeout``
        """
        start_time = time.monotonic()

        while True:
            run = await self.workflow_run(repo, id)
            status = run.get("status")

            if status == WorkflowStatus.COMPLETED.value:
                logger.info(f"Workflow run {id} completed with conclusion: {run.get('conclusion')}")
                return run

            elapsed = time.monotonic() - start_time
            if elapsed >= timeout:
                raise WorkflowRunTimeoutError(
                    f"Workflow run {id} did not complete within {timeout} seconds (status: {status})"
                )

            # Never sleep past the deadline
            delay = min(poll_interval, timeout - elapsed)
            logger.info(f"Workflow run {id} status: {status}, waiting {delay}s...")
            await asyncio.sleep(delay)
