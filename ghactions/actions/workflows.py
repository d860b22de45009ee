"""
GitHub Actions workflow operations.
"""

import logging
from typing import Any, Dict, Optional, Union

from ghactions.repository import Repository, RepositoryRef

logger = logging.getLogger(__name__)


class WorkflowOperations:
    """Workflow endpoints, mixed into GitHubClient."""

    async def workflows(self, repo: RepositoryRef, **options: Any) -> Any:
        """List repository workflows.

        Args:
            repo: A GitHub repository
            **options: Query parameters such as ``page`` and ``per_page``

        Returns:
            Response with ``total_count`` and ``workflows``
        """
        return await self.get(f"{Repository.path(repo)}/actions/workflows", options)

    async def workflow(self, repo: RepositoryRef, id: Union[int, str]) -> Any:
        """Get a workflow by ID or file name (e.g. ``ci.yml``)."""
        return await self.get(f"{Repository.path(repo)}/actions/workflows/{id}")

    async def workflow_dispatch(
        self,
        repo: RepositoryRef,
        id: Union[int, str],
        ref: str,
        inputs: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Trigger a workflow that declares a ``workflow_dispatch`` event.

        Args:
            repo: A GitHub repository
            id: The ID or file name of the workflow
            ref: Branch or tag to run the workflow on
            inputs: Workflow inputs

        Returns:
            True if the dispatch was accepted
        """
        dispatched = await self.boolean_from_response(
            "POST",
            f"{Repository.path(repo)}/actions/workflows/{id}/dispatches",
            data={"ref": ref, "inputs": inputs or {}},
        )
        if dispatched:
            logger.info(f"Triggered workflow {id} in {Repository(repo)} on {ref}")
        return dispatched
