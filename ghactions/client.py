"""
GitHub Actions client.

Combines the client core with every Actions endpoint binding so all of them
are available as methods of one shared client object.
"""

from ghactions.actions import (
    ArtifactOperations,
    SecretOperations,
    WorkflowJobOperations,
    WorkflowOperations,
    WorkflowRunOperations,
)
from ghactions.api.client import GitHubAPIClient


class GitHubClient(
    ArtifactOperations,
    SecretOperations,
    WorkflowOperations,
    WorkflowJobOperations,
    WorkflowRunOperations,
    GitHubAPIClient,
):
    """
    GitHub client exposing the Actions API.

    Example:
        client = GitHubClient(token="ghp_...")
        runs = await client.all_workflow_runs("octo-org/octo-repo", status="failure")
        await client.rerun_workflow_run("octo-org/octo-repo", runs["workflow_runs"][0]["id"])
    """
