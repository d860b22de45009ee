"""
GitHub Actions Module

Endpoint bindings for the Actions REST API:
- Artifacts
- Secrets
- Workflows
- Workflow jobs
- Workflow runs
"""

from ghactions.actions.artifacts import ArtifactOperations
from ghactions.actions.logs import extract_log_archive
from ghactions.actions.secrets import SecretOperations
from ghactions.actions.workflow_jobs import WorkflowJobOperations
from ghactions.actions.workflow_runs import WorkflowRunOperations
from ghactions.actions.workflows import WorkflowOperations

__all__ = [
    "ArtifactOperations",
    "SecretOperations",
    "WorkflowJobOperations",
    "WorkflowOperations",
    "WorkflowRunOperations",
    "extract_log_archive",
]
