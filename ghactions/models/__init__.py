"""
GitHub Models Module

Shared types and enums for GitHub Actions operations.
"""

from ghactions.models.types import (
    RateLimit,
    WorkflowConclusion,
    WorkflowStatus,
)

__all__ = [
    "RateLimit",
    "WorkflowConclusion",
    "WorkflowStatus",
]
