"""
Repository Module

Resolves repository references (ID, owner/name, URL, mapping) to API paths.
"""

from ghactions.repository.reference import (
    InvalidRepositoryError,
    Repository,
    RepositoryRef,
)

__all__ = [
    "InvalidRepositoryError",
    "Repository",
    "RepositoryRef",
]
