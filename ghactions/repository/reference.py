"""
Repository reference parsing and API path construction.

A repository can be referenced by numeric ID, "owner/name" string, GitHub URL,
mapping, or an existing Repository. All of them resolve to the REST path
prefix used by every repository-scoped endpoint.
"""

import re
from typing import Any, Mapping, Optional, Union


NAME_PATTERN = re.compile(r"^[\w.-]+$")
NAME_WITH_OWNER_PATTERN = re.compile(r"^([\w.-]+)/([\w.-]+)$")
HTTPS_PATTERN = re.compile(r"^https?://(?:www\.)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$")
SSH_PATTERN = re.compile(r"^git@github\.com:([^/]+)/([^/]+?)(?:\.git)?$")
API_PATTERN = re.compile(r"^https?://[^/]+(?:/api/v3)?/repos/([^/]+)/([^/]+?)/?$")


class InvalidRepositoryError(ValueError):
    """Raised when a value cannot be used as a repository reference."""

    def __init__(self, repo: Any):
        super().__init__(
            f"{repo!r} is invalid as a repository identifier. Use the owner/name (str) "
            f"format, the repository ID (int), or a mapping containing 'owner' and 'repo' keys."
        )
        self.repo = repo


RepositoryRef = Union[int, str, Mapping[str, Any], "Repository"]


class Repository:
    """A GitHub repository identified by ID or by owner and name."""

    def __init__(self, repo: RepositoryRef):
        self.id: Optional[int] = None
        self.owner: Optional[str] = None
        self.name: Optional[str] = None

        if isinstance(repo, bool):
            raise InvalidRepositoryError(repo)
        elif isinstance(repo, int):
            self.id = repo
        elif isinstance(repo, Repository):
            self.id, self.owner, self.name = repo.id, repo.owner, repo.name
        elif isinstance(repo, str):
            self.owner, self.name = self._parse_string(repo)
        elif isinstance(repo, Mapping):
            owner = repo.get("owner") or repo.get("user") or repo.get("username")
            if isinstance(owner, Mapping):
                # Repository objects returned by the API nest the owner account
                owner = owner.get("login")
            self.owner = owner
            self.name = repo.get("repo") or repo.get("name")
            if repo.get("id") is not None:
                try:
                    self.id = int(repo["id"])
                except (TypeError, ValueError) as e:
                    raise InvalidRepositoryError(repo) from e
                if not self._has_valid_name():
                    self.owner = self.name = None
        else:
            raise InvalidRepositoryError(repo)

        self._validate(repo)

    @staticmethod
    def _parse_string(value: str):
        value = value.strip()
        for pattern in (NAME_WITH_OWNER_PATTERN, HTTPS_PATTERN, SSH_PATTERN, API_PATTERN):
            match = pattern.match(value)
            if match:
                return match.groups()
        raise InvalidRepositoryError(value)

    def _has_valid_name(self) -> bool:
        return all(
            isinstance(part, str) and NAME_PATTERN.match(part) for part in (self.owner, self.name)
        )

    def _validate(self, repo: RepositoryRef) -> None:
        if self.owner is not None or self.name is not None:
            if not self._has_valid_name():
                raise InvalidRepositoryError(repo)
        elif self.id is None:
            raise InvalidRepositoryError(repo)

    @classmethod
    def from_url(cls, url: str) -> "Repository":
        """Build a repository from a web, SSH or API URL."""
        return cls(url)

    @classmethod
    def path(cls, repo: RepositoryRef) -> str:
        """Resolve any repository reference to its API path prefix.

        Args:
            repo: Repository ID, "owner/name", URL, mapping or Repository

        Returns:
            "repos/{owner}/{name}" or "repositories/{id}"

        Raises:
            InvalidRepositoryError: If the reference is malformed
        """
        return cls(repo).api_path

    @property
    def slug(self) -> Optional[str]:
        if self.owner and self.name:
            return f"{self.owner}/{self.name}"
        return None

    @property
    def api_path(self) -> str:
        if self.slug:
            return self.named_api_path
        return self.id_api_path

    @property
    def named_api_path(self) -> str:
        return f"repos/{self.slug}"

    @property
    def id_api_path(self) -> str:
        return f"repositories/{self.id}"

    @property
    def url(self) -> Optional[str]:
        """Web URL of the repository, when owner and name are known."""
        return f"https://github.com/{self.slug}" if self.slug else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return (self.id, self.owner, self.name) == (other.id, other.owner, other.name)

    def __hash__(self) -> int:
        return hash((self.id, self.owner, self.name))

    def __repr__(self) -> str:
        if self.slug:
            return f"Repository({self.slug!r})"
        return f"Repository({self.id!r})"

    def __str__(self) -> str:
        return self.slug or str(self.id)
