"""
Shared types for GitHub Actions operations.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Mapping, Optional


class WorkflowStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


class WorkflowConclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    NEUTRAL = "neutral"
    STALE = "stale"


@dataclass
class RateLimit:
    """Rate limit state reported by the X-RateLimit-* response headers."""

    limit: Optional[int] = None
    remaining: Optional[int] = None
    used: Optional[int] = None
    reset_at: Optional[datetime] = None
    resource: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimit":
        """Parse rate limit headers; missing headers leave fields as None."""

        def _int(name: str) -> Optional[int]:
            value = headers.get(name)
            try:
                return int(value) if value is not None else None
            except ValueError:
                return None

        reset = _int("x-ratelimit-reset")
        return cls(
            limit=_int("x-ratelimit-limit"),
            remaining=_int("x-ratelimit-remaining"),
            used=_int("x-ratelimit-used"),
            reset_at=datetime.fromtimestamp(reset, tz=timezone.utc) if reset is not None else None,
            resource=headers.get("x-ratelimit-resource"),
        )

    @property
    def resets_in(self) -> Optional[float]:
        """Seconds until the limit resets, never negative."""
        if self.reset_at is None:
            return None
        return max((self.reset_at - datetime.now(timezone.utc)).total_seconds(), 0.0)
