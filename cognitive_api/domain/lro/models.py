"""Long-running operation models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class OperationStatus(str, Enum):
    NOT_STARTED = "NotStarted"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self in (OperationStatus.SUCCEEDED, OperationStatus.FAILED)

    @classmethod
    def parse(cls, raw: Any) -> "OperationStatus":
        """Normalise a remote status string.

        Azure services spell these in camelCase (`notStarted`, `running`,
        `succeeded`, `failed`) and the Language jobs API adds `cancelling`,
        `cancelled` and `partiallyCompleted`. Unknown values count as running.
        """
        value = str(raw or "").strip().lower()
        if value in _WAITING:
            return cls.NOT_STARTED if value == "notstarted" else cls.RUNNING
        if value in _SUCCESS:
            return cls.SUCCEEDED
        if value in _FAILURE:
            return cls.FAILED
        return cls.RUNNING


_WAITING = {"notstarted", "running", "cancelling"}
_SUCCESS = {"succeeded"}
_FAILURE = {"failed", "cancelled", "canceled", "partiallycompleted", "partiallysucceeded"}


@dataclass(frozen=True)
class OperationHandle:
    """Opaque reference to an in-progress remote operation."""

    id: str
    location: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_location(cls, location: str) -> "OperationHandle":
        """Build a handle from an `Operation-Location` URL (id is its last path segment)."""
        path = location.split("?", 1)[0].rstrip("/")
        return cls(id=path.rsplit("/", 1)[-1], location=location)


@dataclass(frozen=True)
class StatusSnapshot:
    """One observation of a remote operation."""

    status: OperationStatus
    payload: Any = None
    error: Optional[str] = None


@dataclass(frozen=True)
class PollPolicy:
    """Bounded wait policy; at least one of the budgets must be set."""

    poll_interval_seconds: float = 1.0
    max_attempts: Optional[int] = 60
    max_wait_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be > 0")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("max_attempts must be > 0")
        if self.max_wait_seconds is not None and self.max_wait_seconds <= 0:
            raise ValueError("max_wait_seconds must be > 0")
        if self.max_attempts is None and self.max_wait_seconds is None:
            raise ValueError("either max_attempts or max_wait_seconds is required")
