"""Status polling for long-running remote operations."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sized
from typing import Any, Awaitable, Callable

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.errors import (
    MalformedResultError,
    OperationFailedError,
    OperationTimeoutError,
)
from cognitive_api.domain.lro.models import OperationHandle, OperationStatus, PollPolicy, StatusSnapshot
from cognitive_api.observability.metrics import record_lro_outcome, record_poll_attempt

logger = get_logger(__name__)

FetchStatus = Callable[[OperationHandle], Awaitable[StatusSnapshot]]


class LroPoller:
    """Poll a remote operation until it reaches a terminal status.

    The poller only observes: it calls `fetch_status`, sleeps between
    non-terminal observations and stops at the first terminal one or when the
    policy's budget is spent. `HandleNotFoundError` and transport failures raised
    by `fetch_status` propagate unchanged.
    """

    def __init__(
        self,
        policy: PollPolicy,
        *,
        operation: str = "operation",
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.policy = policy
        self.operation = operation
        self._sleep = sleep
        self._clock = clock

    async def poll(self, handle: OperationHandle, fetch_status: FetchStatus) -> Any:
        started = self._clock()
        deadline = started + self.policy.max_wait_seconds if self.policy.max_wait_seconds else None
        attempts = 0

        while True:
            attempts += 1
            snapshot = await fetch_status(handle)
            record_poll_attempt(self.operation, snapshot.status.value)
            logger.debug(
                "lro_status",
                extra={
                    "operation": self.operation,
                    "operation_id": handle.id,
                    "attempt": attempts,
                    "status": snapshot.status.value,
                },
            )

            if snapshot.status is OperationStatus.SUCCEEDED:
                if _is_empty(snapshot.payload):
                    record_lro_outcome(self.operation, "malformed", self._clock() - started)
                    raise MalformedResultError(f"Operation {handle.id} succeeded with an empty result")
                record_lro_outcome(self.operation, "succeeded", self._clock() - started)
                logger.info(
                    "lro_succeeded",
                    extra={"operation": self.operation, "operation_id": handle.id, "attempts": attempts},
                )
                return snapshot.payload

            if snapshot.status is OperationStatus.FAILED:
                record_lro_outcome(self.operation, "failed", self._clock() - started)
                logger.warning(
                    "lro_failed",
                    extra={"operation": self.operation, "operation_id": handle.id, "error": snapshot.error},
                )
                raise OperationFailedError(handle.id, snapshot.error)

            now = self._clock()
            out_of_attempts = self.policy.max_attempts is not None and attempts >= self.policy.max_attempts
            out_of_time = deadline is not None and now >= deadline
            if out_of_attempts or out_of_time:
                record_lro_outcome(self.operation, "timeout", now - started)
                logger.warning(
                    "lro_timeout",
                    extra={"operation": self.operation, "operation_id": handle.id, "attempts": attempts},
                )
                raise OperationTimeoutError(handle.id, attempts, now - started)

            delay = self.policy.poll_interval_seconds
            if deadline is not None:
                # final check lands on the deadline
                delay = min(delay, deadline - now)
            await self._sleep(delay)


def _is_empty(payload: Any) -> bool:
    if payload is None:
        return True
    return isinstance(payload, Sized) and len(payload) == 0
