"""Port for extractive summarization (Azure Language analyze-text jobs)."""

from __future__ import annotations

from typing import Protocol

from cognitive_api.domain.lro.models import OperationHandle, StatusSnapshot


class SummarizationPort(Protocol):
    async def submit_summary(self, text: str, *, sentence_count: int, language: str) -> OperationHandle: ...

    async def fetch_summary_status(self, handle: OperationHandle) -> StatusSnapshot:
        """On success the payload is the list of summary sentences."""
        ...
