"""Port for OCR (Computer Vision Read)."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from cognitive_api.domain.lro.models import OperationHandle, StatusSnapshot


class ReadPort(Protocol):
    async def submit_read(self, image_path: Path) -> OperationHandle: ...

    async def fetch_read_status(self, handle: OperationHandle) -> StatusSnapshot:
        """On success the payload is the `analyzeResult` object."""
        ...
