"""Azure Computer Vision Read v3.2 adapter.

Endpoints:
- POST /vision/v3.2/read/analyze (octet-stream body) -> 202, `Operation-Location` header
- GET  /vision/v3.2/read/analyzeResults/{operation_id}
  -> {"status": "notStarted|running|succeeded|failed",
      "analyzeResult": {"readResults": [{"page": 1, "lines": [{"text": "..."}]}]}}
"""

from __future__ import annotations

from pathlib import Path

from cognitive_api.domain.errors import HandleNotFoundError, RemoteServiceError
from cognitive_api.domain.lro.models import OperationHandle, OperationStatus, StatusSnapshot
from cognitive_api.domain.ports.vision_port import ReadPort
from cognitive_api.infrastructure.clients.base_http import AzureHttpClient, raise_for_remote

READ_PATH = "/vision/v3.2/read"


class VisionReadHttpClient(AzureHttpClient, ReadPort):
    service = "vision"

    async def submit_read(self, image_path: Path) -> OperationHandle:
        content = image_path.read_bytes()
        async with self._session() as client:
            resp = await client.post(
                f"{READ_PATH}/analyze",
                content=content,
                headers={"Content-Type": "application/octet-stream"},
            )
        raise_for_remote(resp, self.service)
        location = resp.headers.get("operation-location")
        if not location:
            raise RemoteServiceError("Read response missing Operation-Location", service=self.service)
        return OperationHandle.from_location(location)

    async def fetch_read_status(self, handle: OperationHandle) -> StatusSnapshot:
        async with self._session() as client:
            resp = await client.get(f"{READ_PATH}/analyzeResults/{handle.id}")
        if resp.status_code == 404:
            raise HandleNotFoundError(handle.id)
        raise_for_remote(resp, self.service)
        data = resp.json()
        status = OperationStatus.parse(data.get("status"))
        if status is OperationStatus.FAILED:
            err = data.get("error") if isinstance(data.get("error"), dict) else {}
            return StatusSnapshot(status, error=err.get("message") or "Read operation failed")
        if status is OperationStatus.SUCCEEDED:
            return StatusSnapshot(status, payload=data.get("analyzeResult"))
        return StatusSnapshot(status)
