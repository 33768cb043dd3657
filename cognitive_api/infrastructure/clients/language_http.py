"""Azure Language extractive summarization over the analyze-text jobs API.

Endpoints:
- POST /language/analyze-text/jobs -> 202, `Operation-Location` header
- GET  /language/analyze-text/jobs/{job_id}
  -> {"status": "notStarted|running|succeeded|failed|...",
      "tasks": {"items": [{"results": {"documents": [{"sentences": [...]}], "errors": [...]}}]}}
"""

from __future__ import annotations

from typing import Any

from cognitive_api.domain.errors import HandleNotFoundError, RemoteServiceError
from cognitive_api.domain.lro.models import OperationHandle, OperationStatus, StatusSnapshot
from cognitive_api.domain.ports.language_port import SummarizationPort
from cognitive_api.infrastructure.clients.base_http import AzureHttpClient, raise_for_remote

JOBS_PATH = "/language/analyze-text/jobs"


class LanguageHttpClient(AzureHttpClient, SummarizationPort):
    service = "language"

    def __init__(self, endpoint: str | None, key: str | None, *, api_version: str = "2023-04-01", **kwargs: Any) -> None:
        super().__init__(endpoint, key, **kwargs)
        self._api_version = api_version

    async def submit_summary(self, text: str, *, sentence_count: int, language: str) -> OperationHandle:
        payload = {
            "displayName": "extractive-summary",
            "analysisInput": {"documents": [{"id": "1", "language": language, "text": text}]},
            "tasks": [
                {
                    "kind": "ExtractiveSummarization",
                    "taskName": "summarize",
                    "parameters": {"sentenceCount": sentence_count, "sortBy": "Offset"},
                }
            ],
        }
        async with self._session() as client:
            resp = await client.post(JOBS_PATH, params={"api-version": self._api_version}, json=payload)
        raise_for_remote(resp, self.service)
        location = resp.headers.get("operation-location")
        if not location:
            raise RemoteServiceError("Summarization job response missing Operation-Location", service=self.service)
        return OperationHandle.from_location(location)

    async def fetch_summary_status(self, handle: OperationHandle) -> StatusSnapshot:
        async with self._session() as client:
            resp = await client.get(f"{JOBS_PATH}/{handle.id}", params={"api-version": self._api_version})
        if resp.status_code == 404:
            raise HandleNotFoundError(handle.id)
        raise_for_remote(resp, self.service)
        data = resp.json()
        status = OperationStatus.parse(data.get("status"))
        if status is OperationStatus.FAILED:
            return StatusSnapshot(status, error=_first_error(data) or "Summarization job failed")
        if status is not OperationStatus.SUCCEEDED:
            return StatusSnapshot(status)

        results = _task_results(data)
        if results is None:
            return StatusSnapshot(status, payload=None)
        doc_error = _first_error(results)
        if doc_error:
            return StatusSnapshot(OperationStatus.FAILED, error=doc_error)
        documents = results.get("documents") or []
        sentences = documents[0].get("sentences") if documents and isinstance(documents[0], dict) else None
        return StatusSnapshot(status, payload=sentences)


def _task_results(data: dict[str, Any]) -> dict[str, Any] | None:
    items = (data.get("tasks") or {}).get("items")
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        return None
    results = items[0].get("results")
    return results if isinstance(results, dict) else None


def _first_error(obj: dict[str, Any]) -> str | None:
    errors = obj.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    if isinstance(first, dict):
        inner = first.get("error") if isinstance(first.get("error"), dict) else first
        return str(inner.get("message") or inner.get("code") or "unknown error")
    return str(first)
