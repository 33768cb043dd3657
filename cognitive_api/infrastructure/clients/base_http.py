"""Shared plumbing for the Azure REST adapters."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from cognitive_api.domain.errors import RemoteServiceError
from cognitive_api.observability.metrics import time_remote_call


class AzureHttpClient:
    """Base for httpx adapters keyed with `Ocp-Apim-Subscription-Key`.

    A fresh AsyncClient is opened per call; `transport` lets tests swap in
    `httpx.MockTransport`.
    """

    service = "azure"

    def __init__(
        self,
        endpoint: str | None,
        key: str | None,
        *,
        timeout_seconds: float = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._key = key
        self._timeout_seconds = timeout_seconds
        self._verify_ssl = verify_ssl
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {"Ocp-Apim-Subscription-Key": self._key or ""}

    def _client(self) -> httpx.AsyncClient:
        if not self._endpoint or not self._key:
            raise RemoteServiceError(f"{self.service} service is not configured", service=self.service)
        return httpx.AsyncClient(
            base_url=self._endpoint.rstrip("/"),
            headers=self._headers(),
            timeout=self._timeout_seconds,
            verify=self._verify_ssl,
            transport=self._transport,
        )

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Open a client and turn transport failures into RemoteServiceError."""
        client = self._client()
        try:
            with time_remote_call(self.service):
                async with client:
                    yield client
        except httpx.HTTPError as exc:
            raise RemoteServiceError(
                f"{self.service} request failed: {exc}", service=self.service
            ) from exc


def raise_for_remote(resp: httpx.Response, service: str) -> None:
    """Raise RemoteServiceError carrying the remote `error.message` on non-2xx."""
    if resp.is_success:
        return
    message = None
    try:
        data = resp.json()
        if isinstance(data, dict):
            err = data.get("error")
            if isinstance(err, dict):
                message = err.get("message")
            elif isinstance(err, str):
                message = err
            message = message or data.get("message")
    except ValueError:
        pass
    raise RemoteServiceError(
        message or resp.text or f"{service} returned HTTP {resp.status_code}",
        service=service,
    )
