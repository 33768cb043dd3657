from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from cognitive_api.application.usecases.ocr import extract_text_from_image
from cognitive_api.domain.errors import HandleNotFoundError, OperationFailedError, OperationTimeoutError
from cognitive_api.domain.lro.models import OperationHandle, PollPolicy
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.infrastructure.clients.vision_http import VisionReadHttpClient

RESULT_URL = "https://example.com/vision/v3.2/read/analyzeResults/op-42"


async def no_sleep(_: float) -> None:
    return None


def make_client(handler) -> VisionReadHttpClient:
    return VisionReadHttpClient("https://example.com", "vision-key", transport=httpx.MockTransport(handler))


def make_image(tmp_path: Path) -> Path:
    image = tmp_path / "scan.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return image


@pytest.mark.asyncio
async def test_read_upload_and_poll_success(tmp_path: Path) -> None:
    uploaded: list[bytes] = []
    statuses = iter(["notStarted", "running"])

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST" and request.url.path == "/vision/v3.2/read/analyze":
            assert request.headers["Content-Type"] == "application/octet-stream"
            uploaded.append(request.content)
            return httpx.Response(202, headers={"Operation-Location": RESULT_URL})
        if request.method == "GET" and request.url.path == "/vision/v3.2/read/analyzeResults/op-42":
            status = next(statuses, None)
            if status:
                return httpx.Response(200, json={"status": status})
            return httpx.Response(
                200,
                json={
                    "status": "succeeded",
                    "analyzeResult": {
                        "readResults": [
                            {"page": 1, "lines": [{"text": "Invoice"}, {"text": "#42"}]},
                            {"page": 2, "lines": [{"text": "Total 10 EUR"}]},
                        ]
                    },
                },
            )
        return httpx.Response(404)

    image = make_image(tmp_path)
    poller = LroPoller(PollPolicy(max_attempts=5), sleep=no_sleep)

    text = await extract_text_from_image(image, client=make_client(handler), poller=poller)

    assert text == "Invoice #42\nTotal 10 EUR"
    assert uploaded == [image.read_bytes()]


@pytest.mark.asyncio
async def test_read_failed_operation_carries_error(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(202, headers={"Operation-Location": RESULT_URL})
        return httpx.Response(200, json={"status": "failed", "error": {"message": "Image is too small"}})

    poller = LroPoller(PollPolicy(max_attempts=5), sleep=no_sleep)
    with pytest.raises(OperationFailedError, match="Image is too small"):
        await extract_text_from_image(make_image(tmp_path), client=make_client(handler), poller=poller)


@pytest.mark.asyncio
async def test_read_never_finishing_times_out(tmp_path: Path) -> None:
    status_calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal status_calls
        if request.method == "POST":
            return httpx.Response(202, headers={"Operation-Location": RESULT_URL})
        status_calls += 1
        return httpx.Response(200, json={"status": "running"})

    poller = LroPoller(PollPolicy(max_attempts=3), sleep=no_sleep)
    with pytest.raises(OperationTimeoutError):
        await extract_text_from_image(make_image(tmp_path), client=make_client(handler), poller=poller)
    assert status_calls == 3


@pytest.mark.asyncio
async def test_expired_operation_is_handle_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": {"code": "NotFound", "message": "Operation not found"}})

    with pytest.raises(HandleNotFoundError):
        await make_client(handler).fetch_read_status(OperationHandle(id="expired"))
