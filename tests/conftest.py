from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from cognitive_api.application.services.factories import Gateways
from cognitive_api.core.config import Settings
from cognitive_api.domain.errors import RemoteServiceError
from cognitive_api.domain.lro.models import OperationHandle, OperationStatus, StatusSnapshot
from cognitive_api.domain.models import Translation
from cognitive_api.infrastructure.storage.media_store import LocalMediaStore
from cognitive_api.main import create_app


class FakeSummarizer:
    def __init__(self, snapshots: list[StatusSnapshot] | None = None) -> None:
        self.snapshots = list(snapshots or [])
        self.submitted: list[str] = []
        self.status_calls = 0

    async def submit_summary(self, text: str, *, sentence_count: int, language: str) -> OperationHandle:
        self.submitted.append(text)
        return OperationHandle(id="job-1")

    async def fetch_summary_status(self, handle: OperationHandle) -> StatusSnapshot:
        self.status_calls += 1
        return self.snapshots.pop(0)


class FakeTranslator:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def translate(self, text: str, *, to: str) -> Translation:
        self.calls.append((text, to))
        return Translation(text=f"{text}-{to}", detected_language=None)


class FakeReader:
    """Records the staged upload it was handed and replays canned snapshots."""

    def __init__(self, snapshots: list[StatusSnapshot] | None = None) -> None:
        self.snapshots = list(snapshots or [])
        self.seen_paths: list[Path] = []
        self.seen_bytes: list[bytes] = []

    async def submit_read(self, image_path: Path) -> OperationHandle:
        self.seen_paths.append(image_path)
        self.seen_bytes.append(image_path.read_bytes())
        return OperationHandle(id="op-1")

    async def fetch_read_status(self, handle: OperationHandle) -> StatusSnapshot:
        return self.snapshots.pop(0)


class FakeSpeech:
    def __init__(self, transcript: str = "hello world", fail: bool = False) -> None:
        self.transcript = transcript
        self.fail = fail
        self.synthesized: list[tuple[str, str]] = []
        self.recognized_paths: list[Path] = []

    async def synthesize(self, text: str, *, voice: str, output_path: Path) -> None:
        self.synthesized.append((text, voice))
        output_path.write_bytes(b"ID3fake-mp3")
        if self.fail:
            raise RemoteServiceError("synthesis canceled", service="speech")

    async def recognize(self, audio_path: Path, *, window_seconds: float) -> str:
        self.recognized_paths.append(audio_path)
        assert audio_path.exists()
        if self.fail:
            raise RemoteServiceError("Speech recognition canceled", service="speech")
        return self.transcript


def read_succeeded(*pages: list[str]) -> StatusSnapshot:
    return StatusSnapshot(
        OperationStatus.SUCCEEDED,
        payload={"readResults": [{"page": i + 1, "lines": [{"text": t} for t in lines]} for i, lines in enumerate(pages)]},
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        MEDIA_DIR=tmp_path / "media",
        UPLOAD_DIR=tmp_path / "incoming",
        PUBLIC_BASE_URL="http://testserver",
        POLL_INTERVAL_SECONDS=0.001,
        POLL_MAX_ATTEMPTS=5,
        POLL_MAX_WAIT_SECONDS=None,
        HANDWRITING_MOCK_DELAY_SECONDS=0,
        MAX_UPLOAD_BYTES=1024,
    )


@pytest.fixture
def gateways(settings: Settings) -> Gateways:
    speech = FakeSpeech()
    return Gateways(
        summarizer=FakeSummarizer(),
        translator=FakeTranslator(),
        reader=FakeReader(),
        synthesizer=speech,
        recognizer=speech,
        media_store=LocalMediaStore(settings.MEDIA_DIR, url_for=settings.media_url),
    )


@pytest.fixture
def make_client(settings: Settings, gateways: Gateways):
    def _make(**overrides: Any) -> TestClient:
        app = create_app(settings.model_copy(update=overrides) if overrides else settings)
        app.state.gateways = gateways
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
