"""Ports for speech synthesis and recognition."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SpeechSynthesisPort(Protocol):
    async def synthesize(self, text: str, *, voice: str, output_path: Path) -> None: ...


class SpeechRecognitionPort(Protocol):
    async def recognize(self, audio_path: Path, *, window_seconds: float) -> str: ...
