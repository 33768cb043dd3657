"""Text-to-speech and speech-to-text use cases."""

from __future__ import annotations

from pathlib import Path

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.errors import ValidationError
from cognitive_api.domain.models import StoredAsset
from cognitive_api.domain.ports.media_port import MediaStorePort
from cognitive_api.domain.ports.speech_port import SpeechRecognitionPort, SpeechSynthesisPort

logger = get_logger(__name__)


async def synthesize_speech(
    text: str | None,
    voice: str | None,
    *,
    client: SpeechSynthesisPort,
    media_store: MediaStorePort,
    default_voice: str,
) -> StoredAsset:
    """Render `text` to an MP3 in the media store.

    A failed synthesis leaves no partial file behind.
    """
    if not text:
        raise ValidationError("Text is required", field="text")

    asset = media_store.reserve("speech", ".mp3")
    try:
        await client.synthesize(text, voice=voice or default_voice, output_path=Path(asset.path))
    except BaseException:
        media_store.discard(asset)
        raise
    return asset


async def transcribe_audio(audio_path: Path, *, client: SpeechRecognitionPort, window_seconds: float) -> str:
    text = await client.recognize(audio_path, window_seconds=window_seconds)
    logger.info("speech_transcribed", extra={"text_length": len(text)})
    return text
