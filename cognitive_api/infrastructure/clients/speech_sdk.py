"""Azure Speech SDK adapter for synthesis and continuous recognition.

The SDK reports completion through callbacks on its own threads. Synthesis maps
to a single-shot future; recognition feeds a RecognitionAccumulator that
resolves once on session stop, end of stream or error.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from types import ModuleType
from typing import Any

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.callbacks import RecognitionAccumulator, SingleShot
from cognitive_api.domain.errors import RemoteServiceError
from cognitive_api.domain.ports.speech_port import SpeechRecognitionPort, SpeechSynthesisPort
from cognitive_api.observability.metrics import time_remote_call

logger = get_logger(__name__)

SERVICE = "speech"


def _load_sdk() -> ModuleType:
    import azure.cognitiveservices.speech as speechsdk

    return speechsdk


class AzureSpeechClient(SpeechSynthesisPort, SpeechRecognitionPort):
    def __init__(
        self,
        key: str | None,
        region: str | None,
        *,
        recognition_language: str = "en-US",
        sdk: ModuleType | None = None,
    ) -> None:
        self._key = key
        self._region = region
        self._recognition_language = recognition_language
        self._sdk_module = sdk

    @property
    def _sdk(self) -> ModuleType:
        if self._sdk_module is None:
            self._sdk_module = _load_sdk()
        return self._sdk_module

    def _speech_config(self) -> Any:
        if not self._key or not self._region:
            raise RemoteServiceError("speech service is not configured", service=SERVICE)
        return self._sdk.SpeechConfig(subscription=self._key, region=self._region)

    async def synthesize(self, text: str, *, voice: str, output_path: Path) -> None:
        sdk = self._sdk
        config = self._speech_config()
        config.speech_synthesis_voice_name = voice
        config.set_speech_synthesis_output_format(sdk.SpeechSynthesisOutputFormat.Audio16Khz64KBitRateMonoMp3)
        audio_config = sdk.audio.AudioOutputConfig(filename=str(output_path))
        synthesizer = sdk.SpeechSynthesizer(speech_config=config, audio_config=audio_config)

        done = SingleShot()
        synthesizer.synthesis_completed.connect(lambda evt: done.resolve(evt.result))
        synthesizer.synthesis_canceled.connect(
            lambda evt: done.reject(
                RemoteServiceError(_cancellation_message(evt.result), service=SERVICE)
            )
        )

        with time_remote_call(SERVICE):
            synthesizer.speak_text_async(text)
            await done
        logger.info("speech_synthesized", extra={"voice": voice, "output": output_path.name})

    async def recognize(self, audio_path: Path, *, window_seconds: float) -> str:
        sdk = self._sdk
        config = self._speech_config()
        config.speech_recognition_language = self._recognition_language
        audio_config = sdk.audio.AudioConfig(filename=str(audio_path))
        recognizer = sdk.SpeechRecognizer(speech_config=config, audio_config=audio_config)

        acc = RecognitionAccumulator()

        def on_recognized(evt: Any) -> None:
            if evt.result.reason == sdk.ResultReason.RecognizedSpeech:
                acc.on_recognized(evt.result.text)

        def on_canceled(evt: Any) -> None:
            details = evt.cancellation_details
            logger.info("speech_recognition_canceled", extra={"reason": str(details.reason)})
            if details.reason == sdk.CancellationReason.Error:
                acc.on_canceled(
                    RemoteServiceError(details.error_details or "Speech recognition canceled", service=SERVICE)
                )
            else:
                acc.on_canceled()

        recognizer.recognizing.connect(lambda evt: logger.debug("speech_recognizing", extra={"partial": evt.result.text}))
        recognizer.recognized.connect(on_recognized)
        recognizer.canceled.connect(on_canceled)
        recognizer.session_stopped.connect(lambda evt: acc.on_session_stopped())

        with time_remote_call(SERVICE):
            await asyncio.to_thread(lambda: recognizer.start_continuous_recognition_async().get())
            try:
                finished = await acc.wait(window_seconds)
            finally:
                await asyncio.to_thread(lambda: recognizer.stop_continuous_recognition_async().get())

        if not finished:
            logger.warning(
                "speech_recognition_window_elapsed",
                extra={"window_seconds": window_seconds, "audio": audio_path.name},
            )
        return acc.text


def _cancellation_message(result: Any) -> str:
    details = getattr(result, "cancellation_details", None)
    return getattr(details, "error_details", None) or "Speech synthesis canceled"
