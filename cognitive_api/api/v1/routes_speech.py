from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from cognitive_api.api.uploads import staged_upload
from cognitive_api.application.services.factories import Gateways
from cognitive_api.application.usecases.speech import synthesize_speech, transcribe_audio
from cognitive_api.core.config import Settings
from cognitive_api.core.dependencies import get_app_settings, get_gateways
from cognitive_api.core.error_handlers import failure_message
from cognitive_api.core.logging import get_logger
from cognitive_api.models.schemas import ErrorResponse, TextResponse, TextToSpeechRequest, TextToSpeechResponse

router = APIRouter(tags=["speech"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
logger = get_logger(__name__)


@router.post("/text-to-speech", response_model=TextToSpeechResponse)
async def text_to_speech(
    body: TextToSpeechRequest,
    gateways: Gateways = Depends(get_gateways),
    settings: Settings = Depends(get_app_settings),
):
    logger.info("tts_request_received", extra={"text_length": len(body.text or ""), "voice": body.voice})
    with failure_message("Failed to convert text to speech"):
        asset = await synthesize_speech(
            body.text,
            body.voice,
            client=gateways.synthesizer,
            media_store=gateways.media_store,
            default_voice=settings.TTS_DEFAULT_VOICE,
        )
    return TextToSpeechResponse(audioUrl=asset.url)


@router.post("/speech-to-text", response_model=TextResponse, responses={413: {"model": ErrorResponse}})
async def speech_to_text(
    audio: Optional[UploadFile] = File(None, description="WAV audio file"),
    gateways: Gateways = Depends(get_gateways),
    settings: Settings = Depends(get_app_settings),
):
    logger.info("stt_request_received", extra={"uploaded_filename": audio.filename if audio else None})
    async with staged_upload(
        audio,
        missing_message="No audio file uploaded",
        accept="audio/",
        max_bytes=settings.MAX_UPLOAD_BYTES,
        upload_dir=settings.UPLOAD_DIR,
    ) as audio_path:
        with failure_message("Failed to convert speech to text"):
            text = await transcribe_audio(
                audio_path,
                client=gateways.recognizer,
                window_seconds=settings.STT_RECOGNITION_WINDOW_SECONDS,
            )
    return TextResponse(text=text)
