from __future__ import annotations

from fastapi import APIRouter, Depends

from cognitive_api.application.services.factories import Gateways
from cognitive_api.application.usecases.summarize import summarize_text
from cognitive_api.application.usecases.translate import translate_text
from cognitive_api.core.config import Settings
from cognitive_api.core.dependencies import get_app_settings, get_gateways, get_summary_poller
from cognitive_api.core.error_handlers import failure_message
from cognitive_api.core.logging import get_logger
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.models.schemas import (
    ErrorResponse,
    SummarizeRequest,
    SummarizeResponse,
    TranslateRequest,
    TranslateResponse,
)

router = APIRouter(tags=["language"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
logger = get_logger(__name__)


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(
    body: SummarizeRequest,
    gateways: Gateways = Depends(get_gateways),
    poller: LroPoller = Depends(get_summary_poller),
    settings: Settings = Depends(get_app_settings),
):
    logger.info("summarize_request_received", extra={"text_length": len(body.text or "")})
    with failure_message("Failed to summarize text"):
        summary = await summarize_text(
            body.text,
            client=gateways.summarizer,
            poller=poller,
            min_length=settings.MIN_SUMMARY_TEXT_LENGTH,
            sentence_count=settings.SUMMARY_SENTENCE_COUNT,
            language=settings.SUMMARY_LANGUAGE,
        )
    return SummarizeResponse(summarizedText=summary)


@router.post("/translate", response_model=TranslateResponse, response_model_exclude_none=True)
async def translate(body: TranslateRequest, gateways: Gateways = Depends(get_gateways)):
    logger.info(
        "translate_request_received",
        extra={"text_length": len(body.text or ""), "target_language": body.targetLanguage},
    )
    with failure_message("Failed to translate text"):
        result = await translate_text(body.text, body.targetLanguage, client=gateways.translator)
    return TranslateResponse(translatedText=result.text, detectedLanguage=result.detected_language)
