from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from cognitive_api.api.uploads import staged_upload
from cognitive_api.application.services.factories import Gateways
from cognitive_api.application.usecases.handwriting import render_handwriting
from cognitive_api.application.usecases.ocr import extract_text_from_image
from cognitive_api.core.config import Settings
from cognitive_api.core.dependencies import get_app_settings, get_gateways, get_read_poller
from cognitive_api.core.error_handlers import failure_message
from cognitive_api.core.logging import get_logger
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.models.schemas import ErrorResponse, HandwritingRequest, HandwritingResponse, TextResponse

router = APIRouter(tags=["vision"], responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
logger = get_logger(__name__)


@router.post("/ocr", response_model=TextResponse, responses={413: {"model": ErrorResponse}})
async def ocr(
    image: Optional[UploadFile] = File(None, description="Image with printed or handwritten text"),
    gateways: Gateways = Depends(get_gateways),
    poller: LroPoller = Depends(get_read_poller),
    settings: Settings = Depends(get_app_settings),
):
    logger.info("ocr_request_received", extra={"uploaded_filename": image.filename if image else None})
    async with staged_upload(
        image,
        missing_message="No image file uploaded",
        accept="image/",
        max_bytes=settings.MAX_UPLOAD_BYTES,
        upload_dir=settings.UPLOAD_DIR,
    ) as image_path:
        with failure_message("Failed to process image"):
            text = await extract_text_from_image(image_path, client=gateways.reader, poller=poller)
    return TextResponse(text=text)


@router.post("/text-to-handwritten", response_model=HandwritingResponse, responses={501: {"model": ErrorResponse}})
async def text_to_handwritten(
    body: HandwritingRequest,
    gateways: Gateways = Depends(get_gateways),
    settings: Settings = Depends(get_app_settings),
):
    with failure_message("Failed to convert text to handwritten"):
        url = await render_handwriting(
            body.text,
            media_store=gateways.media_store,
            mock_enabled=settings.HANDWRITING_MOCK_ENABLED,
            delay_seconds=settings.HANDWRITING_MOCK_DELAY_SECONDS,
        )
    return HandwritingResponse(imageUrl=url)
