"""OCR use case: submit an image to Read and poll until the text is ready."""

from __future__ import annotations

from pathlib import Path

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.domain.ports.vision_port import ReadPort
from cognitive_api.domain.text import extract_read_text

logger = get_logger(__name__)


async def extract_text_from_image(image_path: Path, *, client: ReadPort, poller: LroPoller) -> str:
    handle = await client.submit_read(image_path)
    logger.info("read_operation_submitted", extra={"operation_id": handle.id})
    analyze_result = await poller.poll(handle, client.fetch_read_status)
    return extract_read_text(analyze_result)
