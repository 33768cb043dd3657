"""Extractive summarization use case."""

from __future__ import annotations

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.errors import ValidationError
from cognitive_api.domain.lro.poller import LroPoller
from cognitive_api.domain.ports.language_port import SummarizationPort
from cognitive_api.domain.text import join_summary_sentences

logger = get_logger(__name__)


async def summarize_text(
    text: str | None,
    *,
    client: SummarizationPort,
    poller: LroPoller,
    min_length: int = 10,
    sentence_count: int = 3,
    language: str = "en",
) -> str:
    """Summarize `text` into its top sentences, kept in document order.

    Input shorter than `min_length` (counted as sent, whitespace included) or
    blank is rejected before any remote call.
    """
    if not text or len(text) < min_length or not text.strip():
        raise ValidationError("Text is too short for summarization", field="text")

    handle = await client.submit_summary(text, sentence_count=sentence_count, language=language)
    logger.info("summary_job_submitted", extra={"operation_id": handle.id, "text_length": len(text)})
    sentences = await poller.poll(handle, client.fetch_summary_status)
    return join_summary_sentences(sentences)
