from __future__ import annotations

from cognitive_api.domain.errors import ValidationError
from cognitive_api.domain.models import Translation
from cognitive_api.domain.ports.translator_port import TranslatorPort


async def translate_text(text: str | None, target_language: str | None, *, client: TranslatorPort) -> Translation:
    if not text:
        raise ValidationError("Text is required", field="text")
    if not target_language:
        raise ValidationError("Target language is required", field="targetLanguage")
    return await client.translate(text, to=target_language)
