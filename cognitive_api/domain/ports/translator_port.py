from __future__ import annotations

from typing import Protocol

from cognitive_api.domain.models import Translation


class TranslatorPort(Protocol):
    async def translate(self, text: str, *, to: str) -> Translation: ...
