"""Text-to-handwriting.

There is no rendering service behind this: with the mock enabled it waits a
fixed delay and returns the URL of an image that is never generated.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from cognitive_api.domain.errors import FeatureDisabledError, ValidationError
from cognitive_api.domain.ports.media_port import MediaStorePort


async def render_handwriting(
    text: str | None,
    *,
    media_store: MediaStorePort,
    mock_enabled: bool,
    delay_seconds: float,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> str:
    if not text:
        raise ValidationError("Text is required", field="text")
    if not mock_enabled:
        raise FeatureDisabledError("Text to handwriting is not available")

    await sleep(delay_seconds)
    return media_store.reserve("handwritten", ".png").url
