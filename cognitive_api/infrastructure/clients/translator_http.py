"""Azure Translator REST v3 adapter.

POST /translate?api-version=3.0&to=<lang> with body [{"text": ...}]
-> [{"detectedLanguage": {"language": "en", "score": 1.0}, "translations": [{"text": "...", "to": "es"}]}]
"""

from __future__ import annotations

from typing import Any

from cognitive_api.domain.errors import MalformedResultError
from cognitive_api.domain.models import Translation
from cognitive_api.domain.ports.translator_port import TranslatorPort
from cognitive_api.infrastructure.clients.base_http import AzureHttpClient, raise_for_remote


class TranslatorHttpClient(AzureHttpClient, TranslatorPort):
    service = "translator"

    def __init__(self, endpoint: str | None, key: str | None, *, region: str = "global", **kwargs: Any) -> None:
        super().__init__(endpoint, key, **kwargs)
        self._region = region

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        headers["Ocp-Apim-Subscription-Region"] = self._region
        return headers

    async def translate(self, text: str, *, to: str) -> Translation:
        async with self._session() as client:
            resp = await client.post(
                "/translate",
                params={"api-version": "3.0", "to": to},
                json=[{"text": text}],
            )
        raise_for_remote(resp, self.service)
        try:
            item = resp.json()[0]
            translated = item["translations"][0]["text"]
        except (ValueError, LookupError, TypeError) as exc:
            raise MalformedResultError("Translator response missing translations", service=self.service) from exc
        detected = item.get("detectedLanguage") or {}
        return Translation(text=translated, detected_language=detected.get("language"))
