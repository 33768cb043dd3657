"""Voices and translation targets offered to the front end."""

from __future__ import annotations

from cognitive_api.domain.models import CatalogEntry

VOICES: tuple[CatalogEntry, ...] = (
    CatalogEntry(code="en-US-JennyNeural", name="Jenny (Female, US)"),
    CatalogEntry(code="en-US-GuyNeural", name="Guy (Male, US)"),
    CatalogEntry(code="en-GB-SoniaNeural", name="Sonia (Female, UK)"),
    CatalogEntry(code="en-AU-WilliamNeural", name="William (Male, AU)"),
    CatalogEntry(code="es-ES-ElviraNeural", name="Elvira (Female, ES)"),
    CatalogEntry(code="fr-FR-DeniseNeural", name="Denise (Female, FR)"),
    CatalogEntry(code="de-DE-KatjaNeural", name="Katja (Female, DE)"),
    CatalogEntry(code="it-IT-ElsaNeural", name="Elsa (Female, IT)"),
    CatalogEntry(code="ja-JP-NanamiNeural", name="Nanami (Female, JP)"),
)

LANGUAGES: tuple[CatalogEntry, ...] = (
    CatalogEntry(code="en", name="English"),
    CatalogEntry(code="es", name="Spanish"),
    CatalogEntry(code="fr", name="French"),
    CatalogEntry(code="de", name="German"),
    CatalogEntry(code="it", name="Italian"),
    CatalogEntry(code="pt", name="Portuguese"),
    CatalogEntry(code="nl", name="Dutch"),
    CatalogEntry(code="ja", name="Japanese"),
    CatalogEntry(code="ko", name="Korean"),
    CatalogEntry(code="zh-Hans", name="Chinese (Simplified)"),
    CatalogEntry(code="zh-Hant", name="Chinese (Traditional)"),
    CatalogEntry(code="ar", name="Arabic"),
    CatalogEntry(code="hi", name="Hindi"),
    CatalogEntry(code="ru", name="Russian"),
)
