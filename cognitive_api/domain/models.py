"""Domain models shared by ports and use cases."""

from __future__ import annotations

from pydantic import BaseModel


class Translation(BaseModel):
    """Translated text plus the source language the remote detected, if any."""

    text: str
    detected_language: str | None = None


class CatalogEntry(BaseModel):
    code: str
    name: str


class StoredAsset(BaseModel):
    """A file written to the media store and the public URL it is served at."""

    filename: str
    path: str
    url: str
