from __future__ import annotations

from typing import Protocol

from cognitive_api.domain.models import StoredAsset


class MediaStorePort(Protocol):  # pragma: no cover - contract
    """Where generated assets are written and how they are addressed publicly."""

    def reserve(self, prefix: str, suffix: str) -> StoredAsset: ...

    def discard(self, asset: StoredAsset) -> None: ...
