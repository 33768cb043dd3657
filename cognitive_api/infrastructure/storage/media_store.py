"""Local disk store for generated media, published under a static URL path."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Callable

from cognitive_api.domain.models import StoredAsset
from cognitive_api.domain.ports.media_port import MediaStorePort


class LocalMediaStore(MediaStorePort):
    """Flat directory of generated assets: <media_dir>/<prefix>-<id><suffix>."""

    def __init__(self, base_dir: Path, url_for: Callable[[str], str]) -> None:
        self._base_dir = Path(base_dir)
        self._url_for = url_for

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def ensure_dir(self) -> None:
        self._base_dir.mkdir(parents=True, exist_ok=True)

    def reserve(self, prefix: str, suffix: str) -> StoredAsset:
        """Pick a fresh file name; nothing is written until the caller does."""
        self.ensure_dir()
        filename = f"{prefix}-{uuid.uuid4().hex}{suffix}"
        return StoredAsset(
            filename=filename,
            path=str(self._base_dir / filename),
            url=self._url_for(filename),
        )

    def discard(self, asset: StoredAsset) -> None:
        Path(asset.path).unlink(missing_ok=True)
