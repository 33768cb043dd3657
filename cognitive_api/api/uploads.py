"""Staging of multipart uploads in temporary storage."""

from __future__ import annotations

import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import UploadFile

from cognitive_api.core.logging import get_logger
from cognitive_api.domain.errors import PayloadTooLargeError, UnsupportedMediaError, ValidationError

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


@asynccontextmanager
async def staged_upload(
    file: Optional[UploadFile],
    *,
    missing_message: str,
    accept: str,
    max_bytes: int,
    upload_dir: Optional[Path] = None,
) -> AsyncIterator[Path]:
    """Write `file` to a temp file and yield its path.

    The temp file is removed on every exit path, including failures raised
    while writing it or inside the `async with` body.
    """
    if file is None or not file.filename:
        raise ValidationError(missing_message, field="file")
    content_type = (file.content_type or "").lower()
    if content_type and content_type != "application/octet-stream" and not content_type.startswith(accept):
        raise UnsupportedMediaError(file.content_type, f"{accept}*")

    if upload_dir is not None:
        upload_dir.mkdir(parents=True, exist_ok=True)
    suffix = Path(file.filename).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix, dir=upload_dir) as tmp:
        temp_path = Path(tmp.name)
    try:
        written = 0
        with temp_path.open("wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > max_bytes:
                    raise PayloadTooLargeError(max_bytes)
                out.write(chunk)
        await file.close()
        if written == 0:
            raise ValidationError(missing_message, field="file")
        logger.info(
            "upload_staged",
            extra={"uploaded_filename": file.filename, "uploaded_content_type": file.content_type, "size_bytes": written},
        )
        yield temp_path
    finally:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning("upload_cleanup_failed", extra={"path": str(temp_path)})
