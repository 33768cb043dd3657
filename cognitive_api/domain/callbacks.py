"""Bridges from callback-style SDK completion to asyncio.

SDK callbacks fire on the SDK's own threads; everything here hands results
back to the owning event loop with `call_soon_threadsafe`.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Generator, Optional


class SingleShot:
    """An asyncio future that can be resolved or rejected once, from any thread.

    Later resolutions are ignored, so competing callbacks (completed vs.
    canceled) cannot race each other into an InvalidStateError.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self.future: asyncio.Future = self._loop.create_future()

    def resolve(self, value: Any = None) -> None:
        self._loop.call_soon_threadsafe(self._set_result, value)

    def reject(self, exc: BaseException) -> None:
        self._loop.call_soon_threadsafe(self._set_exception, exc)

    def _set_result(self, value: Any) -> None:
        if not self.future.done():
            self.future.set_result(value)

    def _set_exception(self, exc: BaseException) -> None:
        if not self.future.done():
            self.future.set_exception(exc)

    def __await__(self) -> Generator[Any, None, Any]:
        return self.future.__await__()


class RecognitionAccumulator:
    """Collect recognised speech segments until the stream ends.

    `on_recognized` appends a segment; `on_session_stopped` and a clean
    `on_canceled` (end of stream) finish the stream; `on_canceled` with an
    error rejects it.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._segments: list[str] = []
        self._lock = threading.Lock()
        self._done = SingleShot(loop)

    @property
    def text(self) -> str:
        with self._lock:
            return " ".join(self._segments).strip()

    def on_recognized(self, text: Optional[str]) -> None:
        if text and text.strip():
            with self._lock:
                self._segments.append(text.strip())

    def on_session_stopped(self) -> None:
        self._done.resolve(True)

    def on_canceled(self, error: Optional[BaseException] = None) -> None:
        if error is not None:
            self._done.reject(error)
        else:
            self._done.resolve(True)

    async def wait(self, window_seconds: float) -> bool:
        """Wait for the stream to finish, at most `window_seconds`.

        Returns True when the stream finished on its own and False when the
        window elapsed first. Re-raises the error passed to `on_canceled`.
        """
        try:
            return await asyncio.wait_for(asyncio.shield(self._done.future), window_seconds)
        except asyncio.TimeoutError:
            # Settle the future so late SDK events are dropped
            self._done.resolve(False)
            return False
