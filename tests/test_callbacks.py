from __future__ import annotations

import asyncio
import threading

import pytest

from cognitive_api.domain.callbacks import RecognitionAccumulator, SingleShot
from cognitive_api.domain.errors import RemoteServiceError


def fire_from_thread(*callbacks) -> None:
    def run() -> None:
        for cb in callbacks:
            cb()

    t = threading.Thread(target=run)
    t.start()
    t.join()


@pytest.mark.asyncio
async def test_single_shot_resolves_from_another_thread() -> None:
    shot = SingleShot()
    fire_from_thread(lambda: shot.resolve("done"))
    assert await shot == "done"


@pytest.mark.asyncio
async def test_single_shot_keeps_first_outcome() -> None:
    shot = SingleShot()
    fire_from_thread(
        lambda: shot.reject(RemoteServiceError("canceled")),
        lambda: shot.resolve("late"),
    )
    with pytest.raises(RemoteServiceError, match="canceled"):
        await shot


@pytest.mark.asyncio
async def test_accumulator_collects_segments_until_session_stops() -> None:
    acc = RecognitionAccumulator()
    fire_from_thread(
        lambda: acc.on_recognized("Hello there."),
        lambda: acc.on_recognized("  "),
        lambda: acc.on_recognized(None),
        lambda: acc.on_recognized("How are you?"),
        acc.on_session_stopped,
    )

    assert await acc.wait(1.0) is True
    assert acc.text == "Hello there. How are you?"


@pytest.mark.asyncio
async def test_accumulator_end_of_stream_cancel_finishes_normally() -> None:
    acc = RecognitionAccumulator()
    fire_from_thread(lambda: acc.on_recognized("only segment"), acc.on_canceled)

    assert await acc.wait(1.0) is True
    assert acc.text == "only segment"


@pytest.mark.asyncio
async def test_accumulator_error_cancel_rejects() -> None:
    acc = RecognitionAccumulator()
    fire_from_thread(lambda: acc.on_canceled(RemoteServiceError("invalid subscription key")))

    with pytest.raises(RemoteServiceError, match="invalid subscription key"):
        await acc.wait(1.0)


@pytest.mark.asyncio
async def test_accumulator_window_elapses_with_partial_text() -> None:
    acc = RecognitionAccumulator()
    acc.on_recognized("partial")

    assert await acc.wait(0.01) is False
    assert acc.text == "partial"

    # late stop after the window is ignored
    acc.on_session_stopped()
    await asyncio.sleep(0)
