"""Flatten remote recognition payloads into the strings the API returns."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from cognitive_api.domain.errors import MalformedResultError


def flatten_text_groups(groups: Iterable[Sequence[str]]) -> str:
    """Join lines within a group with a space and groups with a newline.

    An empty group in between keeps its (blank) line; input where every group
    is empty, such as `[[], []]`, flattens to `""`.
    """
    pages = [list(lines) for lines in groups]
    if not any(pages):
        return ""
    return "\n".join(" ".join(lines) for lines in pages)


def extract_read_text(analyze_result: Any) -> str:
    """Text of a Computer Vision Read `analyzeResult`, one line per page."""
    if not isinstance(analyze_result, dict):
        raise MalformedResultError("Read result is not an object")
    pages = analyze_result.get("readResults")
    if not isinstance(pages, list):
        raise MalformedResultError("Read result missing readResults list")

    groups: list[list[str]] = []
    for page in pages:
        if not isinstance(page, dict) or not isinstance(page.get("lines", []), list):
            raise MalformedResultError("Invalid page entry in read result")
        lines = []
        for line in page.get("lines", []):
            text = line.get("text") if isinstance(line, dict) else None
            if not isinstance(text, str):
                raise MalformedResultError("Invalid line entry in read result")
            lines.append(text)
        groups.append(lines)
    return flatten_text_groups(groups)


def join_summary_sentences(sentences: Any) -> str:
    """Join extractive summary sentences in original document order."""
    if not isinstance(sentences, list) or not sentences:
        raise MalformedResultError("Summary contains no sentences")
    try:
        ordered = sorted(sentences, key=lambda s: int(s.get("offset", 0)))
        return " ".join(str(s["text"]).strip() for s in ordered)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise MalformedResultError("Invalid sentence entry in summary") from exc
