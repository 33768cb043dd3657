from __future__ import annotations

import pytest

from cognitive_api.domain.errors import MalformedResultError
from cognitive_api.domain.text import extract_read_text, flatten_text_groups, join_summary_sentences


def test_flatten_joins_lines_with_space_and_groups_with_newline() -> None:
    assert flatten_text_groups([["a", "b"], ["c"]]) == "a b\nc"


def test_flatten_empty_groups_yield_empty_string() -> None:
    assert flatten_text_groups([[], []]) == ""
    assert flatten_text_groups([]) == ""


def test_flatten_keeps_blank_page_between_pages() -> None:
    assert flatten_text_groups([["a"], [], ["c"]]) == "a\n\nc"
    assert flatten_text_groups([["first"], []]) == "first\n"


def test_extract_read_text_from_analyze_result() -> None:
    analyze_result = {
        "version": "3.2.0",
        "readResults": [
            {"page": 1, "lines": [{"text": "Hello"}, {"text": "world"}]},
            {"page": 2, "lines": [{"text": "Second page"}]},
        ],
    }
    assert extract_read_text(analyze_result) == "Hello world\nSecond page"


def test_extract_read_text_with_no_lines() -> None:
    assert extract_read_text({"readResults": [{"page": 1, "lines": []}]}) == ""


@pytest.mark.parametrize(
    "analyze_result",
    [
        "not an object",
        {},
        {"readResults": "nope"},
        {"readResults": [{"lines": [{"no_text": 1}]}]},
        {"readResults": [{"lines": "nope"}]},
    ],
)
def test_extract_read_text_rejects_malformed(analyze_result) -> None:
    with pytest.raises(MalformedResultError):
        extract_read_text(analyze_result)


def test_join_summary_sentences_in_document_order() -> None:
    sentences = [
        {"text": "Second sentence.", "rankScore": 1.0, "offset": 40, "length": 16},
        {"text": "First sentence.", "rankScore": 0.7, "offset": 0, "length": 15},
    ]
    assert join_summary_sentences(sentences) == "First sentence. Second sentence."


@pytest.mark.parametrize("sentences", [None, [], [{"offset": 0}], ["plain"]])
def test_join_summary_sentences_rejects_malformed(sentences) -> None:
    with pytest.raises(MalformedResultError):
        join_summary_sentences(sentences)
