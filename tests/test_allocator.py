"""Tests for spoken-length timing allocation."""

from __future__ import annotations

import pytest

from scriptsubs.abbrev import PlaceholderMap
from scriptsubs.errors import DegenerateInputError
from scriptsubs.segment import Chunker
from scriptsubs.srt import TimingAllocator


def _allocate(text: str, duration: float, table: dict[str, str] | None = None):
    placeholders = PlaceholderMap(table)
    substituted = placeholders.insert(text)
    chunks = Chunker().chunk_text(substituted)
    return TimingAllocator(placeholders).allocate(substituted, chunks, duration)


def test_allocation_is_contiguous_and_sums_to_total() -> None:
    text = (
        "The quick brown fox jumps over the lazy dog near the quiet river bank today. "
        "It rested afterwards. Then the fox ran into the forest and was never seen again by anyone."
    )
    segments = _allocate(text, 30.0)
    assert segments[0].start == 0.0
    for previous, current in zip(segments, segments[1:]):
        assert current.start == previous.end
    assert all(s.end >= s.start for s in segments)
    assert sum(s.end - s.start for s in segments) == pytest.approx(30.0, abs=1e-3)
    assert [s.index for s in segments] == list(range(1, len(segments) + 1))


def test_durations_follow_grapheme_counts() -> None:
    segments = _allocate("Aaaa bbbb cccc dddd. Ee ff gg hh.", 12.0)
    assert [s.text for s in segments] == ["Aaaa bbbb cccc dddd.", "Ee ff gg hh."]
    assert segments[0].end == pytest.approx(8.0)
    assert segments[1].end == pytest.approx(12.0)


def test_abbreviation_is_timed_as_full_form() -> None:
    abbreviated = _allocate("The UN met today. We all slept.", 20.0, {"UN": "United Nations"})
    spelled = _allocate("The Abcdefghijklm met today. We all slept.", 20.0)
    assert abbreviated[0].text == "The PLACEHOLDER_0 met today."
    first = abbreviated[0].end - abbreviated[0].start
    assert first == pytest.approx(spelled[0].end - spelled[0].start)
    assert first == pytest.approx(20.0 * 24 / 34)


def test_degenerate_transcript_fails() -> None:
    with pytest.raises(DegenerateInputError):
        _allocate("... ?! --", 10.0)


def test_non_positive_duration_fails() -> None:
    with pytest.raises(ValueError):
        _allocate("Hello there.", 0.0)


def test_wordless_sentence_keeps_durations_summing_to_total() -> None:
    segments = _allocate("Word. Word. Word. 42. End here.", 10.0)
    assert [s.text for s in segments] == ["Word.", "Word.", "Word. 42.", "End here."]
    assert sum(s.end - s.start for s in segments) == pytest.approx(10.0)
    assert segments[-1].end == pytest.approx(10.0)
