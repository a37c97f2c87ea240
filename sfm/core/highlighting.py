"""Keyword highlighting for post messages.

Finds every case-insensitive literal occurrence of each keyword, merges
overlapping occurrences and rebuilds the text as an ordered list of plain and
highlighted segments whose concatenation is the original text.
"""

import re
from collections.abc import Iterable, Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from rich.text import Text

from sfm.core.constants import HighlightConstants


class SegmentKind(StrEnum):
    """Kind of a text segment."""

    PLAIN = "plain"
    HIGHLIGHTED = "highlighted"


class MatchInterval(BaseModel):
    """Half-open range [start, end) of a keyword occurrence."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)


class Segment(BaseModel):
    """Contiguous span of the source text."""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @property
    def is_highlighted(self) -> bool:
        """Whether the segment covers a keyword match."""
        return self.kind == SegmentKind.HIGHLIGHTED


def clean_keywords(keywords: Iterable[str]) -> list[str]:
    """Trim keywords and drop blank ones."""
    return [keyword.strip() for keyword in keywords if keyword and keyword.strip()]


def _whole_text(text: str) -> list[Segment]:
    return [Segment(kind=SegmentKind.PLAIN, text=text, start=0, end=len(text))]


def find_matches(text: str, keywords: Iterable[str]) -> list[MatchInterval]:
    """Find all case-insensitive literal occurrences of every keyword.

    Occurrences of one keyword never overlap each other; occurrences of
    different keywords may.
    """
    matches: list[MatchInterval] = []
    for keyword in clean_keywords(keywords):
        pattern = re.compile(re.escape(keyword), re.IGNORECASE)
        for match in pattern.finditer(text):
            matches.append(MatchInterval(start=match.start(), end=match.end()))
    return matches


def merge_intervals(intervals: Iterable[MatchInterval]) -> list[MatchInterval]:
    """Merge strictly overlapping intervals.

    Intervals that only touch (one starts where the other ends) stay separate.
    """
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if not ordered:
        return []

    merged: list[MatchInterval] = []
    current_start, current_end = ordered[0].start, ordered[0].end

    for interval in ordered[1:]:
        if interval.start < current_end:
            current_end = max(current_end, interval.end)
        else:
            merged.append(MatchInterval(start=current_start, end=current_end))
            current_start, current_end = interval.start, interval.end

    merged.append(MatchInterval(start=current_start, end=current_end))
    return merged


def build_segments(text: str, merged: Sequence[MatchInterval]) -> list[Segment]:
    """Rebuild text from merged intervals, filling gaps with plain segments."""
    segments: list[Segment] = []
    cursor = 0

    for interval in merged:
        if interval.start > cursor:
            segments.append(
                Segment(kind=SegmentKind.PLAIN, text=text[cursor : interval.start], start=cursor, end=interval.start)
            )
        segments.append(
            Segment(
                kind=SegmentKind.HIGHLIGHTED,
                text=text[interval.start : interval.end],
                start=interval.start,
                end=interval.end,
            )
        )
        cursor = interval.end

    if cursor < len(text):
        segments.append(Segment(kind=SegmentKind.PLAIN, text=text[cursor:], start=cursor, end=len(text)))

    return segments


def highlight(text: str, keywords: Sequence[str]) -> list[Segment]:
    """Split text into plain and highlighted segments for the given keywords.

    Args:
        text: The text to highlight
        keywords: Keywords to highlight, matched literally and case-insensitively

    Returns:
        Ordered segments covering the whole text exactly once. When there is
        nothing to highlight the text comes back as a single plain segment.
    """
    cleaned = clean_keywords(keywords)
    if not cleaned or not text.strip():
        return _whole_text(text)

    matches = find_matches(text, cleaned)
    if not matches:
        return _whole_text(text)

    return build_segments(text, merge_intervals(matches))


def highlight_text(text: str, keywords: Sequence[str], style: str = HighlightConstants.STYLE) -> Text:
    """Apply highlighting to text for given keywords.

    Returns:
        Rich Text object with highlighted keyword matches
    """
    rich_text = Text()
    for segment in highlight(text, keywords):
        if segment.is_highlighted:
            rich_text.append(segment.text, style=style)
        else:
            rich_text.append(segment.text)
    return rich_text


def segments_to_markup(
    segments: Iterable[Segment],
    open_marker: str = HighlightConstants.OPEN_MARKER,
    close_marker: str = HighlightConstants.CLOSE_MARKER,
) -> str:
    """Render segments as plain text with highlight markers around matches."""
    parts = []
    for segment in segments:
        if segment.is_highlighted:
            parts.append(f"{open_marker}{segment.text}{close_marker}")
        else:
            parts.append(segment.text)
    return "".join(parts)
