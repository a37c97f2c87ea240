"""Core functionality module."""

from sfm.core.constants import FormattingConstants, HighlightConstants
from sfm.core.highlighting import Segment, SegmentKind, highlight, highlight_text

__all__ = [
    "FormattingConstants",
    "HighlightConstants",
    "Segment",
    "SegmentKind",
    "highlight",
    "highlight_text",
]
