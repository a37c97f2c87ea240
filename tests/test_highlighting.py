import pytest
from rich.text import Span

from sfm.core.constants import HighlightConstants
from sfm.core.highlighting import (
    MatchInterval,
    SegmentKind,
    build_segments,
    find_matches,
    highlight,
    highlight_text,
    merge_intervals,
    segments_to_markup,
)


def _parts(segments):
    return [(s.kind, s.text) for s in segments]


def _assert_partition(text, segments):
    assert "".join(s.text for s in segments) == text
    cursor = 0
    for segment in segments:
        assert segment.start == cursor
        assert text[segment.start : segment.end] == segment.text
        cursor = segment.end
    assert cursor == len(text)


def test_empty_keywords_returns_text_unchanged():
    segments = highlight("Привет всем", [])
    assert _parts(segments) == [(SegmentKind.PLAIN, "Привет всем")]


@pytest.mark.parametrize("keywords", [[""], ["   "], ["", " \t "]])
def test_blank_keywords_are_ignored(keywords):
    assert _parts(highlight("Ищу репетитора", keywords)) == [(SegmentKind.PLAIN, "Ищу репетитора")]


def test_blank_text_short_circuits():
    assert _parts(highlight("   ", ["репетитор"])) == [(SegmentKind.PLAIN, "   ")]
    assert _parts(highlight("", ["репетитор"])) == [(SegmentKind.PLAIN, "")]


def test_no_matches_found():
    assert _parts(highlight("Привет всем", ["репетитор"])) == [(SegmentKind.PLAIN, "Привет всем")]


def test_case_insensitive_keeps_original_casing():
    segments = highlight("Ищу репетитора", ["РЕПЕТИТОРА"])
    assert _parts(segments) == [
        (SegmentKind.PLAIN, "Ищу "),
        (SegmentKind.HIGHLIGHTED, "репетитора"),
    ]


def test_special_characters_match_literally():
    segments = highlight("Цена 100$ за урок", ["100$"])
    assert _parts(segments) == [
        (SegmentKind.PLAIN, "Цена "),
        (SegmentKind.HIGHLIGHTED, "100$"),
        (SegmentKind.PLAIN, " за урок"),
    ]


def test_regex_metacharacters_are_not_patterns():
    segments = highlight("a.b axb (c+) [d] x|y \\z", ["a.b", "(c+)", "[d]", "x|y", "\\z", "^", "*"])
    assert [s.text for s in segments if s.is_highlighted] == ["a.b", "(c+)", "[d]", "x|y", "\\z"]


def test_overlapping_keywords_merge():
    segments = highlight("английского языка", ["англи", "ийского"])
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "английского"),
        (SegmentKind.PLAIN, " языка"),
    ]
    assert (segments[0].start, segments[0].end) == (0, 11)


def test_touching_matches_stay_separate():
    # "англ" ends exactly where "ийского" starts
    segments = highlight("английского языка", ["англ", "ийского"])
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "англ"),
        (SegmentKind.HIGHLIGHTED, "ийского"),
        (SegmentKind.PLAIN, " языка"),
    ]


def test_repeated_keyword_occurrences_do_not_overlap():
    segments = highlight("aaaaa", ["aa"])
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "aa"),
        (SegmentKind.HIGHLIGHTED, "aa"),
        (SegmentKind.PLAIN, "a"),
    ]


def test_duplicate_keywords_highlight_once():
    segments = highlight("Нужен репетитор", ["репетитор", "РЕПЕТИТОР", "репетитор"])
    assert _parts(segments) == [
        (SegmentKind.PLAIN, "Нужен "),
        (SegmentKind.HIGHLIGHTED, "репетитор"),
    ]


def test_keywords_are_trimmed_before_matching():
    segments = highlight("урок английского", ["  урок  "])
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "урок"),
        (SegmentKind.PLAIN, " английского"),
    ]


def test_nested_match_is_absorbed():
    segments = highlight("репетитора ищу", ["репетитора", "пет"])
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "репетитора"),
        (SegmentKind.PLAIN, " ищу"),
    ]


@pytest.mark.parametrize(
    ("text", "keywords"),
    [
        ("Ищу репетитора по английскому, нужны уроки английского", ["англ", "уроки", "нужны уроки"]),
        ("abcabcabc", ["abc", "bca", "cab"]),
        ("Цена 100$ за урок, 100$!", ["100$", "$ за", "урок"]),
        ("no hits here", ["zzz"]),
        ("  ", ["a"]),
        ("ëËë", ["ë"]),
    ],
)
def test_segments_partition_text(text, keywords):
    segments = highlight(text, keywords)
    _assert_partition(text, segments)
    highlighted = [s for s in segments if s.is_highlighted]
    for first, second in zip(highlighted, highlighted[1:], strict=False):
        assert first.end <= second.start
    if len(segments) > 1:
        assert all(s.text for s in segments)


def test_find_matches_collects_all_keywords():
    matches = find_matches("abc abc", ["abc", "c a"])
    assert sorted((m.start, m.end) for m in matches) == [(0, 3), (2, 5), (4, 7)]


def test_merge_intervals_sorts_and_merges():
    intervals = [MatchInterval(start=5, end=8), MatchInterval(start=0, end=3), MatchInterval(start=2, end=4)]
    merged = merge_intervals(intervals)
    assert [(m.start, m.end) for m in merged] == [(0, 4), (5, 8)]


def test_merge_intervals_same_start():
    intervals = [MatchInterval(start=1, end=3), MatchInterval(start=1, end=6)]
    assert [(m.start, m.end) for m in merge_intervals(intervals)] == [(1, 6)]
    assert merge_intervals([]) == []


def test_build_segments_skips_zero_length_gaps():
    text = "abcdef"
    merged = [MatchInterval(start=0, end=2), MatchInterval(start=2, end=4)]
    segments = build_segments(text, merged)
    assert _parts(segments) == [
        (SegmentKind.HIGHLIGHTED, "ab"),
        (SegmentKind.HIGHLIGHTED, "cd"),
        (SegmentKind.PLAIN, "ef"),
    ]


def test_highlight_is_repeatable():
    first = highlight("Ищу репетитора", ["репетитор"])
    second = highlight("Ищу репетитора", ["репетитор"])
    assert first == second


def test_highlight_text_styles_matches():
    rich_text = highlight_text("Ищу репетитора", ["РЕПЕТИТОРА"])
    assert rich_text.plain == "Ищу репетитора"
    assert rich_text.spans == [Span(4, 14, HighlightConstants.STYLE)]


def test_highlight_text_without_matches_has_no_spans():
    rich_text = highlight_text("Привет всем", ["репетитор"])
    assert rich_text.plain == "Привет всем"
    assert rich_text.spans == []


def test_segments_to_markup():
    segments = highlight("Цена 100$ за урок", ["100$", "урок"])
    assert segments_to_markup(segments) == "Цена [[100$]] за [[урок]]"
    assert segments_to_markup(segments, "<mark>", "</mark>") == "Цена <mark>100$</mark> за <mark>урок</mark>"
