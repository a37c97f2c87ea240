"""CLI utilities module."""

from sfm.cli.utils.data import FeedFetcher, make_feed_fetcher, posts_from_result
from sfm.cli.utils.options import (
    KEYWORDS_OPTION,
    OUTPUT_PATH_OPTION,
    PLATFORMS_OPTION,
    SEARCH_OPTION,
    OutputFormat,
)
from sfm.cli.utils.output import dump_csv, dump_json, write_or_print

__all__ = [
    "KEYWORDS_OPTION",
    "OUTPUT_PATH_OPTION",
    "PLATFORMS_OPTION",
    "SEARCH_OPTION",
    "FeedFetcher",
    "OutputFormat",
    "dump_csv",
    "dump_json",
    "make_feed_fetcher",
    "posts_from_result",
    "write_or_print",
]
