"""
Constants and configuration values for Social Feed Monitor.
"""

from enum import IntEnum, StrEnum

# Version
PACKAGE_VERSION = "0.1.0"

# Proxy endpoint
GENERATE_POSTS_PATH = "/api/generate-posts"
DEFAULT_SERVER_URL = "http://127.0.0.1:8000"

# Filter defaults
DEFAULT_KEYWORDS = ["репетитор", "английский", "ищу"]
DEFAULT_PLATFORMS = ["VK"]
UNKNOWN_LOCATION = "н/д"
POST_CATEGORY = "Репетиторы"
AVATAR_PLACEHOLDER_URL = "https://picsum.photos/40/40"
POST_DATE_LANGUAGES = ["ru", "en"]


class APIConstants(IntEnum):
    """API-related limits and constants."""

    REQUEST_TIMEOUT = 60
    BACKOFF_MAX_TRIES = 3
    BACKOFF_FACTOR = 2
    BACKOFF_MAX_VALUE = 30
    DEFAULT_PORT = 8000


class GenerationConstants(IntEnum):
    """Bounds for the number of generated posts."""

    MIN_POSTS = 5
    MAX_POSTS = 10


class CacheLimits(IntEnum):
    """Cache-related limits."""

    FEED_TTL_HOURS = 1


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


class DisplayConstants(IntEnum):
    """Display limits."""

    SEARCH_THRESHOLD = 70


class HighlightConstants(StrEnum):
    """Highlight styles and markers."""

    STYLE = "bold black on yellow"
    OPEN_MARKER = "[["
    CLOSE_MARKER = "]]"


class ErrorMessages(StrEnum):
    """Error payloads returned by the proxy endpoint."""

    SERVER_CONFIGURATION = "Server configuration error."
    KEYWORDS_NOT_ARRAY = "Keywords must be an array."
    GENERATION_FAILED = "Failed to fetch data from AI service."
    FEED_FETCH_FAILED = (
        "Failed to parse social media posts. The AI might be busy or there's a network issue. "
        "Please try again later. (Details: {details})"
    )
