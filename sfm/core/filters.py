"""Feed filter state: keywords, platforms, location and time window."""

import logging
from collections.abc import Iterable
from datetime import datetime

import dateparser
from pydantic import BaseModel, Field, field_validator

from sfm.core.constants import DEFAULT_KEYWORDS, DEFAULT_PLATFORMS, POST_DATE_LANGUAGES
from sfm.exceptions import ValidationError
from sfm.models.post import Platform, Post

logger = logging.getLogger(__name__)


def parse_post_date(post_date: str, relative_base: datetime | None = None) -> datetime | None:
    """Parse a post timestamp such as 'Сегодня, 17:20' or 'Вчера, 10:05'."""
    settings = {"RELATIVE_BASE": relative_base} if relative_base else None
    return dateparser.parse(post_date.replace(",", " "), languages=POST_DATE_LANGUAGES, settings=settings)


class FeedFilters(BaseModel):
    """User-editable filters for the post feed."""

    keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    platforms: list[Platform] = Field(default_factory=lambda: [Platform(p) for p in DEFAULT_PLATFORMS])
    since: str | None = Field(default=None, description="Only keep posts newer than this (e.g. '1 day ago')")
    include_unknown_locations: bool = Field(default=True, description="Keep posts whose city is unknown")

    @field_validator("keywords")
    @classmethod
    def unique_non_empty(cls, v: list[str]) -> list[str]:
        seen: list[str] = []
        for keyword in v:
            keyword = keyword.strip()
            if keyword and keyword not in seen:
                seen.append(keyword)
        return seen

    @field_validator("platforms", mode="before")
    @classmethod
    def parse_platforms(cls, v: list[Platform | str]) -> list[Platform]:
        platforms: list[Platform] = []
        for value in v:
            platform = Platform.parse(value) if isinstance(value, str) else value
            if platform not in platforms:
                platforms.append(platform)
        return platforms

    @property
    def is_searchable(self) -> bool:
        """Whether there is anything to search for."""
        return bool(self.keywords) and bool(self.platforms)

    def add_keyword(self, keyword: str) -> bool:
        """Add a keyword in lower case. Returns False if it was blank or already present."""
        keyword = keyword.strip().lower()
        if not keyword or keyword in self.keywords:
            return False
        self.keywords.append(keyword)
        return True

    def remove_keyword(self, keyword: str) -> bool:
        """Remove a keyword. Returns False if it was not present."""
        if keyword not in self.keywords:
            return False
        self.keywords.remove(keyword)
        return True

    def toggle_platform(self, platform: Platform | str) -> None:
        """Select a platform if it is not selected, deselect it otherwise."""
        if isinstance(platform, str):
            platform = Platform.parse(platform)
        if platform in self.platforms:
            self.platforms.remove(platform)
        else:
            self.platforms.append(platform)

    def reset(self) -> None:
        """Restore the default filters."""
        defaults = FeedFilters()
        self.keywords = defaults.keywords
        self.platforms = defaults.platforms
        self.since = None
        self.include_unknown_locations = True

    def since_datetime(self, relative_base: datetime | None = None) -> datetime | None:
        """Parse the time window start.

        Raises:
            ValidationError: If the value cannot be parsed as a date
        """
        if not self.since:
            return None
        settings = {"RELATIVE_BASE": relative_base} if relative_base else None
        parsed = dateparser.parse(self.since, settings=settings)
        if parsed is None:
            raise ValidationError("since", self.since, f"Invalid date: {self.since}")
        return parsed

    def apply(self, posts: Iterable[Post], relative_base: datetime | None = None) -> list[Post]:
        """Keep posts that pass the platform, location and time filters."""
        since_dt = self.since_datetime(relative_base)

        filtered = []
        for post in posts:
            if post.platform not in self.platforms:
                continue
            if not self.include_unknown_locations and post.is_location_unknown:
                continue
            if since_dt:
                post_dt = parse_post_date(post.post_date, relative_base)
                if post_dt is None:
                    logger.debug(f"Keeping post {post.id} with unparseable date '{post.post_date}'")
                elif post_dt < since_dt:
                    continue
            filtered.append(post)

        return filtered
