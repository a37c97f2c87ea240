"""Social media post models."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sfm.core.constants import AVATAR_PLACEHOLDER_URL, UNKNOWN_LOCATION


class Platform(StrEnum):
    """Social networks a post can come from."""

    VK = "VK"
    TELEGRAM = "Telegram"
    FACEBOOK = "Facebook"
    YOUDO = "YouDo"

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Parse a platform name case-insensitively."""
        for platform in cls:
            if platform.value.lower() == value.strip().lower():
                return platform
        raise ValueError(f"Unknown platform '{value}'. Expected one of: {', '.join(p.value for p in cls)}")


class WireModel(BaseModel):
    """Base for models exchanged with the browser and the LLM in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Dump with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class User(WireModel):
    """Author of a post."""

    name: str = Field(description="Display name of the author")
    avatar_url: str = Field(default=AVATAR_PLACEHOLDER_URL, description="Avatar image URL")


class GeneratedPost(WireModel):
    """Post as produced by the language model, before an id is assigned."""

    platform: Platform = Field(description="One of 'VK', 'Telegram', 'Facebook', 'YouDo'")
    category: str = Field(description="Post category")
    post_date: str = Field(description="Recent timestamp such as 'Сегодня, 17:20'")
    user: User
    message: str = Field(description="Text of the post")
    city: str = Field(default=UNKNOWN_LOCATION, description="City of the author")
    post_url: str = Field(default="", description="Link to the post")

    @field_validator("platform", mode="before")
    @classmethod
    def parse_platform(cls, v: Any) -> Any:
        """Accept platform names in any case."""
        if isinstance(v, str):
            return Platform.parse(v)
        return v

    @field_validator("city", mode="before")
    @classmethod
    def default_city(cls, v: Any) -> Any:
        """Treat missing cities as unknown."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return UNKNOWN_LOCATION
        return v


class Post(GeneratedPost):
    """Post shown in the feed."""

    id: str = Field(description="Unique post identifier")

    @property
    def date_label(self) -> str:
        """Day part of the post date ("Сегодня" in "Сегодня, 17:20")."""
        return self.post_date.split(",", 1)[0].strip()

    @property
    def time_label(self) -> str:
        """Time part of the post date, empty if there is none."""
        parts = self.post_date.split(",", 1)
        return parts[1].strip() if len(parts) > 1 else ""

    @property
    def is_location_unknown(self) -> bool:
        """Whether the author's city is not known."""
        return self.city.strip().lower() == UNKNOWN_LOCATION

    @classmethod
    def from_generated(cls, generated: GeneratedPost, post_id: str) -> "Post":
        """Attach an id to a generated post."""
        return cls(id=post_id, **generated.model_dump())


class GeneratedPostBatch(BaseModel):
    """Batch of posts from the LLM response."""

    posts: list[GeneratedPost] = Field(description="List of generated social media posts")
