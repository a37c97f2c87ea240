"""Request and response models for the post generation endpoint."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from sfm.models.post import Platform


class GeneratePostsRequest(BaseModel):
    """Body of POST /api/generate-posts."""

    keywords: list[str]
    platforms: list[Platform] = Field(default_factory=lambda: list(Platform))

    @field_validator("keywords")
    @classmethod
    def non_empty_strings(cls, v: list[str]) -> list[str]:
        return [k.strip() for k in v if k.strip()]

    @field_validator("platforms", mode="before")
    @classmethod
    def parse_platforms(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [Platform.parse(p) if isinstance(p, str) else p for p in v]
        return v


class ErrorResponse(BaseModel):
    """Error payload returned instead of a post list."""

    error: str
