"""Project models: the tools promoted on the site (mutex, cli)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

DEFAULT_LICENSE = "Apache-2.0"

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def _checked_url(value: str) -> str:
    # AnyHttpUrl normalizes host case and trailing slashes; keep what the caller sent.
    _HTTP_URL.validate_python(value)
    return value


class Project(BaseModel):
    """Stored project row as returned by GET/POST/PATCH /api/projects."""

    id: int
    slug: str
    name: str
    description: str
    github_url: str
    github_stars: int = Field(ge=0)
    github_forks: int = Field(ge=0)
    license: str
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProjectCreate(BaseModel):
    slug: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    github_url: str
    github_stars: int = Field(default=0, ge=0)
    github_forks: int = Field(default=0, ge=0)
    license: str = DEFAULT_LICENSE
    is_featured: bool = False

    @field_validator("github_url")
    @classmethod
    def validate_github_url(cls, v: str) -> str:
        return _checked_url(v)


class ProjectUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""

    slug: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    github_url: Optional[str] = None
    github_stars: Optional[int] = Field(default=None, ge=0)
    github_forks: Optional[int] = Field(default=None, ge=0)
    license: Optional[str] = None
    is_featured: Optional[bool] = None

    @field_validator(
        "slug",
        "name",
        "description",
        "github_url",
        "github_stars",
        "github_forks",
        "license",
        "is_featured",
        mode="before",
    )
    @classmethod
    def reject_explicit_null(cls, v: object) -> object:
        """Project columns are NOT NULL; omit a field to leave it unchanged."""
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v

    @field_validator("github_url")
    @classmethod
    def validate_github_url(cls, v: str) -> str:
        return _checked_url(v)

    def changes(self) -> dict[str, object]:
        """Caller-supplied fields only."""
        return self.model_dump(exclude_unset=True)
