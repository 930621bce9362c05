"""Page models for site content (home, per-project docs)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Page(BaseModel):
    id: int
    slug: str
    title: str
    content: str
    meta_description: Optional[str] = None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PageCreate(BaseModel):
    slug: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    meta_description: Optional[str] = None
    is_published: bool = True


class PageUpdate(BaseModel):
    """Partial update. meta_description is the only field that accepts an explicit null."""

    slug: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    meta_description: Optional[str] = None
    is_published: Optional[bool] = None

    @field_validator("slug", "title", "content", "is_published", mode="before")
    @classmethod
    def reject_explicit_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)
