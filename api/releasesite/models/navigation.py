"""Navigation item models (per-page sidebar entries)."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NavigationItem(BaseModel):
    id: int
    page_slug: str
    title: str
    anchor: str
    order: int = Field(ge=0)
    parent_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NavigationItemCreate(BaseModel):
    page_slug: str = Field(min_length=1)
    title: str = Field(min_length=1)
    anchor: str = Field(min_length=1)
    order: int = Field(ge=0)
    parent_id: Optional[int] = None  # None: root-level entry
