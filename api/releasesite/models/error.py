"""Body of the 404 and 409 responses raised by the site routes.

Validation failures keep FastAPI's own 422 shape.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """A single human-readable message, e.g. "Project not found" or a slug collision."""

    detail: str = Field(min_length=1)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"examples": [{"detail": "Page with slug 'docs' already exists"}]},
    )
