"""Domain errors raised by the site services.

Soft not-found results are returned as ``None`` rather than raised.
"""

from __future__ import annotations


class SiteStoreError(Exception):
    """Base class for errors the API maps to a client-facing status."""


class UniqueConstraintViolation(SiteStoreError):
    def __init__(self, entity: str, field: str, value: object) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")


class ReferenceNotFound(SiteStoreError):
    """A soft reference (page slug, parent item id) did not resolve."""

    def __init__(self, kind: str, identifier: object, message: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(message)

    @classmethod
    def page(cls, slug: str) -> "ReferenceNotFound":
        return cls("page", slug, f"Page with slug '{slug}' does not exist")

    @classmethod
    def parent(cls, parent_id: int) -> "ReferenceNotFound":
        return cls(
            "navigation_item",
            parent_id,
            f"Parent navigation item with id '{parent_id}' does not exist",
        )
