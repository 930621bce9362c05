"""Page persistence. Slug lookups only serve published pages."""

from __future__ import annotations

import logging

from releasesite.models.page import Page, PageCreate, PageUpdate
from releasesite.services import site_store
from releasesite.services.site_store import PageRecord

logger = logging.getLogger(__name__)


def _to_model(row: PageRecord) -> Page:
    return Page.model_validate(row)


def create_page(data: PageCreate) -> Page:
    now = site_store.utcnow()
    with site_store.session_scope() as session:
        row = PageRecord(
            slug=data.slug,
            title=data.title,
            content=data.content,
            meta_description=data.meta_description,
            is_published=data.is_published,
            created_at=now,
            updated_at=now,
        )
        session.add(row)
        site_store.flush_unique(session, entity="Page", slug=data.slug)
        session.refresh(row)
        created = _to_model(row)
    logger.info("page_created id=%s slug=%s published=%s", created.id, created.slug, created.is_published)
    return created


def get_pages() -> list[Page]:
    with site_store.session_scope() as session:
        rows = session.query(PageRecord).order_by(PageRecord.title.asc(), PageRecord.id.asc()).all()
        return [_to_model(row) for row in rows]


def get_published_pages() -> list[Page]:
    with site_store.session_scope() as session:
        rows = (
            session.query(PageRecord)
            .filter(PageRecord.is_published.is_(True))
            .order_by(PageRecord.title.asc(), PageRecord.id.asc())
            .all()
        )
        return [_to_model(row) for row in rows]


def get_page_by_slug(slug: str) -> Page | None:
    """Unpublished pages are reported exactly like missing ones."""
    with site_store.session_scope() as session:
        row = (
            session.query(PageRecord)
            .filter(PageRecord.slug == slug, PageRecord.is_published.is_(True))
            .first()
        )
        if row is None:
            return None
        return _to_model(row)


def page_slug_exists(slug: str) -> bool:
    """Existence check for any page, published or not."""
    with site_store.session_scope() as session:
        return session.query(PageRecord.id).filter(PageRecord.slug == slug).first() is not None


def update_page(page_id: int, data: PageUpdate) -> Page | None:
    changes = data.changes()
    with site_store.session_scope() as session:
        row = session.get(PageRecord, page_id)
        if row is None:
            return None
        if not changes:
            return _to_model(row)
        for field, value in changes.items():
            setattr(row, field, value)
        row.updated_at = site_store.utcnow()
        site_store.flush_unique(session, entity="Page", slug=changes.get("slug"))
        session.refresh(row)
        updated = _to_model(row)
    logger.info("page_updated id=%s fields=%s", page_id, ",".join(sorted(changes)))
    return updated
