"""Navigation items: validated creation and per-page listing.

``page_slug`` and ``parent_id`` are soft references with no foreign keys
in the schema, so create_navigation_item is the only guard on them. Both
reference checks and the insert share one session scope (one transaction).
"""

from __future__ import annotations

import logging

from releasesite.models.navigation import NavigationItem, NavigationItemCreate
from releasesite.services import site_store
from releasesite.services.errors import ReferenceNotFound
from releasesite.services.site_store import NavigationItemRecord, PageRecord

logger = logging.getLogger(__name__)


def _to_model(row: NavigationItemRecord) -> NavigationItem:
    return NavigationItem.model_validate(row)


def create_navigation_item(data: NavigationItemCreate) -> NavigationItem:
    parent_id = data.parent_id
    with site_store.session_scope() as session:
        # Any page counts here, published or not.
        page = session.query(PageRecord.id).filter(PageRecord.slug == data.page_slug).first()
        if page is None:
            logger.warning("navigation_rejected reason=missing_page page_slug=%s", data.page_slug)
            raise ReferenceNotFound.page(data.page_slug)

        if parent_id is not None:
            parent = session.get(NavigationItemRecord, parent_id)
            if parent is None:
                logger.warning("navigation_rejected reason=missing_parent parent_id=%s", parent_id)
                raise ReferenceNotFound.parent(parent_id)

        row = NavigationItemRecord(
            page_slug=data.page_slug,
            title=data.title,
            anchor=data.anchor,
            order=data.order,
            parent_id=parent_id,
            created_at=site_store.utcnow(),
        )
        session.add(row)
        session.flush()
        session.refresh(row)
        created = _to_model(row)
    logger.info(
        "navigation_created id=%s page_slug=%s order=%s parent_id=%s",
        created.id,
        created.page_slug,
        created.order,
        created.parent_id,
    )
    return created


def get_navigation_by_page_slug(page_slug: str) -> list[NavigationItem]:
    """Flat list ordered by ``order``; the parent/child tree is not nested."""
    with site_store.session_scope() as session:
        rows = (
            session.query(NavigationItemRecord)
            .filter(NavigationItemRecord.page_slug == page_slug)
            .order_by(NavigationItemRecord.order.asc(), NavigationItemRecord.id.asc())
            .all()
        )
        return [_to_model(row) for row in rows]
