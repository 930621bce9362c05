"""Project persistence: create, list, lookup by slug, partial update."""

from __future__ import annotations

import logging

from releasesite.models.project import Project, ProjectCreate, ProjectUpdate
from releasesite.services import site_store
from releasesite.services.site_store import ProjectRecord

logger = logging.getLogger(__name__)


def _to_model(row: ProjectRecord) -> Project:
    return Project.model_validate(row)


def create_project(data: ProjectCreate) -> Project:
    now = site_store.utcnow()
    with site_store.session_scope() as session:
        row = ProjectRecord(
            slug=data.slug,
            name=data.name,
            description=data.description,
            github_url=data.github_url,
            github_stars=data.github_stars,
            github_forks=data.github_forks,
            license=data.license,
            is_featured=data.is_featured,
            created_at=now,
            updated_at=now,
        )
        session.add(row)
        site_store.flush_unique(session, entity="Project", slug=data.slug)
        session.refresh(row)
        created = _to_model(row)
    logger.info("project_created id=%s slug=%s featured=%s", created.id, created.slug, created.is_featured)
    return created


def get_projects() -> list[Project]:
    """Featured first; newest first within each group."""
    with site_store.session_scope() as session:
        rows = (
            session.query(ProjectRecord)
            .order_by(
                ProjectRecord.is_featured.desc(),
                ProjectRecord.created_at.desc(),
                ProjectRecord.id.desc(),
            )
            .all()
        )
        return [_to_model(row) for row in rows]


def get_featured_projects() -> list[Project]:
    with site_store.session_scope() as session:
        rows = (
            session.query(ProjectRecord)
            .filter(ProjectRecord.is_featured.is_(True))
            .order_by(ProjectRecord.created_at.desc(), ProjectRecord.id.desc())
            .all()
        )
        return [_to_model(row) for row in rows]


def get_project_by_slug(slug: str) -> Project | None:
    with site_store.session_scope() as session:
        row = session.query(ProjectRecord).filter(ProjectRecord.slug == slug).first()
        if row is None:
            return None
        return _to_model(row)


def update_project(project_id: int, data: ProjectUpdate) -> Project | None:
    """Apply caller-supplied fields and bump updated_at.

    An update carrying no fields is a no-op: the current row is returned
    as stored, or None when the id is unknown.
    """
    changes = data.changes()
    with site_store.session_scope() as session:
        row = session.get(ProjectRecord, project_id)
        if row is None:
            return None
        if not changes:
            return _to_model(row)
        for field, value in changes.items():
            setattr(row, field, value)
        row.updated_at = site_store.utcnow()
        site_store.flush_unique(session, entity="Project", slug=changes.get("slug"))
        session.refresh(row)
        updated = _to_model(row)
    logger.info("project_updated id=%s fields=%s", project_id, ",".join(sorted(changes)))
    return updated
