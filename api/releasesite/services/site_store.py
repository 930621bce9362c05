"""Relational storage for projects, pages and navigation items.

Owns the SQLAlchemy engine (cached per database URL), the declarative
records, schema creation and the session scope every service call runs in.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from sqlalchemy import Boolean, DateTime, Integer, String, Text, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import NullPool

from releasesite.services.errors import UniqueConstraintViolation

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns below."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ProjectRecord(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    github_url: Mapped[str] = mapped_column(String, nullable=False)
    github_stars: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    github_forks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    license: Mapped[str] = mapped_column(String, nullable=False, default="Apache-2.0")
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)


class PageRecord(Base):
    __tablename__ = "pages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    meta_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)


class NavigationItemRecord(Base):
    __tablename__ = "navigation_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Soft references: validated by navigation_service, no foreign keys.
    page_slug: Mapped[str] = mapped_column(String, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    anchor: Mapped[str] = mapped_column(String, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    parent_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)


_ENGINE_CACHE: dict[str, Any] = {"url": "", "engine": None, "sessionmaker": None, "schema_ready": False}


def _api_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _default_sqlite_path() -> Path:
    configured = os.getenv("SITE_DB_PATH")
    if configured:
        return Path(configured)
    return _api_root() / "logs" / "site.db"


def database_url() -> str:
    configured = os.getenv("SITE_DATABASE_URL") or os.getenv("DATABASE_URL")
    if configured:
        return configured
    sqlite_path = _default_sqlite_path()
    sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+pysqlite:///{sqlite_path}"


def _create_engine(url: str):
    kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = NullPool
    return create_engine(url, **kwargs)


def engine():
    url = database_url()
    if _ENGINE_CACHE["engine"] is not None and _ENGINE_CACHE["url"] == url:
        return _ENGINE_CACHE["engine"]
    if _ENGINE_CACHE["engine"] is not None:
        _ENGINE_CACHE["engine"].dispose()
    created = _create_engine(url)
    SessionLocal = sessionmaker(bind=created, autocommit=False, autoflush=False, expire_on_commit=False)
    _ENGINE_CACHE["url"] = url
    _ENGINE_CACHE["engine"] = created
    _ENGINE_CACHE["sessionmaker"] = SessionLocal
    _ENGINE_CACHE["schema_ready"] = False
    return created


def reset_engine_cache() -> None:
    cached = _ENGINE_CACHE.get("engine")
    if cached is not None:
        cached.dispose()
    _ENGINE_CACHE["url"] = ""
    _ENGINE_CACHE["engine"] = None
    _ENGINE_CACHE["sessionmaker"] = None
    _ENGINE_CACHE["schema_ready"] = False


def ensure_schema() -> None:
    current = engine()
    if _ENGINE_CACHE["schema_ready"]:
        return
    Base.metadata.create_all(bind=current)
    _ENGINE_CACHE["schema_ready"] = True


def drop_schema() -> None:
    """Drop and recreate the site tables. Destroys all content."""
    current = engine()
    Base.metadata.drop_all(bind=current)
    Base.metadata.create_all(bind=current)
    _ENGINE_CACHE["schema_ready"] = True
    logger.warning("site_schema_reset url=%s", current.url.render_as_string(hide_password=True))


@contextmanager
def session_scope() -> Iterator[Session]:
    """One transaction: commit on success, roll back on any error."""
    ensure_schema()
    session = _ENGINE_CACHE["sessionmaker"]()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _is_slug_collision(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: pages.slug"
    # PostgreSQL: duplicate key value violates unique constraint "pages_slug_key"
    message = str(exc.orig).lower()
    return "unique" in message and "slug" in message


def flush_unique(session: Session, *, entity: str, slug: str | None) -> None:
    """Flush pending writes, reporting a unique-slug collision as a domain error.

    Any other integrity failure propagates unchanged.
    """
    try:
        session.flush()
    except IntegrityError as exc:
        if not _is_slug_collision(exc):
            raise
        logger.info("unique_violation entity=%s slug=%s", entity, slug)
        raise UniqueConstraintViolation(entity, "slug", slug) from exc
