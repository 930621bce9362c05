"""Pydantic models."""

from releasesite.models.error import ErrorDetail
from releasesite.models.navigation import NavigationItem, NavigationItemCreate
from releasesite.models.page import Page, PageCreate, PageUpdate
from releasesite.models.project import Project, ProjectCreate, ProjectUpdate

__all__ = [
    "ErrorDetail",
    "NavigationItem",
    "NavigationItemCreate",
    "Page",
    "PageCreate",
    "PageUpdate",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
]
