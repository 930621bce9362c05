from __future__ import annotations

from fastapi import APIRouter

from releasesite.models.error import ErrorDetail
from releasesite.models.navigation import NavigationItem, NavigationItemCreate
from releasesite.services import navigation_service

router = APIRouter()


@router.post(
    "/navigation",
    response_model=NavigationItem,
    status_code=201,
    responses={404: {"model": ErrorDetail}},
)
async def create_navigation_item(data: NavigationItemCreate) -> NavigationItem:
    """Create a sidebar entry. 404 when the page slug or parent id does not resolve."""
    return navigation_service.create_navigation_item(data)


@router.get("/navigation/{page_slug}", response_model=list[NavigationItem])
async def list_navigation(page_slug: str) -> list[NavigationItem]:
    return navigation_service.get_navigation_by_page_slug(page_slug)
