"""Page API routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from releasesite.models.error import ErrorDetail
from releasesite.models.page import Page, PageCreate, PageUpdate
from releasesite.services import page_service

router = APIRouter()


@router.post("/pages", response_model=Page, status_code=201, responses={409: {"model": ErrorDetail}})
async def create_page(data: PageCreate) -> Page:
    return page_service.create_page(data)


@router.get("/pages", response_model=list[Page])
async def list_pages(published: bool = Query(False)) -> list[Page]:
    if published:
        return page_service.get_published_pages()
    return page_service.get_pages()


@router.get("/pages/{slug}", response_model=Page, responses={404: {"model": ErrorDetail}})
async def get_page(slug: str) -> Page:
    page = page_service.get_page_by_slug(slug)
    if page is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return page


@router.patch(
    "/pages/{page_id}",
    response_model=Page,
    responses={404: {"model": ErrorDetail}, 409: {"model": ErrorDetail}},
)
async def update_page(page_id: int, data: PageUpdate) -> Page:
    updated = page_service.update_page(page_id, data)
    if updated is None:
        raise HTTPException(status_code=404, detail="Page not found")
    return updated
