from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from releasesite.routers import health, navigation, pages, projects
from releasesite.routers.health import API_VERSION
from releasesite.services import site_content, site_store
from releasesite.services.errors import ReferenceNotFound, UniqueConstraintViolation

app = FastAPI(title="Release Tools Site API", version=API_VERSION)
logger = logging.getLogger("releasesite")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
logger.propagate = False
logger.setLevel(os.getenv("SITE_LOG_LEVEL", "INFO").strip().upper() or "INFO")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "1" if default else "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


# Configure CORS
allowed_origins_str = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
allowed_origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UniqueConstraintViolation)
async def _unique_violation(request: Request, exc: UniqueConstraintViolation) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ReferenceNotFound)
async def _reference_not_found(request: Request, exc: ReferenceNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Landing info for API discovery."""
    return {
        "name": app.title,
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/api/health",
    }


app.include_router(projects.router, prefix="/api", tags=["projects"])
app.include_router(pages.router, prefix="/api", tags=["pages"])
app.include_router(navigation.router, prefix="/api", tags=["navigation"])
app.include_router(health.router, prefix="/api", tags=["health"])


@app.on_event("startup")
async def _prepare_site_store() -> None:
    site_store.ensure_schema()
    logger.info("site_store_ready url=%s", site_store.engine().url.render_as_string(hide_password=True))
    if _env_flag("SITE_SEED_ON_STARTUP", False):
        site_content.seed_default_content()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "releasesite.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
