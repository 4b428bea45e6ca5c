"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from aliven_paths.config import LOGO_PATH, STATIC_DIR
from aliven_paths.routers import builder, export_pdf
from aliven_paths.services.browser import resolve_deploy_mode

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("PDF rendering mode: %s", resolve_deploy_mode().value)
    if not LOGO_PATH.exists():
        logger.info("No branding logo at %s, PDFs render without it", LOGO_PATH)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Aliven Path Builder",
        description=(
            "Preview the four-week Aliven rhythm for a path, edit its practices "
            "and journal prompts, and export the plan as a PDF."
        ),
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(builder.router, include_in_schema=False)
    app.include_router(export_pdf.router)

    return app
