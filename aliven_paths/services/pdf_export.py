"""PDF export service — payload normalization, HTML resolution, headless print.

Each export launches its own browser, prints one page and closes the
browser before returning, on success, failure or cancellation alike.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime

from aliven_paths import config
from aliven_paths.services.browser import get_launcher
from aliven_paths.services.html_render import build_html, logo_data_uri

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Aliven Personalized Path"
DEFAULT_PATH_NAME = "Selected Path"
DEFAULT_FILENAME = "aliven-rhythm-preview"
LEGACY_TITLE = "Aliven Rhythm Preview"

MAX_FILENAME_LEN = 80
_FILENAME_STRIP_RE = re.compile(r"[^a-zA-Z0-9\-_ ]")

VIEWPORT = {"width": 1200, "height": 800}
PDF_OPTIONS = {
    "format": "A4",
    "print_background": True,
    "margin": {"top": "16mm", "right": "16mm", "bottom": "16mm", "left": "16mm"},
}


class PdfRenderError(RuntimeError):
    """Headless browser failed to launch, load the document or print it."""


@dataclass
class ExportRequest:
    """Fully populated export request; every default is decided in normalize_payload."""
    title: str
    path_id: str
    path_name: str
    created_at: str
    weeks: list[dict] = field(default_factory=list)
    filename: str = DEFAULT_FILENAME + ".pdf"
    html: str | None = None


@dataclass
class ExportResult:
    content: bytes
    filename: str


def _str_field(body: dict, key: str) -> str:
    value = body.get(key)
    return value if isinstance(value, str) else ""


def format_created_at(value: str, now: datetime | None = None) -> str:
    """Display timestamp for an ISO-8601 string; unparseable input is shown as-is."""
    if not value:
        dt = now or datetime.now()
    else:
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if dt.tzinfo is not None:
        try:
            dt = dt.astimezone()
        except (OverflowError, OSError):
            return value
    return dt.strftime("%d %b %Y, %H:%M")


def sanitize_filename(name: str | None) -> str:
    """Restrict to [A-Za-z0-9-_ ], spaces → hyphens, max 80 chars, plus .pdf."""
    name = name or ""
    if name.lower().endswith(".pdf"):
        name = name[:-4]
    cleaned = _FILENAME_STRIP_RE.sub("", name).replace(" ", "-")[:MAX_FILENAME_LEN]
    if not cleaned:
        cleaned = DEFAULT_FILENAME
    return cleaned + ".pdf"


def normalize_payload(body) -> ExportRequest:
    """Build an ExportRequest from a raw JSON body (anything non-dict counts as {})."""
    if not isinstance(body, dict):
        body = {}

    path_id = _str_field(body, "pathId")
    path_name = _str_field(body, "pathName") or path_id or DEFAULT_PATH_NAME

    weeks = body.get("weeks")
    if isinstance(weeks, list):
        weeks = [w for w in weeks if isinstance(w, dict)]
    else:
        weeks = []

    html = body.get("html")
    return ExportRequest(
        title=_str_field(body, "title") or DEFAULT_TITLE,
        path_id=path_id,
        path_name=path_name,
        created_at=format_created_at(_str_field(body, "createdAt")),
        weeks=weeks,
        filename=sanitize_filename(
            _str_field(body, "filename") or _str_field(body, "pathName") or DEFAULT_FILENAME
        ),
        html=html if isinstance(html, str) else None,
    )


def resolve_html(request: ExportRequest) -> str:
    """Supplied HTML, or the rendered plan document."""
    if request.html is not None:
        html = request.html
    else:
        html = build_html(
            title=request.title,
            path_name=request.path_name,
            created_at=request.created_at,
            weeks=request.weeks,
            logo=logo_data_uri(config.LOGO_PATH),
        )
    return html.replace(LEGACY_TITLE, DEFAULT_TITLE)


def _default_playwright():
    from playwright.async_api import async_playwright
    return async_playwright()


class PdfExporter:
    """Renders HTML to PDF bytes with one dedicated browser per call."""

    def __init__(self, launcher=None, playwright_factory=None):
        self.launcher = launcher or get_launcher()
        self.playwright_factory = playwright_factory or _default_playwright

    async def render(self, html: str) -> bytes:
        try:
            async with self.playwright_factory() as playwright:
                browser = await self.launcher.launch(playwright)
                try:
                    page = await browser.new_page(**self.launcher.page_options)
                    await page.set_viewport_size(VIEWPORT)
                    await page.set_content(html, wait_until="networkidle")
                    return await page.pdf(**PDF_OPTIONS)
                finally:
                    await browser.close()
        except PdfRenderError:
            raise
        except Exception as e:
            logger.error("PDF render failed: %s", e)
            raise PdfRenderError(f"PDF render failed: {e}") from e

    async def export(self, body) -> ExportResult:
        request = normalize_payload(body)
        html = resolve_html(request)
        content = await self.render(html)
        if not content:
            raise PdfRenderError("PDF render produced an empty document")
        logger.info("Exported %s (%d bytes)", request.filename, len(content))
        return ExportResult(content=content, filename=request.filename)
