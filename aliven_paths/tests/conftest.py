"""Shared fixtures for Aliven Paths tests.

Provides:
- fake Playwright (chromium → browser → page) recording every call
- exporter: a real PdfExporter wired to the fake Playwright
- client: sync TestClient for the FastAPI app using that exporter
- memory_store / file_store: DraftStore over in-memory or tmp-file storage
"""

import asyncio
import os

import pytest

# Set env vars before any aliven_paths imports
os.environ.setdefault("ALIVEN_DEPLOY_MODE", "local")
os.environ.setdefault("LOCAL_CHROME_PATH", "")
os.environ.setdefault("ALIVEN_LOGO_PATH", "/nonexistent/aliven-logo.png")


FAKE_PDF = b"%PDF-1.4\n% fake\n1 0 obj <<>> endobj\ntrailer <<>>\n%%EOF\n"


# ---------------------------------------------------------------------------
# Fake Playwright
# ---------------------------------------------------------------------------

class FakePage:
    def __init__(self, browser, options):
        self.browser = browser
        self.options = options
        self.viewport = None
        self.html = None
        self.wait_until = None
        self.pdf_options = None

    async def set_viewport_size(self, size):
        self.viewport = size

    async def set_content(self, html, wait_until=None):
        if self.browser.fail_on == "set_content":
            raise RuntimeError("Timeout 30000ms exceeded waiting for networkidle")
        if self.browser.content_delay:
            await asyncio.sleep(self.browser.content_delay)
        self.html = html
        self.wait_until = wait_until

    async def pdf(self, **options):
        if self.browser.fail_on == "pdf":
            raise RuntimeError("Printing failed")
        self.pdf_options = options
        return self.browser.pdf_bytes


class FakeBrowser:
    def __init__(self):
        self.pages = []
        self.closed = False
        self.fail_on = None
        self.content_delay = 0
        self.pdf_bytes = FAKE_PDF

    async def new_page(self, **options):
        page = FakePage(self, options)
        self.pages.append(page)
        return page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self):
        self.browser = FakeBrowser()
        self.launch_calls = []
        self.launch_error = None

    async def launch(self, **options):
        self.launch_calls.append(options)
        if self.launch_error:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    """Async context manager standing in for async_playwright()."""

    def __init__(self):
        self.chromium = FakeChromium()
        self.entered = 0
        self.exited = 0

    async def __aenter__(self):
        self.entered += 1
        return self

    async def __aexit__(self, *exc):
        self.exited += 1
        return False

    @property
    def browser(self):
        return self.chromium.browser


@pytest.fixture
def fake_playwright():
    return FakePlaywright()


@pytest.fixture
def exporter(fake_playwright):
    from aliven_paths.services.browser import LocalLauncher
    from aliven_paths.services.pdf_export import PdfExporter

    return PdfExporter(
        launcher=LocalLauncher(chrome_path=""),
        playwright_factory=lambda: fake_playwright,
    )


@pytest.fixture
def client(exporter):
    """Sync test client for the FastAPI app with the fake exporter."""
    from fastapi.testclient import TestClient

    from aliven_paths.app import create_app
    from aliven_paths.routers.export_pdf import get_exporter

    app = create_app()
    app.dependency_overrides[get_exporter] = lambda: exporter

    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Draft storage
# ---------------------------------------------------------------------------

class BrokenStorage:
    """Storage whose reads and writes always fail."""

    def get_item(self, key):
        raise OSError("storage unavailable")

    def set_item(self, key, value):
        raise OSError("quota exceeded")


@pytest.fixture
def memory_store():
    from aliven_paths.services.drafts import DraftStore, MemoryStorage
    return DraftStore(MemoryStorage())


@pytest.fixture
def drafts_file(tmp_path):
    return tmp_path / "aliven" / "drafts.json"


@pytest.fixture
def file_store(drafts_file):
    from aliven_paths.services.drafts import DraftStore, JsonFileStorage
    return DraftStore(JsonFileStorage(drafts_file))


@pytest.fixture
def broken_store():
    from aliven_paths.services.drafts import DraftStore
    return DraftStore(BrokenStorage())


def make_draft(**overrides):
    from aliven_paths.services.drafts import SavedDraft

    defaults = {
        "id": "draft-1",
        "name": "Morning focus",
        "createdAt": "2026-03-01T09:00:00+00:00",
        "updatedAt": "2026-03-01T09:00:00+00:00",
        "packId": "default",
        "pathId": "stillness",
        "draftPrompts": {2: "What is here, right now?"},
        "draftPractices": {},
    }
    defaults.update(overrides)
    return SavedDraft(**defaults)


@pytest.fixture
def draft_factory():
    return make_draft
