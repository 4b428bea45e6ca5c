"""Aliven Paths configuration — loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Root of the repo
REPO_ROOT = Path(__file__).resolve().parent.parent

# Jinja2 templates and static assets for the web UI
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

# Optional branding image embedded in exported PDFs
LOGO_PATH = Path(os.environ.get("ALIVEN_LOGO_PATH", "") or STATIC_DIR / "aliven-logo.png")

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# PDF rendering mode, "local" or "hosted"; empty means detect from VERCEL / ENV
DEPLOY_MODE = os.environ.get("ALIVEN_DEPLOY_MODE", "")
IS_VERCEL = bool(os.environ.get("VERCEL", ""))
ENV = os.environ.get("ENV", "development")

# Serverless Chromium binary (hosted mode)
CHROMIUM_EXECUTABLE_PATH = os.environ.get("CHROMIUM_EXECUTABLE_PATH", "")

# Locally installed Chrome (local mode); falls back to Playwright's Chromium
LOCAL_CHROME_PATH = os.environ.get(
    "LOCAL_CHROME_PATH",
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
)

# Playwright timeout for launch, navigation and printing (milliseconds)
PDF_TIMEOUT_MS = int(os.environ.get("PDF_TIMEOUT_MS", "30000"))

# Client-local draft storage (CLI); the server never writes drafts
DRAFTS_FILE = Path(
    os.environ.get("ALIVEN_DRAFTS_FILE", "") or Path.home() / ".aliven" / "drafts.json"
)
