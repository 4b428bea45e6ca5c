"""Headless browser acquisition — one launch strategy per deployment mode.

Hosted deployments run a serverless-friendly Chromium with a fixed set of
launch flags; local development prefers an installed Chrome and falls back
to Playwright's bundled Chromium.
"""

import logging
import os
from enum import Enum

from aliven_paths import config

logger = logging.getLogger(__name__)


class DeployMode(str, Enum):
    LOCAL = "local"
    HOSTED = "hosted"


def resolve_deploy_mode(value: str | None = None) -> DeployMode:
    """Deployment mode from ALIVEN_DEPLOY_MODE, else VERCEL / ENV detection."""
    value = (config.DEPLOY_MODE if value is None else value).strip().lower()
    if value:
        try:
            return DeployMode(value)
        except ValueError:
            logger.warning("Unknown ALIVEN_DEPLOY_MODE %r, detecting instead", value)

    if config.IS_VERCEL or config.ENV.lower() == "production":
        return DeployMode.HOSTED
    return DeployMode.LOCAL


# Flags for Chromium in a constrained serverless sandbox (no /dev/shm,
# no zygote, single process, software GL).
SERVERLESS_ARGS = [
    "--allow-pre-commit-input",
    "--disable-background-networking",
    "--disable-background-timer-throttling",
    "--disable-backgrounding-occluded-windows",
    "--disable-breakpad",
    "--disable-client-side-phishing-detection",
    "--disable-component-update",
    "--disable-default-apps",
    "--disable-dev-shm-usage",
    "--disable-extensions",
    "--disable-hang-monitor",
    "--disable-ipc-flooding-protection",
    "--disable-popup-blocking",
    "--disable-prompt-on-repost",
    "--disable-renderer-backgrounding",
    "--disable-sync",
    "--disable-domain-reliability",
    "--disable-print-preview",
    "--disable-speech-api",
    "--disk-cache-size=33554432",
    "--export-tagged-pdf",
    "--font-render-hinting=none",
    "--force-color-profile=srgb",
    "--metrics-recording-only",
    "--mute-audio",
    "--no-default-browser-check",
    "--no-first-run",
    "--no-pings",
    "--no-sandbox",
    "--no-zygote",
    "--password-store=basic",
    "--single-process",
    "--use-angle=swiftshader",
    "--use-gl=angle",
    "--use-mock-keychain",
]

SERVERLESS_VIEWPORT = {"width": 1920, "height": 1080}


class HostedLauncher:
    """Serverless Chromium: supplied flags, default viewport, headless."""

    mode = DeployMode.HOSTED

    def __init__(self, executable_path: str | None = None, timeout_ms: int | None = None):
        self.executable_path = executable_path if executable_path is not None else config.CHROMIUM_EXECUTABLE_PATH
        self.timeout_ms = timeout_ms or config.PDF_TIMEOUT_MS

    @property
    def page_options(self) -> dict:
        return {"viewport": dict(SERVERLESS_VIEWPORT)}

    def launch_options(self) -> dict:
        options = {
            "args": list(SERVERLESS_ARGS),
            "headless": True,
            "timeout": self.timeout_ms,
        }
        if self.executable_path:
            options["executable_path"] = self.executable_path
        return options

    async def launch(self, playwright):
        options = self.launch_options()
        logger.info("Launching hosted Chromium (%s)", options.get("executable_path", "bundled"))
        return await playwright.chromium.launch(**options)


class LocalLauncher:
    """Installed Chrome when present, otherwise Playwright's Chromium."""

    mode = DeployMode.LOCAL

    def __init__(self, chrome_path: str | None = None, timeout_ms: int | None = None):
        self.chrome_path = chrome_path if chrome_path is not None else config.LOCAL_CHROME_PATH
        self.timeout_ms = timeout_ms or config.PDF_TIMEOUT_MS

    @property
    def page_options(self) -> dict:
        return {}

    def launch_options(self) -> dict:
        options = {"headless": True, "timeout": self.timeout_ms}
        if self.chrome_path and os.path.exists(self.chrome_path):
            options["executable_path"] = self.chrome_path
        else:
            logger.debug("No Chrome at %s, using Playwright's Chromium", self.chrome_path)
        return options

    async def launch(self, playwright):
        options = self.launch_options()
        logger.info("Launching local Chromium (%s)", options.get("executable_path", "bundled"))
        return await playwright.chromium.launch(**options)


def get_launcher(mode: DeployMode | None = None):
    """Launcher for the given (or configured) deployment mode."""
    mode = mode or resolve_deploy_mode()
    logger.info("PDF export env: mode=%s VERCEL=%s ENV=%s", mode.value, config.IS_VERCEL, config.ENV)
    if mode is DeployMode.HOSTED:
        return HostedLauncher()
    return LocalLauncher()
