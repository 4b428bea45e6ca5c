"""Tests for deploy-mode detection and browser launch strategies."""

import asyncio

import pytest

from aliven_paths import config
from aliven_paths.services import browser
from aliven_paths.services.browser import (
    SERVERLESS_ARGS,
    DeployMode,
    HostedLauncher,
    LocalLauncher,
    get_launcher,
    resolve_deploy_mode,
)


class TestResolveDeployMode:
    @pytest.fixture(autouse=True)
    def _no_platform_env(self, monkeypatch):
        monkeypatch.setattr(config, "DEPLOY_MODE", "")
        monkeypatch.setattr(config, "IS_VERCEL", False)
        monkeypatch.setattr(config, "ENV", "development")

    def test_explicit_value(self):
        assert resolve_deploy_mode("hosted") is DeployMode.HOSTED
        assert resolve_deploy_mode(" LOCAL ") is DeployMode.LOCAL

    def test_configured_value(self, monkeypatch):
        monkeypatch.setattr(config, "DEPLOY_MODE", "hosted")
        assert resolve_deploy_mode() is DeployMode.HOSTED

    def test_default_is_local(self):
        assert resolve_deploy_mode() is DeployMode.LOCAL

    def test_vercel_is_hosted(self, monkeypatch):
        monkeypatch.setattr(config, "IS_VERCEL", True)
        assert resolve_deploy_mode() is DeployMode.HOSTED

    def test_production_env_is_hosted(self, monkeypatch):
        monkeypatch.setattr(config, "ENV", "production")
        assert resolve_deploy_mode() is DeployMode.HOSTED

    def test_unknown_value_falls_back_to_detection(self, monkeypatch):
        monkeypatch.setattr(config, "IS_VERCEL", True)
        assert resolve_deploy_mode("lambda") is DeployMode.HOSTED


class TestGetLauncher:
    def test_hosted(self):
        assert isinstance(get_launcher(DeployMode.HOSTED), HostedLauncher)

    def test_local(self):
        assert isinstance(get_launcher(DeployMode.LOCAL), LocalLauncher)


class TestHostedLauncher:
    def test_options(self):
        launcher = HostedLauncher(executable_path="/opt/chromium", timeout_ms=5000)
        options = launcher.launch_options()
        assert options["args"] == SERVERLESS_ARGS
        assert options["headless"] is True
        assert options["executable_path"] == "/opt/chromium"
        assert options["timeout"] == 5000
        assert launcher.page_options == {"viewport": browser.SERVERLESS_VIEWPORT}

    def test_bundled_chromium_without_executable(self):
        assert "executable_path" not in HostedLauncher(executable_path="").launch_options()

    def test_launch(self, fake_playwright):
        launcher = HostedLauncher(executable_path="/opt/chromium")
        result = asyncio.run(launcher.launch(fake_playwright))
        assert result is fake_playwright.browser
        assert fake_playwright.chromium.launch_calls[0]["executable_path"] == "/opt/chromium"


class TestLocalLauncher:
    def test_uses_installed_chrome(self, tmp_path):
        chrome = tmp_path / "Google Chrome"
        chrome.write_text("")
        options = LocalLauncher(chrome_path=str(chrome)).launch_options()
        assert options["executable_path"] == str(chrome)
        assert options["headless"] is True

    def test_falls_back_to_bundled(self, tmp_path):
        options = LocalLauncher(chrome_path=str(tmp_path / "missing")).launch_options()
        assert "executable_path" not in options
        assert "args" not in options

    def test_no_page_options(self):
        assert LocalLauncher(chrome_path="").page_options == {}
