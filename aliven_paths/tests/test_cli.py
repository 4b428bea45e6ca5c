"""Tests for the aliven-paths command line."""

import json
from urllib.parse import parse_qs, urlparse

import pytest

from aliven_paths import cli
from aliven_paths.services.drafts import DraftStore, JsonFileStorage


@pytest.fixture
def run(drafts_file):
    def _run(*argv):
        return cli.main(["--drafts-file", str(drafts_file), *argv])
    return _run


class TestPreview:
    def test_paths(self, run, capsys):
        assert run("paths") == 0
        out = capsys.readouterr().out
        assert "stillness" in out
        assert "Aliven Rooted Strength Path" in out

    def test_preview(self, run, capsys):
        assert run("preview", "strength") == 0
        out = capsys.readouterr().out
        assert "Week 4" in out
        assert "Strength (Pilates-based) + Yoga" in out

    def test_unknown_path(self, run, capsys):
        with pytest.raises(SystemExit) as exc:
            run("preview", "nope")
        assert exc.value.code == 2
        assert "Unknown path" in capsys.readouterr().err


class TestDrafts:
    def test_save_list_delete(self, run, drafts_file, capsys):
        assert run("drafts", "save", "Focus", "--path", "stillness",
                   "--prompt", "2", "Custom prompt") == 0
        store = DraftStore(JsonFileStorage(drafts_file))
        [draft] = store.list()
        assert draft.name == "Focus"
        assert draft.draftPrompts == {2: "Custom prompt"}
        assert draft.draftPractices == {}

        capsys.readouterr()
        run("drafts", "list")
        assert draft.id in capsys.readouterr().out

        assert run("drafts", "delete", draft.id) == 0
        assert store.list() == []

    def test_clear(self, run, drafts_file):
        run("drafts", "save", "A", "--path", "asana")
        run("drafts", "save", "B", "--path", "asana")
        assert run("drafts", "clear") == 0
        assert DraftStore(JsonFileStorage(drafts_file)).list() == []

    def test_empty_list(self, run, capsys):
        assert run("drafts", "list") == 0
        assert "No saved drafts yet." in capsys.readouterr().out

    def test_show(self, run, drafts_file, capsys):
        run("drafts", "save", "A", "--path", "asana", "--practices", "3", "Rest")
        [draft] = DraftStore(JsonFileStorage(drafts_file)).list()
        capsys.readouterr()
        assert run("drafts", "show", draft.id) == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown["draftPractices"] == {"3": "Rest"}

    def test_blank_name_rejected(self, run, capsys):
        assert run("drafts", "save", "  ", "--path", "asana") == 1
        assert "Draft name is required" in capsys.readouterr().err

    def test_link(self, run, drafts_file, capsys):
        run("drafts", "save", "A", "--path", "asana", "--prompt", "1", "Soft")
        [draft] = DraftStore(JsonFileStorage(drafts_file)).list()
        capsys.readouterr()
        assert run("drafts", "link", draft.id, "--base-url", "http://builder.test/") == 0
        url = urlparse(capsys.readouterr().out.strip())
        assert url.netloc == "builder.test"
        params = parse_qs(url.query)
        assert params["draftPathId"] == ["asana"]
        assert json.loads(params["draftPrompts"][0]) == {"1": "Soft"}

    def test_missing_draft(self, run):
        assert run("drafts", "show", "missing") == 1
        assert run("drafts", "link", "missing") == 1


class TestExport:
    @pytest.fixture
    def patched_exporter(self, monkeypatch, exporter):
        monkeypatch.setattr(cli, "PdfExporter", lambda: exporter)
        return exporter

    def test_writes_pdf(self, run, patched_exporter, fake_playwright, tmp_path):
        out = tmp_path / "plan.pdf"
        assert run("export", "stillness", "-o", str(out)) == 0
        assert out.read_bytes() == fake_playwright.browser.pdf_bytes
        assert "Aliven Personalized Path" in fake_playwright.browser.pages[0].html

    def test_applies_draft(self, run, drafts_file, patched_exporter, fake_playwright, tmp_path):
        run("drafts", "save", "A", "--path", "strength", "--prompt", "2", "Drafted prompt")
        [draft] = DraftStore(JsonFileStorage(drafts_file)).list()
        assert run("export", "--draft", draft.id, "-o", str(tmp_path / "d.pdf")) == 0
        assert "Drafted prompt" in fake_playwright.browser.pages[0].html

    def test_render_failure(self, run, patched_exporter, fake_playwright, tmp_path, capsys):
        fake_playwright.browser.fail_on = "pdf"
        assert run("export", "asana", "-o", str(tmp_path / "x.pdf")) == 1
        assert "PDF render failed" in capsys.readouterr().err
        assert not (tmp_path / "x.pdf").exists()
