"""Tests for the CLI entry point."""

import io
import json
from pathlib import Path

import pytest

from linkedin_syndicator.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("LINKEDIN_LIVE_MODE", raising=False)
    monkeypatch.delenv("LINKEDIN_ACCESS_TOKEN", raising=False)


class TestCli:
    def test_no_command_prints_help(self, capsys):
        main([])
        assert "linkedin-syndicate" in capsys.readouterr().out

    def test_status(self, capsys):
        main(["--config", str(FIXTURES / "sample_config.yaml"), "status"])
        out = capsys.readouterr().out
        assert "Access token:    configured" in out
        assert "Character limit: 1300" in out

    def test_preview_note(self, capsys):
        main(["preview", str(FIXTURES / "note.json")])
        preview = json.loads(capsys.readouterr().out)
        assert preview["post_type"] == "note"
        assert preview["commentary"] == "Hello world\n\nhttps://x.example/p/1"
        assert "article" not in preview

    def test_preview_article_wrapped_properties(self, capsys):
        main(["preview", str(FIXTURES / "article.json")])
        preview = json.loads(capsys.readouterr().out)
        assert preview["article"]["title"] == "Title"
        assert preview["thumbnail_source"] == "https://x.example/img.jpg"

    def test_post_mock_mode(self, capsys):
        main(["post", str(FIXTURES / "note.json")])
        assert capsys.readouterr().out.startswith("https://www.linkedin.com/feed/update/")

    def test_post_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(FIXTURES.joinpath("note.json").read_text()))
        main(["post", "-"])
        assert "feed/update" in capsys.readouterr().out

    def test_post_failure_exits(self, capsys, monkeypatch, transport):
        monkeypatch.setenv("LINKEDIN_LIVE_MODE", "true")
        monkeypatch.setenv("LINKEDIN_ACCESS_TOKEN", "expired")
        transport.add("GET", "https://api.linkedin.com/v2/userinfo", status=401)
        with pytest.raises(SystemExit) as excinfo:
            main(["post", str(FIXTURES / "note.json")])
        assert excinfo.value.code == 1
        assert "[401]" in capsys.readouterr().err
