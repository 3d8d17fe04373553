"""Tests for the command line entry point."""

import logging

import pytest

from termark import main as cli
from termark.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config reads and writes inside the test directory."""
    config_path = tmp_path / "config" / "config.json"
    monkeypatch.setattr(Config, "get_config_path", classmethod(lambda cls: config_path))
    return config_path


@pytest.fixture
def launched(monkeypatch):
    """Record app launches instead of starting the TUI."""
    calls = []
    monkeypatch.setattr(cli.TermarkApp, "run", lambda self: calls.append(self.file_path))
    return calls


def test_missing_file_exits(tmp_path, launched):
    """Test a nonexistent path stops before the app starts."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "missing.md")])

    assert "no such file" in str(excinfo.value.code)
    assert launched == []


def test_runs_app_with_file(tmp_path, launched):
    """Test a markdown file is handed to the app."""
    doc = tmp_path / "notes.md"
    doc.write_text("# Notes")

    cli.main([str(doc)])

    assert launched == [str(doc)]


def test_runs_app_without_file(launched):
    """Test the app starts with no file argument."""
    cli.main([])

    assert launched == [None]


def test_non_markdown_suffix_warns(tmp_path, launched, caplog):
    """Test other file types open with a warning."""
    doc = tmp_path / "notes.txt"
    doc.write_text("plain")

    with caplog.at_level(logging.WARNING):
        cli.main([str(doc)])

    assert "does not look like a markdown file" in caplog.text
    assert launched == [str(doc)]
