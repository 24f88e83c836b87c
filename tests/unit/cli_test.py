"""Tests for the spine CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from spine import __version__, archive_resource
from spine.cli.app import app
from tests.sample_resources import Post

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [[], ["inspect"], ["version"]],
    ids=["root", "inspect", "version"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_inspect_shows_archived_values(tmp_path: Path, loaded_post: Post) -> None:
    archive_path = tmp_path / "post.json"
    archive_path.write_bytes(archive_resource(loaded_post))

    result = runner.invoke(app, ["inspect", str(archive_path)])

    assert result.exit_code == 0
    assert "'posts'" in result.output
    assert "'42'" in result.output
    assert "isLoaded" in result.output
    assert "'Hello'" in result.output


def test_inspect_rejects_malformed_archive(tmp_path: Path) -> None:
    archive_path = tmp_path / "broken.json"
    archive_path.write_bytes(b"not an archive")

    result = runner.invoke(app, ["inspect", str(archive_path)])

    assert result.exit_code == 1
    assert "Malformed resource archive" in result.output


def test_inspect_requires_existing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_invalid_log_level_exits_with_message(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPINE_LOG_LEVEL", "loud")
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 1
    assert "Invalid spine configuration" in result.output


def test_inspect_with_unknown_encoding_exits_with_message(
    tmp_path: Path, loaded_post: Post, monkeypatch: pytest.MonkeyPatch
) -> None:
    archive_path = tmp_path / "post.json"
    archive_path.write_bytes(archive_resource(loaded_post))
    monkeypatch.setenv("SPINE_ARCHIVE_ENCODING", "bogus")

    result = runner.invoke(app, ["inspect", str(archive_path)])

    assert result.exit_code == 1
    assert "Unknown archive encoding 'bogus'" in result.output
