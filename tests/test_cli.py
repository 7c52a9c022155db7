import os
from pathlib import Path

from typer.testing import CliRunner

from fastpicker.cli import app
from fastpicker.infrastructure.folder_library import FolderMediaLibrary

runner = CliRunner()


def _touch(path: Path, mtime: float) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x00")
    os.utime(path, (mtime, mtime))


def _library(root: Path) -> Path:
    _touch(root / "a.jpg", 1_000)
    _touch(root / "b.jpg", 2_000)
    _touch(root / "clips" / "c.mp4", 3_000)
    return root


def test_albums_table_lists_smart_album_first(tmp_path):
    _touch(tmp_path / "pics" / "a.jpg", 1_000)
    _touch(tmp_path / "clips" / "c.mp4", 3_000)

    result = runner.invoke(app, ["albums", str(tmp_path)])

    assert result.exit_code == 0
    assert "recents" in result.stdout
    assert "folder:clips" in result.stdout
    assert result.stdout.index("recents") < result.stdout.index("folder:clips")


def test_single_tap_picks_immediately(tmp_path):
    result = runner.invoke(app, ["pick", str(_library(tmp_path)), "--tap", "b.jpg", "--tap", "a.jpg"])

    assert result.exit_code == 0
    assert "b.jpg" in result.stdout


def test_multi_select_keeps_tap_order_and_limit(tmp_path):
    root = _library(tmp_path)
    result = runner.invoke(
        app,
        ["pick", str(root), "--max", "2", "--tap", "clips/c.mp4", "--tap", "a.jpg", "--tap", "b.jpg"],
    )

    assert result.exit_code == 0
    assert "1. clips/c.mp4 (video)" in result.stdout
    assert "2. a.jpg (image)" in result.stdout
    assert "skipped b.jpg" in result.stdout


def test_previous_selection_is_restored(tmp_path):
    root = _library(tmp_path)
    result = runner.invoke(app, ["pick", str(root), "--max", "3", "-s", "b.jpg", "-s", "gone.jpg"])

    assert result.exit_code == 0
    assert "Selected 1/3" in result.stdout
    assert "1. b.jpg" in result.stdout


def test_denied_permission_selects_nothing(tmp_path):
    result = runner.invoke(app, ["pick", str(_library(tmp_path)), "--permission", "denied"])

    assert result.exit_code == 0
    assert "No access to media" in result.stdout
    assert "Nothing selected" in result.stdout


def test_invalid_max_selection_exits_with_configuration_error(tmp_path):
    result = runner.invoke(app, ["pick", str(_library(tmp_path)), "--max", "0"])

    assert result.exit_code == 2


def test_album_load_failure_is_reported_on_stderr(tmp_path, monkeypatch):
    def broken(self, request_type):
        raise OSError("disk unplugged")

    monkeypatch.setattr(FolderMediaLibrary, "_list_albums", broken)
    result = runner.invoke(app, ["albums", str(_library(tmp_path))])

    assert result.exit_code == 0
    assert "error: disk unplugged" in result.output
