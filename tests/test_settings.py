"""Tests for loading ``linkpage.yaml`` build settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkpage.settings import BuildSettings, SettingsError, load_build_settings


def _write_settings(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "linkpage.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_defaults_when_no_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_build_settings() == BuildSettings()


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_build_settings(tmp_path / "missing.yaml")


def test_values_are_loaded_and_paths_resolved(tmp_path: Path) -> None:
    path = _write_settings(
        tmp_path,
        """
input_dir: pages
output_dir: /srv/public
escape_markup: false
unique_ids: true
workers: 2
        """,
    )
    settings = load_build_settings(path)
    assert settings.input_dir == tmp_path / "pages"
    assert settings.output_dir == Path("/srv/public")
    assert settings.escape_markup is False
    assert settings.unique_ids is True
    assert settings.workers == 2


def test_default_file_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_settings(tmp_path, "output_dir: dist")
    monkeypatch.chdir(tmp_path)
    settings = load_build_settings()
    assert settings.output_dir == Path("dist")
    assert settings.input_dir == Path(".")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list",
        "workers: 0",
        "workers: true",
        "escape_markup: maybe",
        "input_dir: ''",
        "colour: pink",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, text: str) -> None:
    path = _write_settings(tmp_path, text)
    with pytest.raises(SettingsError):
        load_build_settings(path)


def test_with_overrides_skips_none() -> None:
    base = BuildSettings(workers=3)
    updated = base.with_overrides(output_dir=Path("out"), workers=None)
    assert updated.output_dir == Path("out")
    assert updated.workers == 3
    assert base.output_dir == Path("build"), "original settings are untouched"


@pytest.mark.parametrize("workers", [0, -2])
def test_with_overrides_rejects_non_positive_workers(workers: int) -> None:
    with pytest.raises(SettingsError, match="positive integer"):
        BuildSettings().with_overrides(workers=workers)
