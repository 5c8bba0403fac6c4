"""Tests for the batch builder.

These tests run :class:`linkpage.build.SiteBuilder` against descriptor
directories created under ``tmp_path`` and check written pages, copied icons,
and per-file failure isolation.
"""

from __future__ import annotations

import typing as typ

import pytest

from linkpage.build import ASSETS_DIR, BuildFailure, SiteBuilder
from linkpage.settings import BuildSettings

if typ.TYPE_CHECKING:
    from pathlib import Path

PAGE_XML = """
<page{attributes}>
    <title>{title}</title>
    <links>
        <link><text>A</text><url>http://a</url></link>
    </links>
</page>
"""


def _write_descriptor(
    directory: Path, name: str, *, title: str = "T", attributes: str = ""
) -> Path:
    path = directory / name
    path.write_text(
        PAGE_XML.format(title=title, attributes=attributes).strip() + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Return an empty input directory and a not-yet-created output directory."""
    input_dir = tmp_path / "pages"
    input_dir.mkdir()
    return input_dir, tmp_path / "public"


def _builder(input_dir: Path, output_dir: Path, **options: typ.Any) -> SiteBuilder:
    settings = BuildSettings(input_dir=input_dir, output_dir=output_dir, **options)
    return SiteBuilder(settings)


def test_discover_only_picks_xml_files(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "b.xml")
    _write_descriptor(input_dir, "a.xml")
    (input_dir / "notes.txt").write_text("ignore me", encoding="utf-8")
    (input_dir / "nested.xml").mkdir()
    discovered = _builder(input_dir, output_dir).discover()
    assert [path.name for path in discovered] == ["a.xml", "b.xml"]


def test_run_writes_pages_and_icons(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "index.xml", title="Home")
    _write_descriptor(input_dir, "alt.xml", title="Alt")

    report = _builder(input_dir, output_dir, workers=2).run()

    assert report.ok, report.failures
    assert report.written == [output_dir / "alt.html", output_dir / "index.html"]
    index_html = (output_dir / "index.html").read_text(encoding="utf-8")
    assert "<title>Home</title>" in index_html
    for name in ("clipboard.png", "copy.png"):
        copied = output_dir / "img" / name
        assert copied.read_bytes() == (ASSETS_DIR / name).read_bytes()
    copied_names = sorted(path.name for path in report.copied_assets)
    assert copied_names == ["clipboard.png", "copy.png"]


def test_icons_skipped_when_pages_disable_them(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "index.xml", attributes=' defaultIcons="false"')
    report = _builder(input_dir, output_dir).run()
    assert report.ok
    assert not (output_dir / "img").exists()
    assert report.copied_assets == []


def test_broken_descriptor_does_not_stop_the_build(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "good.xml")
    broken = input_dir / "broken.xml"
    broken.write_text("<page><title>oops</page>", encoding="utf-8")

    report = _builder(input_dir, output_dir).run()

    assert report.written == [output_dir / "good.html"]
    assert [failure.path for failure in report.failures] == [broken]
    assert not report.ok
    assert not (output_dir / "broken.html").exists()


def test_write_failure_is_reported_per_file(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "index.xml")
    _write_descriptor(input_dir, "other.xml")
    (output_dir / "index.html").mkdir(parents=True)

    report = _builder(input_dir, output_dir).run()

    assert report.written == [output_dir / "other.html"]
    assert len(report.failures) == 1
    assert isinstance(report.failures[0], BuildFailure)
    assert report.failures[0].path == input_dir / "index.xml"


def test_asset_copy_is_idempotent(dirs: tuple[Path, Path]) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "index.xml")
    builder = _builder(input_dir, output_dir)
    builder.run()
    (output_dir / "img" / "copy.png").write_bytes(b"stale")

    copied, failures = builder.copy_assets({"copy.png", "clipboard.png"})

    assert failures == []
    assert len(copied) == 2
    expected = (ASSETS_DIR / "copy.png").read_bytes()
    assert (output_dir / "img" / "copy.png").read_bytes() == expected


def test_missing_asset_is_reported(dirs: tuple[Path, Path], tmp_path: Path) -> None:
    input_dir, output_dir = dirs
    _write_descriptor(input_dir, "index.xml")
    empty_assets = tmp_path / "assets"
    empty_assets.mkdir()
    builder = SiteBuilder(
        BuildSettings(input_dir=input_dir, output_dir=output_dir),
        assets_dir=empty_assets,
    )
    report = builder.run()
    assert report.written == [output_dir / "index.html"]
    assert sorted(failure.path.name for failure in report.failures) == [
        "clipboard.png",
        "copy.png",
    ]


def test_missing_input_directory(tmp_path: Path) -> None:
    builder = _builder(tmp_path / "nowhere", tmp_path / "out")
    with pytest.raises(FileNotFoundError, match="Input directory"):
        builder.run()
