"""Behaviour tests for building a directory of link page descriptors.

These pytest-bdd scenarios drive :class:`linkpage.build.SiteBuilder` over a
temporary descriptor directory. The feature file ``page_build.feature``
checks that a well-formed descriptor becomes ``index.html`` with one link
button per entry and the bundled icons, and that a malformed sibling is
reported without blocking the rest of the build.

Usage
-----
Run ``pytest tests/bdd/test_page_build.py -v`` after installing the test
extra (``pip install -e .[test]``). No network access is required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from linkpage.build import BuildReport, SiteBuilder
from linkpage.settings import BuildSettings

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "page_build.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a descriptor directory with a two-link page")
def given_two_link_page(tmp_path: Path, scenario_state: ScenarioState) -> None:
    """Write ``index.xml`` with two links into a fresh input directory."""
    input_dir = tmp_path / "pages"
    input_dir.mkdir()
    (input_dir / "index.xml").write_text(
        """
<page>
    <title>T</title>
    <handle>H</handle>
    <links>
        <link><text>A</text><url>http://a</url></link>
        <link><text>B</text><url>http://b</url></link>
    </links>
</page>
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["input_dir"] = input_dir
    scenario_state["output_dir"] = tmp_path / "public"


@given("a malformed descriptor named broken.xml")
def given_broken_descriptor(scenario_state: ScenarioState) -> None:
    """Add a descriptor that is not well-formed XML."""
    input_dir = typ.cast("Path", scenario_state["input_dir"])
    (input_dir / "broken.xml").write_text("<page><links>", encoding="utf-8")


@when("I build the directory")
def when_build(scenario_state: ScenarioState) -> None:
    """Run the batch builder and keep its report."""
    settings = BuildSettings(
        input_dir=scenario_state["input_dir"],
        output_dir=scenario_state["output_dir"],
    )
    scenario_state["report"] = SiteBuilder(settings).run()


@then("the output contains index.html with two link buttons")
def then_index_has_two_links(scenario_state: ScenarioState) -> None:
    """Verify the rendered page lists both links in order."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / "index.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    buttons = soup.select(".link-btn")
    assert [button["title"] for button in buttons] == ["http://a", "http://b"], (
        "expected one link button per descriptor entry, in order"
    )
    assert soup.title is not None
    assert soup.title.string == "T"


@then("the default icons are copied next to the page")
def then_icons_copied(scenario_state: ScenarioState) -> None:
    """Verify the bundled icons landed in ``img/``."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    for name in ("clipboard.png", "copy.png"):
        assert (output_dir / "img" / name).is_file(), f"expected img/{name}"


@then("broken.xml is reported as failed")
def then_broken_reported(scenario_state: ScenarioState) -> None:
    """Verify the malformed descriptor is the only failure."""
    report = typ.cast("BuildReport", scenario_state["report"])
    assert [failure.path.name for failure in report.failures] == ["broken.xml"]
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not (output_dir / "broken.html").exists()
