"""Cyclopts CLI entrypoint for building link pages from XML descriptors.

The ``linkpage`` console script compiles every ``*.xml`` descriptor in the
input directory into ``<name>.html`` in the output directory and copies the
bundled icons next to the pages. ``linkpage init`` scaffolds a starter
descriptor to edit.

Examples
--------
Build with the defaults (``.`` into ``./build``):

>>> from linkpage.cli import main
>>> main()  # doctest: +SKIP

Build a custom pair of directories:

>>> from linkpage.cli import app
>>> app(["pages", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from cyclopts.validators import Number

from .bootstrap import scaffold
from .build import SiteBuilder
from .settings import SettingsError, load_build_settings

app = App(
    name="linkpage",
    help="Generate static link-in-bio pages from XML descriptors.",
    config=cyclopts.config.Env("LINKPAGE_", command=False),
)

logger = logging.getLogger(__name__)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.default
def build(
    input_dir: typ.Annotated[
        Path | None, Parameter(help="Directory containing .xml descriptors")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Directory receiving the generated pages")
    ] = None,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a linkpage.yaml settings file")
    ] = None,
    escape_markup: typ.Annotated[
        bool | None, Parameter(help="HTML-escape descriptor text (default on)")
    ] = None,
    unique_ids: typ.Annotated[
        bool | None, Parameter(help="Disambiguate ids of links with equal text")
    ] = None,
    workers: typ.Annotated[
        int | None,
        Parameter(
            help="Number of descriptors compiled in parallel",
            validator=Number(gte=1),
        ),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Compile every descriptor in ``input_dir`` into ``output_dir``.

    Parameters
    ----------
    input_dir : Path or None, optional
        Descriptor directory; defaults to the settings file value or ``.``.
    output_dir : Path or None, optional
        Output directory; defaults to the settings file value or ``./build``.
    config : Path or None, optional
        Settings file; ``linkpage.yaml`` in the working directory is used when
        present.
    escape_markup, unique_ids, workers : optional
        Override the corresponding settings.
    verbose : bool, optional
        Log skipped descriptor entries and every generated page.

    Returns
    -------
    None
        Prints each written path. Exits with status 1 when any descriptor or
        asset failed, or when the settings or input directory are unusable.
    """
    _configure_logging(verbose)
    try:
        settings = load_build_settings(config).with_overrides(
            input_dir=input_dir,
            output_dir=output_dir,
            escape_markup=escape_markup,
            unique_ids=unique_ids,
            workers=workers,
        )
        report = SiteBuilder(settings).run()
    except (FileNotFoundError, SettingsError) as exc:
        logger.error("%s", exc)
        sys.exit(1)
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for path in report.copied_assets:
        print(f"copied {_format_path(path)}")
    if not report.ok:
        print(f"{len(report.failures)} file(s) failed", file=sys.stderr)
        sys.exit(1)


@app.command(help="Scaffold a starter index.xml descriptor.")
def init(
    directory: typ.Annotated[
        Path | None, Parameter(help="Where to write index.xml")
    ] = None,
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a linkpage.yaml settings file")
    ] = None,
    force: typ.Annotated[
        bool, Parameter(help="Overwrite an existing index.xml")
    ] = False,
) -> None:
    """Write the starter descriptor into ``directory`` (or the input dir)."""
    _configure_logging(verbose=False)
    target = directory or load_build_settings(config).input_dir
    written = scaffold(target, force=force)
    if written is None:
        print(f"kept existing {_format_path(target / 'index.xml')} (use --force)")
    else:
        print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``linkpage`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
