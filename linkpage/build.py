"""Batch build: compile every descriptor in a directory and write the pages.

:class:`SiteBuilder` discovers ``*.xml`` descriptors in the input directory,
compiles them concurrently with a shared :class:`PageCompiler`, writes
one ``<stem>.html`` per descriptor into the output directory, and copies the
bundled icons into ``<output>/img`` when any page needs them.

A descriptor that cannot be read, parsed, or written is logged and recorded
in the returned :class:`BuildReport`; the remaining files are still built.

Example
-------
>>> from pathlib import Path
>>> from linkpage.build import SiteBuilder
>>> from linkpage.settings import BuildSettings
>>> settings = BuildSettings(Path("pages"), Path("public"))
>>> report = SiteBuilder(settings).run()  # doctest: +SKIP
>>> report.written  # doctest: +SKIP
[PosixPath('public/index.html')]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ._constants import (
    ASSET_DIRNAME,
    ASSETS_DIR,
    DESCRIPTOR_SUFFIX,
    OUTPUT_FILENAME_TEMPLATE,
)
from .compiler import PageCompiler
from .descriptor import DescriptorError, load_descriptor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .compiler import RenderedPage
    from .settings import BuildSettings

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BuildFailure:
    """A file that could not be built or copied."""

    path: Path
    reason: str


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a batch build, in input order."""

    written: list[Path] = dc.field(default_factory=list)
    copied_assets: list[Path] = dc.field(default_factory=list)
    failures: list[BuildFailure] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class SiteBuilder:
    """Compile a directory of descriptors into static pages."""

    def __init__(
        self,
        settings: BuildSettings,
        *,
        compiler: PageCompiler | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        settings : BuildSettings
            Input/output directories, rendering options and worker count.
        compiler : PageCompiler, optional
            Compiler shared by all worker threads; built from ``settings``
            when omitted.
        assets_dir : Path, optional
            Directory holding the bundled icons; defaults to the package
            ``assets`` folder.
        """
        self.settings = settings
        self.compiler = compiler or PageCompiler(
            escape_markup=settings.escape_markup,
            unique_ids=settings.unique_ids,
        )
        self.assets_dir = assets_dir or ASSETS_DIR

    @property
    def output_dir(self) -> Path:
        return self.settings.output_dir

    def discover(self) -> list[Path]:
        """Return the descriptors in the input directory, sorted by name.

        Raises
        ------
        FileNotFoundError
            If the input directory does not exist.
        """
        input_dir = self.settings.input_dir
        if not input_dir.is_dir():
            msg = f"Input directory '{input_dir}' not found."
            raise FileNotFoundError(msg)
        return sorted(
            path
            for path in input_dir.iterdir()
            if path.suffix == DESCRIPTOR_SUFFIX and path.is_file()
        )

    def run(self) -> BuildReport:
        """Build every discovered descriptor and copy the required assets.

        Returns
        -------
        BuildReport
            Written pages, copied assets and per-file failures.

        Notes
        -----
        Creating the output directory is the only step whose failure aborts
        the run; every later error is confined to one file.
        """
        sources = self.discover()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        report = BuildReport()
        required_assets: set[str] = set()

        with ThreadPoolExecutor(max_workers=self.settings.workers) as executor:
            outcomes = list(executor.map(self._build_safely, sources))

        for outcome in outcomes:
            match outcome:
                case BuildFailure():
                    report.failures.append(outcome)
                case (Path() as output_path, page):
                    report.written.append(output_path)
                    required_assets.update(page.assets)

        if required_assets:
            copied, failed = self.copy_assets(required_assets)
            report.copied_assets.extend(copied)
            report.failures.extend(failed)
        return report

    def build_file(self, source: Path) -> tuple[Path, RenderedPage]:
        """Compile ``source`` and write its page, returning the output path.

        Raises
        ------
        DescriptorError
            If the descriptor cannot be read or parsed.
        OSError
            If the page cannot be written.
        """
        descriptor = load_descriptor(source)
        page = self.compiler.compile(descriptor)
        filename = OUTPUT_FILENAME_TEMPLATE.format(stem=source.stem)
        output_path = self.output_dir / filename
        output_path.write_text(page.html, encoding="utf-8")
        logger.debug("Generated %s from %s", output_path, source)
        return output_path, page

    def copy_assets(
        self, names: cabc.Iterable[str]
    ) -> tuple[list[Path], list[BuildFailure]]:
        """Copy bundled assets into ``<output>/img``, overwriting old copies."""
        target_dir = self.output_dir / ASSET_DIRNAME
        copied: list[Path] = []
        failures: list[BuildFailure] = []
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Error creating asset directory %s: %s", target_dir, exc)
            return copied, [BuildFailure(target_dir, str(exc))]
        for name in sorted(names):
            destination = target_dir / name
            try:
                shutil.copyfile(self.assets_dir / name, destination)
            except OSError as exc:
                logger.error("Error copying %s: %s", name, exc)
                failures.append(BuildFailure(destination, str(exc)))
                continue
            logger.info("Copied %s to %s", name, destination)
            copied.append(destination)
        return copied, failures

    def _build_safely(self, source: Path) -> tuple[Path, RenderedPage] | BuildFailure:
        try:
            return self.build_file(source)
        except DescriptorError as exc:
            logger.error("Error parsing descriptor %s: %s", source, exc)
            return BuildFailure(source, str(exc))
        except OSError as exc:
            logger.error("Error writing output for %s: %s", source, exc)
            return BuildFailure(source, str(exc))


__all__ = ["ASSETS_DIR", "BuildFailure", "BuildReport", "SiteBuilder"]
