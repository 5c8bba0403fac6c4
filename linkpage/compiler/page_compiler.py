"""High-level orchestration for compiling one descriptor into one page.

:class:`PageCompiler` resolves the theme and image directives with
:class:`~linkpage.compiler.theme.ThemeResolver`, renders the script and the
document with the script and markup renderers, and reports which bundled
assets the page needs. It performs no I/O, so one compiler may be shared
between threads.

Example
-------
>>> from linkpage.descriptor import LinkEntry, PageDescriptor
>>> from linkpage.compiler import PageCompiler
>>> page = PageCompiler().compile(
...     PageDescriptor(title="T", handle="H", links=(LinkEntry("A", "http://a"),))
... )
>>> "<title>T</title>" in page.html
True
>>> page.assets
('clipboard.png', 'copy.png')
"""

from __future__ import annotations

import typing as typ

from linkpage._constants import DEFAULT_ICON_ASSETS

from .markup import MarkupRenderer
from .models import RenderedPage
from .script import ScriptRenderer
from .theme import ThemeResolver

if typ.TYPE_CHECKING:
    from pathlib import Path

    from linkpage.descriptor import PageDescriptor


class PageCompiler:
    """Compile :class:`PageDescriptor` objects into :class:`RenderedPage` objects."""

    def __init__(
        self,
        *,
        escape_markup: bool = True,
        unique_ids: bool = False,
        templates_dir: Path | None = None,
        resolver: ThemeResolver | None = None,
    ) -> None:
        """Initialize the resolver and both renderers.

        Parameters
        ----------
        escape_markup : bool, optional
            Escape descriptor text in markup and JSON-encode URLs in the
            script (default). ``False`` interpolates values verbatim.
        unique_ids : bool, optional
            Append ``-<index>`` to ids repeated by links with the same text.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        resolver : ThemeResolver, optional
            Pre-configured resolver, e.g. one carrying a different default
            theme.
        """
        self.resolver = resolver or ThemeResolver(
            escape_markup=escape_markup, templates_dir=templates_dir
        )
        self.markup = MarkupRenderer(
            escape_markup=escape_markup,
            unique_ids=unique_ids,
            templates_dir=templates_dir,
        )
        self.script = ScriptRenderer(
            escape_markup=escape_markup,
            unique_ids=unique_ids,
            templates_dir=templates_dir,
        )

    def compile(self, descriptor: PageDescriptor) -> RenderedPage:
        """Render ``descriptor`` into a complete HTML document."""
        theme = self.resolver.resolve_theme(descriptor.style_overrides)
        images = self.resolver.resolve_images(descriptor.image_directives)
        script = self.script.render_script(descriptor.links)
        html = self.markup.render_document(
            title=descriptor.title,
            handle=descriptor.handle,
            theme_css=self.resolver.render_theme_css(theme),
            main_background_css=images.main_background_css,
            link_button_background_css=images.link_button_background_css,
            links=descriptor.links,
            copy_icon_path=images.copy_icon_path,
            clipboard_icon_path=images.clipboard_icon_path,
            script=script,
        )
        assets = DEFAULT_ICON_ASSETS if descriptor.default_icons_enabled else ()
        return RenderedPage(html=html, assets=assets)


def compile_page(descriptor: PageDescriptor, **options: typ.Any) -> RenderedPage:
    """Compile ``descriptor`` with a throwaway :class:`PageCompiler`."""
    return PageCompiler(**options).compile(descriptor)


__all__ = ["PageCompiler", "compile_page"]
