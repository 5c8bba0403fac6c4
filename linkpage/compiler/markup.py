"""Render the link list and the full HTML document shell."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from linkpage._constants import (
    DEFAULT_ICON_PATHS,
    FAVICON_PATH,
    LOGO_PATH,
    TEMPLATES_DIR,
)

from .identifiers import link_views

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from linkpage.descriptor import LinkEntry


class MarkupRenderer:
    """Render page markup with named-slot Jinja templates."""

    def __init__(
        self,
        *,
        escape_markup: bool = True,
        unique_ids: bool = False,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and load its templates.

        Parameters
        ----------
        escape_markup : bool, optional
            HTML-escape title, handle, link text and URLs. Pass ``False`` to
            reproduce pages generated before escaping was introduced.
        unique_ids : bool, optional
            Disambiguate ids of links sharing the same text.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.escape_markup = escape_markup
        self.unique_ids = unique_ids
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=escape_markup,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._stylesheet_template = self.env.get_template("stylesheet.css.jinja")
        self._links_template = self.env.get_template("links.html.jinja")
        self._page_template = self.env.get_template("page.html.jinja")

    def render_stylesheet(
        self,
        theme_css: str,
        main_background_css: str = "",
        link_button_background_css: str = "",
    ) -> str:
        """Fill the base stylesheet's slots with the resolved CSS fragments."""
        return self._stylesheet_template.render(
            theme_css=Markup(theme_css),
            main_background_css=Markup(main_background_css),
            link_button_background_css=Markup(link_button_background_css),
        )

    def render_links(
        self,
        links: cabc.Sequence[LinkEntry],
        copy_icon_path: str = DEFAULT_ICON_PATHS["copy"],
    ) -> str:
        """Render one ``.link-btn`` block per link, in input order."""
        return self._links_template.render(
            links=link_views(links, unique=self.unique_ids),
            copy_icon_path=copy_icon_path,
        )

    def render_document(
        self,
        *,
        title: str,
        handle: str,
        theme_css: str,
        main_background_css: str,
        link_button_background_css: str,
        links: cabc.Sequence[LinkEntry],
        copy_icon_path: str,
        clipboard_icon_path: str,
        script: str,
    ) -> str:
        """Render the complete HTML document.

        Returns
        -------
        str
            The document text, always terminated by a newline.
        """
        stylesheet = self.render_stylesheet(
            theme_css, main_background_css, link_button_background_css
        )
        links_html = self.render_links(links, copy_icon_path)
        html = self._page_template.render(
            title=title,
            handle=handle,
            stylesheet=Markup(stylesheet),
            script=Markup(script),
            links_html=Markup(links_html),
            clipboard_icon_path=clipboard_icon_path,
            logo_path=LOGO_PATH,
            favicon_path=FAVICON_PATH,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["MarkupRenderer"]
