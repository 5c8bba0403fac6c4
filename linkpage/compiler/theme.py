"""Resolve theme variables and image directives into CSS fragments."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader

from linkpage._constants import DEFAULT_ICON_PATHS, DEFAULT_THEME, TEMPLATES_DIR
from linkpage.descriptor import ImageSlot

from .models import ResolvedImages

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from linkpage.descriptor import ImageDirective, StyleVar

_CSS_VALUE_ESCAPES = str.maketrans({"<": "\\3c "})
_CSS_STRING_ESCAPES = str.maketrans(
    {"\\": "\\\\", "'": "\\'", "<": "\\3c ", "\n": "\\a "}
)

BACKGROUND_SELECTORS: dict[ImageSlot, str] = {
    ImageSlot.MAIN_BACKGROUND: "html",
    ImageSlot.LINK_BUTTON_BACKGROUND: ".link-btn",
}


def _css_value(value: str) -> str:
    """Escape ``<`` so a declaration value cannot close the ``<style>`` element."""
    return value.translate(_CSS_VALUE_ESCAPES)


def _css_string(value: str) -> str:
    """Escape ``value`` for a single-quoted CSS string such as ``url('...')``."""
    return value.translate(_CSS_STRING_ESCAPES)


def _verbatim(value: str) -> str:
    return value


class ThemeResolver:
    """Merge descriptor overrides with the default theme and image settings."""

    def __init__(
        self,
        *,
        defaults: cabc.Mapping[str, str] = DEFAULT_THEME,
        icon_defaults: cabc.Mapping[str, str] = DEFAULT_ICON_PATHS,
        escape_markup: bool = True,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the resolver with read-only default tables.

        Parameters
        ----------
        defaults : Mapping[str, str], optional
            CSS custom properties every page starts from, in declaration order.
        icon_defaults : Mapping[str, str], optional
            Icon sources keyed by ``"copy"`` and ``"clipboard"``, used when the
            descriptor does not name its own icons.
        escape_markup : bool, optional
            Escape theme values and image URLs so they stay inside the
            stylesheet (default). ``False`` inserts them verbatim.
        templates_dir : Path, optional
            Directory containing the CSS templates; defaults to the package
            templates.
        """
        self.defaults = defaults
        self.icon_defaults = icon_defaults
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        value_filter, string_filter = (
            (_css_value, _css_string) if escape_markup else (_verbatim, _verbatim)
        )
        self.env.filters["css_value"] = value_filter
        self.env.filters["css_string"] = string_filter
        self._theme_template = self.env.get_template("theme_vars.css.jinja")
        self._image_template = self.env.get_template("image_rule.css.jinja")

    def resolve_theme(self, overrides: cabc.Iterable[StyleVar]) -> dict[str, str]:
        """Return the default theme with ``overrides`` applied by name.

        Known names keep their position and take the new value; unknown names
        are appended in the order they first appear.

        Examples
        --------
        >>> from linkpage.descriptor import StyleVar
        >>> overrides = [StyleVar("--spacing-large", "1px")]
        >>> theme = ThemeResolver().resolve_theme(overrides)
        >>> theme["--spacing-large"]
        '1px'
        """
        theme = dict(self.defaults)
        for override in overrides:
            theme[override.name] = override.value
        return theme

    def render_theme_css(self, theme: cabc.Mapping[str, str]) -> str:
        """Serialize ``theme`` as a ``:root`` custom-property block."""
        return self._theme_template.render(theme=theme)

    def resolve_images(
        self, directives: cabc.Iterable[ImageDirective]
    ) -> ResolvedImages:
        """Turn image directives into background rules and icon sources.

        The last directive for a slot wins. Background slots without a
        directive yield an empty fragment so the theme ``background-color``
        still applies.
        """
        chosen: dict[ImageSlot, ImageDirective] = {}
        for directive in directives:
            chosen[directive.slot] = directive

        return ResolvedImages(
            main_background_css=self._background_rule(
                chosen.get(ImageSlot.MAIN_BACKGROUND)
            ),
            link_button_background_css=self._background_rule(
                chosen.get(ImageSlot.LINK_BUTTON_BACKGROUND)
            ),
            copy_icon_path=self._icon_path(chosen.get(ImageSlot.COPY_ICON), "copy"),
            clipboard_icon_path=self._icon_path(
                chosen.get(ImageSlot.CLIPBOARD_ICON), "clipboard"
            ),
        )

    def _background_rule(self, directive: ImageDirective | None) -> str:
        if directive is None:
            return ""
        return self._image_template.render(
            selector=BACKGROUND_SELECTORS[directive.slot],
            image=directive.value,
            repeat=directive.repeat,
            size=directive.effective_size,
        )

    def _icon_path(self, directive: ImageDirective | None, key: str) -> str:
        if directive is None:
            return self.icon_defaults[key]
        return directive.value


__all__ = ["BACKGROUND_SELECTORS", "ThemeResolver"]
