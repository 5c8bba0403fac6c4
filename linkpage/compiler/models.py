"""Shared dataclasses used by the page compilation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class ResolvedImages:
    """CSS fragments and icon paths derived from image directives.

    Attributes
    ----------
    main_background_css : str
        ``html`` background rule, or an empty string when no directive applies.
    link_button_background_css : str
        ``.link-btn`` background rule, or an empty string.
    copy_icon_path : str
        Source of the icon shown inside every copy button.
    clipboard_icon_path : str
        Source of the icon shown inside the snackbar.
    """

    main_background_css: str
    link_button_background_css: str
    copy_icon_path: str
    clipboard_icon_path: str


@dc.dataclass(frozen=True, slots=True)
class LinkView:
    """Template-facing view of a link entry with its derived element id."""

    text: str
    url: str
    element_id: str

    @property
    def nav_id(self) -> str:
        return f"navto-{self.element_id}"

    @property
    def copy_id(self) -> str:
        return f"copy-{self.element_id}"


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """Final HTML document plus the bundled assets it depends on."""

    html: str
    assets: tuple[str, ...] = ()

    @property
    def copy_default_icons(self) -> bool:
        """Return whether the bundled icons must be copied next to the page."""
        return bool(self.assets)


__all__ = ["LinkView", "RenderedPage", "ResolvedImages"]
