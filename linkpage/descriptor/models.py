"""Typed dataclasses describing a parsed page descriptor."""

from __future__ import annotations

import dataclasses as dc
import enum


class DescriptorError(ValueError):
    """Raised when a descriptor cannot be read or is not a page document."""


class ImageSlot(enum.StrEnum):
    """Reserved directive names understood by the image resolver."""

    MAIN_BACKGROUND = "--background-img-main"
    LINK_BUTTON_BACKGROUND = "--background-img-link-btn"
    COPY_ICON = "--copy-icon"
    CLIPBOARD_ICON = "--clipboard-icon"

    @property
    def is_background(self) -> bool:
        """Return whether the slot renders a CSS background rule."""
        return self in _DEFAULT_SIZES


class ImageRepeat(enum.StrEnum):
    """CSS ``background-repeat`` values with first-class support."""

    REPEAT = "repeat"
    NO_REPEAT = "no-repeat"


_DEFAULT_SIZES: dict[ImageSlot, str] = {
    ImageSlot.MAIN_BACKGROUND: "cover",
    ImageSlot.LINK_BUTTON_BACKGROUND: "100% 100%",
}


@dc.dataclass(frozen=True, slots=True)
class LinkEntry:
    """A single link button; ``text`` may be empty or repeated across entries."""

    text: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class StyleVar:
    """A CSS custom property override supplied by the descriptor."""

    name: str
    value: str


@dc.dataclass(frozen=True, slots=True)
class ImageDirective:
    """An image assignment for one of the reserved :class:`ImageSlot` names.

    Attributes
    ----------
    slot : ImageSlot
        Which background or icon the directive targets.
    value : str
        URL (or relative path) of the image.
    repeat : str
        ``background-repeat`` value; defaults to ``"no-repeat"``. Values other
        than the :class:`ImageRepeat` members are passed through untouched.
    size : str or None
        ``background-size`` value; ``None`` selects the slot default.
    """

    slot: ImageSlot
    value: str
    repeat: str = ImageRepeat.NO_REPEAT.value
    size: str | None = None

    @property
    def effective_size(self) -> str:
        """Return the explicit size or the slot-specific default."""
        if self.size:
            return self.size
        return _DEFAULT_SIZES.get(self.slot, "auto")


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Everything needed to compile one page, produced once per input file."""

    title: str = ""
    handle: str = ""
    links: tuple[LinkEntry, ...] = ()
    style_overrides: tuple[StyleVar, ...] = ()
    image_directives: tuple[ImageDirective, ...] = ()
    default_icons_enabled: bool = True


__all__ = [
    "DescriptorError",
    "ImageDirective",
    "ImageRepeat",
    "ImageSlot",
    "LinkEntry",
    "PageDescriptor",
    "StyleVar",
]
