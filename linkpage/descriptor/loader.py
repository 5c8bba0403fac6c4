"""Load page descriptor XML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
import xml.etree.ElementTree as ET

from .helpers import _child_text, _optional_str, _parse_flag, _section_entries
from .models import (
    DescriptorError,
    ImageDirective,
    ImageRepeat,
    ImageSlot,
    LinkEntry,
    PageDescriptor,
    StyleVar,
)

if typ.TYPE_CHECKING:
    from pathlib import Path
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)

ROOT_TAG = "page"
ICONS_ATTRIBUTES = ("defaultIcons", "icons")


def load_descriptor(path: Path) -> PageDescriptor:
    """Read and parse the descriptor stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to an ``.xml`` descriptor; the XML declaration decides
        its encoding (UTF-8 when absent).

    Returns
    -------
    PageDescriptor
        Parsed descriptor with every optional section defaulted.

    Raises
    ------
    DescriptorError
        If the file cannot be read, is not well-formed XML, or its root
        element is not ``<page>``.

    Examples
    --------
    >>> from pathlib import Path
    >>> descriptor = load_descriptor(Path("index.xml"))  # doctest: +SKIP
    >>> descriptor.title  # doctest: +SKIP
    'My Links'
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Unable to read descriptor '{path}': {exc}"
        raise DescriptorError(msg) from exc
    return parse_descriptor(data, source=str(path))


def parse_descriptor(text: str | bytes, *, source: str = "<string>") -> PageDescriptor:
    """Parse descriptor XML held in memory.

    Missing ``title``, ``handle``, ``links``, ``styles`` and ``img`` sections
    fall back to empty values. Individual style or image entries lacking a
    name or value are skipped without failing the whole document.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        msg = f"Descriptor '{source}' is not well-formed XML: {exc}"
        raise DescriptorError(msg) from exc
    if root.tag != ROOT_TAG:
        msg = (
            f"Descriptor '{source}' must have a <{ROOT_TAG}> root, "
            f"found <{root.tag}>."
        )
        raise DescriptorError(msg)

    return PageDescriptor(
        title=_child_text(root, "title"),
        handle=_child_text(root, "handle"),
        links=_build_links(root),
        style_overrides=_build_style_vars(root, source),
        image_directives=_build_image_directives(root, source),
        default_icons_enabled=_default_icons_enabled(root),
    )


def _build_links(root: Element) -> tuple[LinkEntry, ...]:
    """Build link entries in document order."""
    return tuple(
        LinkEntry(
            text=_child_text(element, "text"),
            url=_child_text(element, "url").strip(),
        )
        for element in _section_entries(root, "links", "link")
    )


def _build_style_vars(root: Element, source: str) -> tuple[StyleVar, ...]:
    """Build style overrides, dropping entries without a name or value."""
    overrides: list[StyleVar] = []
    for element in _section_entries(root, "styles", "var"):
        name = _optional_str(element.get("name"))
        value = _optional_str(element.text)
        if name is None or value is None:
            logger.debug("%s: skipping style var without name or value", source)
            continue
        overrides.append(StyleVar(name=name, value=value))
    return tuple(overrides)


def _build_image_directives(root: Element, source: str) -> tuple[ImageDirective, ...]:
    """Build image directives for recognised slots only."""
    directives: list[ImageDirective] = []
    for element in _section_entries(root, "img", "var"):
        name = _optional_str(element.get("name"))
        value = _optional_str(element.text)
        if name is None or value is None:
            logger.debug("%s: skipping image var without name or value", source)
            continue
        try:
            slot = ImageSlot(name)
        except ValueError:
            logger.debug("%s: ignoring unknown image slot %r", source, name)
            continue
        directives.append(
            ImageDirective(
                slot=slot,
                value=value,
                repeat=_optional_str(element.get("repeat"))
                or ImageRepeat.NO_REPEAT.value,
                size=_optional_str(element.get("size")),
            )
        )
    return tuple(directives)


def _default_icons_enabled(root: Element) -> bool:
    """Return the icon-copy flag from ``defaultIcons`` (or legacy ``icons``)."""
    for attribute in ICONS_ATTRIBUTES:
        value = root.get(attribute)
        if value is not None:
            return _parse_flag(value, default=True)
    return True


__all__ = ["load_descriptor", "parse_descriptor"]
