"""Utility helpers shared by the descriptor loader."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

TRUE_VALUES = frozenset({"true"})


def _child_text(parent: Element | None, tag: str) -> str:
    """Return the text of the first ``tag`` child, or an empty string."""
    if parent is None:
        return ""
    child = parent.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_flag(value: str | None, *, default: bool) -> bool:
    """Interpret a ``"true"``/``"false"`` attribute; anything else is false."""
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def _section_entries(root: Element, section: str, entry: str) -> list[Element]:
    """Return the ``entry`` children of the first ``section`` element."""
    container = root.find(section)
    if container is None:
        return []
    return container.findall(entry)


__all__ = ["_child_text", "_optional_str", "_parse_flag", "_section_entries"]
