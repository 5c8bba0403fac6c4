"""Derive DOM ids for link entries.

Markup and script rendering both call :func:`link_views`, so the ``navto-*``
and ``copy-*`` ids in the document always match the ids the listeners are
registered on.

Only the first whitespace run of the lowercased text is removed: ``"a  b  c"``
becomes ``"ab  c"``. Generated pages in the wild depend on these ids, so the
derivation stays as is. Duplicate texts yield duplicate ids unless
``unique=True`` is requested.
"""

from __future__ import annotations

import re
import typing as typ

from .models import LinkView

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from linkpage.descriptor import LinkEntry

_WHITESPACE_RUN = re.compile(r"\s+")


def build_id(text: str, index: int) -> str:
    """Return the id suffix for a link with ``text`` at position ``index``.

    Examples
    --------
    >>> build_id("Hello World", 0)
    'helloworld'
    >>> build_id("a  b  c", 0)
    'ab  c'
    >>> build_id("", 3)
    '3'
    """
    normalized = _WHITESPACE_RUN.sub("", text.lower(), count=1)
    return normalized or str(index)


def assign_ids(links: cabc.Sequence[LinkEntry], *, unique: bool = False) -> list[str]:
    """Return one id suffix per link, in order.

    With ``unique`` set, an id already handed out gets ``-<index>`` appended
    until it no longer collides.
    """
    ids: list[str] = []
    seen: set[str] = set()
    for index, link in enumerate(links):
        element_id = build_id(link.text, index)
        if unique:
            while element_id in seen:
                element_id = f"{element_id}-{index}"
        seen.add(element_id)
        ids.append(element_id)
    return ids


def link_views(
    links: cabc.Sequence[LinkEntry], *, unique: bool = False
) -> list[LinkView]:
    """Pair every link entry with its derived element id."""
    return [
        LinkView(text=link.text, url=link.url, element_id=element_id)
        for link, element_id in zip(
            links, assign_ids(links, unique=unique), strict=True
        )
    ]


__all__ = ["assign_ids", "build_id", "link_views"]
