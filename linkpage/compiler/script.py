"""Render the embedded script that wires copy and navigation handlers."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader
from jinja2.utils import htmlsafe_json_dumps

from linkpage._constants import TEMPLATES_DIR

from .identifiers import link_views

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from linkpage.descriptor import LinkEntry


def _json_string(value: str) -> str:
    """Encode ``value`` as a JS string literal safe inside ``<script>``."""
    return str(htmlsafe_json_dumps(value))


def _raw_string(value: str) -> str:
    return f'"{value}"'


def _raw_id(value: str) -> str:
    return f"'{value}'"


class ScriptRenderer:
    """Render the page script: helper functions plus per-link listeners."""

    def __init__(
        self,
        *,
        escape_markup: bool = True,
        unique_ids: bool = False,
        templates_dir: Path | None = None,
    ) -> None:
        self.unique_ids = unique_ids
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        if escape_markup:
            self.env.filters["js_id"] = _json_string
            self.env.filters["js_string"] = _json_string
        else:
            self.env.filters["js_id"] = _raw_id
            self.env.filters["js_string"] = _raw_string
        self.template = self.env.get_template("page_script.js.jinja")

    def render_script(self, links: cabc.Sequence[LinkEntry]) -> str:
        """Return the script source for ``links``.

        Each link contributes two ``mouseup`` listeners, registered in input
        order: one on ``navto-<id>`` calling ``navigateTo`` and one on
        ``copy-<id>`` calling ``copyToClipboard``, both with the link URL.
        """
        return self.template.render(links=link_views(links, unique=self.unique_ids))


__all__ = ["ScriptRenderer"]
