"""Utilities for resolving, rendering, and compiling link pages."""

from .identifiers import assign_ids, build_id, link_views
from .markup import MarkupRenderer
from .models import LinkView, RenderedPage, ResolvedImages
from .page_compiler import PageCompiler, compile_page
from .script import ScriptRenderer
from .theme import ThemeResolver

__all__ = [
    "LinkView",
    "MarkupRenderer",
    "PageCompiler",
    "RenderedPage",
    "ResolvedImages",
    "ScriptRenderer",
    "ThemeResolver",
    "assign_ids",
    "build_id",
    "compile_page",
    "link_views",
]
