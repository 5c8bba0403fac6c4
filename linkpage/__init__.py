"""Utilities for generating static link-in-bio pages.

This package turns XML page descriptors into self-contained HTML documents
with embedded CSS and JavaScript, and exposes the CLI used to build a whole
directory of them.

Exports
-------
- ``app``: Cyclopts application behind the ``linkpage`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``compile_page``: Compile a single :class:`PageDescriptor` in memory.
- ``load_descriptor``: Parse a descriptor file.

Examples
--------
>>> from linkpage import compile_page, load_descriptor
>>> page = compile_page(load_descriptor(Path("index.xml")))  # doctest: +SKIP
>>> page.html.startswith("<!DOCTYPE html>")  # doctest: +SKIP
True
"""

from __future__ import annotations

from .cli import app, main
from .compiler import PageCompiler, RenderedPage, compile_page
from .descriptor import PageDescriptor, load_descriptor, parse_descriptor

__all__ = [
    "PageCompiler",
    "PageDescriptor",
    "RenderedPage",
    "app",
    "compile_page",
    "load_descriptor",
    "main",
    "parse_descriptor",
]
