"""Parse XML page descriptors into typed models.

This subpackage reads a ``<page>`` document (title, handle, links, style
overrides, image directives and the default-icon flag) and produces a frozen
:class:`PageDescriptor` that the compiler consumes. The primary entry point is
:func:`load_descriptor`; every section is optional and malformed entries are
skipped rather than failing the page.

Examples
--------
>>> from linkpage.descriptor import parse_descriptor
>>> page = parse_descriptor("<page><title>T</title></page>")
>>> page.title, page.default_icons_enabled
('T', True)
"""

from .loader import load_descriptor, parse_descriptor
from .models import (
    DescriptorError,
    ImageDirective,
    ImageRepeat,
    ImageSlot,
    LinkEntry,
    PageDescriptor,
    StyleVar,
)

__all__ = [
    "DescriptorError",
    "ImageDirective",
    "ImageRepeat",
    "ImageSlot",
    "LinkEntry",
    "PageDescriptor",
    "StyleVar",
    "load_descriptor",
    "parse_descriptor",
]
