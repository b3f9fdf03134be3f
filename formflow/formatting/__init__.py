#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Formatting Module - geometry, styles and TOC entry generation.

Components:
- PageGeometry / Margins: page size and content area
- Stylesheet: resolved style values
- TOC generator: config resolution, extraction, numbering, anchors
"""

from .page_layout import PageGeometry, Margins, LayoutError, InvalidGeometryError
from .stylesheet import (
    Stylesheet,
    TextStyle,
    RuleStyle,
    TableStyle,
    FieldStyle,
    AdmonitionStyle,
    default_stylesheet,
)
from .toc_generator import (
    ResolvedTocConfig,
    TocEntry,
    resolve_toc_config,
    extract_toc_entries,
    assign_numbering,
    generate_anchor_id,
    toc_to_markdown,
)

__all__ = [
    "PageGeometry",
    "Margins",
    "LayoutError",
    "InvalidGeometryError",
    "Stylesheet",
    "TextStyle",
    "RuleStyle",
    "TableStyle",
    "FieldStyle",
    "AdmonitionStyle",
    "default_stylesheet",
    "ResolvedTocConfig",
    "TocEntry",
    "resolve_toc_config",
    "extract_toc_entries",
    "assign_numbering",
    "generate_anchor_id",
    "toc_to_markdown",
]
