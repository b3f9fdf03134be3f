#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Core Module

Turns a DocumentSchema into a paginated PDF.

Components:
- FlowLayoutEngine: place content top to bottom across pages
- insert_toc_pages: post-render Table of Contents insertion
- PageDecorator: headers, footers and page labels
- create_docx_toc: Word TOC field for DOCX output

Usage:
    from formflow.layout import LayoutAgent

    agent = LayoutAgent()
    result = agent.generate_pdf(schema)

Version: 1.0.0
"""

from .agent import LayoutAgent, PdfResult
from .context import LayoutContext, DrawnElement
from .surface import PdfSurface, Page, FontHandle, FontError
from .executor.flow import FlowLayoutEngine, wrap_text
from .toc import (
    insert_toc_pages,
    adjust_page_number_offset,
    assign_page_numbers_from_drawn_elements,
    PageOffset,
)
from .sections.manager import PageDecorator, PageInfo, PageRole
from .renderer.docx_toc import create_docx_toc

__all__ = [
    "LayoutAgent",
    "PdfResult",
    "LayoutContext",
    "DrawnElement",
    "PdfSurface",
    "Page",
    "FontHandle",
    "FontError",
    "FlowLayoutEngine",
    "wrap_text",
    "insert_toc_pages",
    "adjust_page_number_offset",
    "assign_page_numbers_from_drawn_elements",
    "PageOffset",
    "PageDecorator",
    "PageInfo",
    "PageRole",
    "create_docx_toc",
]

__version__ = "1.0.0"
