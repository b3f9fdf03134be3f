"""
TOC Module - post-render Table of Contents insertion for PDF output.

Stages (run after flow layout):
- matcher: TOC entries -> page numbers via the drawn-element record
- pdf_toc: allocate, insert and draw TOC pages
- offset: content page bookkeeping for headers and footers
"""

from .matcher import assign_page_numbers_from_drawn_elements
from .offset import PageOffset, adjust_page_number_offset
from .pdf_toc import (
    insert_toc_pages,
    render_toc_content,
    calculate_toc_page_count,
    entries_per_page,
)

__all__ = [
    "assign_page_numbers_from_drawn_elements",
    "PageOffset",
    "adjust_page_number_offset",
    "insert_toc_pages",
    "render_toc_content",
    "calculate_toc_page_count",
    "entries_per_page",
]
