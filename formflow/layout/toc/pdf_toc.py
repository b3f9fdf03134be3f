#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Table of Contents

Post-render insertion:
1. Content is laid out first, so every heading's page is known
2. Entries are extracted from the original content and matched to pages
3. The required number of blank pages is inserted after the cover (or first)
4. Title, entries, dot leaders and page numbers are drawn onto them

The caller uses the returned page count with adjust_page_number_offset().

Version: 1.0.0
"""

import math
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from config.constants import (
    TOC_TITLE_FONT_SIZE,
    TOC_ENTRY_FONT_SIZE,
    TOC_ENTRY_LINE_HEIGHT,
    TOC_INDENT_PER_LEVEL,
    TOC_TITLE_MARGIN_BOTTOM,
    TOC_DOT_LEADER_CHAR,
    TOC_DOT_LEADER_SPACING,
    TOC_DOT_LEADER_GAP,
    TOC_TITLE_COLOR,
    TOC_ENTRY_COLOR,
    TOC_PAGE_NUMBER_COLOR,
    TOC_DOT_COLOR,
)
from formflow.contracts import ContentElement, TableOfContents
from formflow.formatting import (
    PageGeometry,
    ResolvedTocConfig,
    TocEntry,
    assign_numbering,
    extract_toc_entries,
    resolve_toc_config,
)

from ..context import LayoutContext
from ..surface import FontHandle, Page
from .matcher import assign_page_numbers_from_drawn_elements

logger = logging.getLogger(__name__)


def entries_per_page(geometry: PageGeometry) -> int:
    """How many entry lines fit on one TOC page (title space reserved on every page)."""
    usable = (
        geometry.height
        - geometry.margins.top
        - geometry.margins.bottom
        - TOC_TITLE_FONT_SIZE
        - TOC_TITLE_MARGIN_BOTTOM
    )
    return max(1, math.floor(usable / TOC_ENTRY_LINE_HEIGHT))


def calculate_toc_page_count(entry_count: int, per_page: int) -> int:
    """ceil(entries / per_page), never less than one page."""
    return max(1, math.ceil(entry_count / per_page))


def insert_toc_pages(
    ctx: LayoutContext,
    raw_toc_config: Union[TableOfContents, Dict[str, Any], None],
    content: Optional[Sequence[ContentElement]],
    has_cover_page: bool,
) -> int:
    """
    Build and insert the TOC pages into a finished layout.

    Must run after the flow layout has completed.

    Args:
        ctx: Layout context holding the laid-out pages and drawn elements
        raw_toc_config: Raw tableOfContents block (None / disabled -> no-op)
        content: Original content sequence to take headings from
        has_cover_page: TOC goes after the cover when True

    Returns:
        Number of pages inserted (0 when nothing was inserted)
    """
    config = resolve_toc_config(raw_toc_config)
    if config is None or not content:
        return 0

    entries = extract_toc_entries(content, config)
    if not entries:
        logger.info(f"TOC skipped: no headings in levels {config.min_level}-{config.max_level}")
        return 0

    if config.numbered:
        assign_numbering(entries)

    assign_page_numbers_from_drawn_elements(entries, ctx.drawn_elements, has_cover_page)

    geometry = ctx.geometry
    per_page = entries_per_page(geometry)
    toc_page_count = calculate_toc_page_count(len(entries), per_page)
    insert_index = 1 if has_cover_page else 0

    inserted: List[Page] = []
    for i in range(toc_page_count):
        inserted.append(ctx.surface.insert_page(insert_index + i, geometry.size))

    # Keep the live page list aligned with the surface
    ctx.pages[insert_index:insert_index] = inserted
    if ctx.page_index >= insert_index:
        ctx.page_index += toc_page_count

    render_toc_content(ctx, config, entries, inserted, per_page)
    ctx.toc_entries = entries

    logger.info(
        f"TOC inserted: {len(entries)} entries on {toc_page_count} page(s) at index {insert_index}"
    )
    return toc_page_count


def render_toc_content(
    ctx: LayoutContext,
    config: ResolvedTocConfig,
    entries: Sequence[TocEntry],
    pages: Sequence[Page],
    per_page: int,
) -> None:
    """Draw title (first page only) and entries in chunks of ``per_page``."""
    geometry = ctx.geometry
    margins = geometry.margins
    title_font = ctx.font(ctx.stylesheet.title.font)
    entry_font = ctx.font(ctx.stylesheet.paragraph.font)
    min_level = min(e.level for e in entries)

    for page_no, page in enumerate(pages):
        y = geometry.height - margins.top

        if page_no == 0:
            page.draw_text(config.title, margins.left, y, TOC_TITLE_FONT_SIZE, title_font, TOC_TITLE_COLOR)
            y -= TOC_TITLE_FONT_SIZE + TOC_TITLE_MARGIN_BOTTOM

        for entry in entries[page_no * per_page:(page_no + 1) * per_page]:
            _draw_entry(page, entry, config, geometry, entry_font, min_level, y)
            y -= TOC_ENTRY_LINE_HEIGHT


def _draw_entry(
    page: Page,
    entry: TocEntry,
    config: ResolvedTocConfig,
    geometry: PageGeometry,
    font: FontHandle,
    min_level: int,
    y: float,
) -> None:
    x = geometry.margins.left + (entry.level - min_level) * TOC_INDENT_PER_LEVEL

    text = entry.text
    if config.numbered and entry.numbering:
        text = f"{entry.numbering}  {entry.text}"

    page.draw_text(text, x, y, TOC_ENTRY_FONT_SIZE, font, TOC_ENTRY_COLOR)

    if not config.show_page_numbers or entry.page_number is None:
        return

    number = str(entry.page_number)
    number_x = geometry.margins.left + geometry.content_width - font.width_of_text_at_size(number, TOC_ENTRY_FONT_SIZE)
    page.draw_text(number, number_x, y, TOC_ENTRY_FONT_SIZE, font, TOC_PAGE_NUMBER_COLOR)

    start = x + font.width_of_text_at_size(text, TOC_ENTRY_FONT_SIZE) + TOC_DOT_LEADER_GAP
    end = number_x - TOC_DOT_LEADER_GAP
    if end <= start:
        logger.debug(f"No room for dot leader after '{entry.text}'")
        return

    dot_width = font.width_of_text_at_size(TOC_DOT_LEADER_CHAR, TOC_ENTRY_FONT_SIZE)
    dot_x = start
    while dot_x + dot_width < end:
        page.draw_text(TOC_DOT_LEADER_CHAR, dot_x, y, TOC_ENTRY_FONT_SIZE, font, TOC_DOT_COLOR)
        dot_x += dot_width + TOC_DOT_LEADER_SPACING
