#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TOC Page-Number Matcher

Joins TOC entries to the drawn-element record by heading text.

The search cursor only moves forward, so repeated heading text resolves
to successive drawn headings. Known limitation: a duplicate heading that
is filtered out of the TOC (outside the level range) can still consume a
match and shift every later entry onto the wrong occurrence.
"""

import logging
from typing import List, Sequence

from formflow.formatting import TocEntry

from ..context import DrawnElement

logger = logging.getLogger(__name__)

MATCHABLE_TYPES = ("heading", "title")
FALLBACK_PAGE = 1


def assign_page_numbers_from_drawn_elements(
    entries: List[TocEntry],
    drawn_elements: Sequence[DrawnElement],
    has_cover_page: bool,
) -> List[TocEntry]:
    """
    Set ``page_number`` on every entry (in place).

    Drawn pages are absolute (a cover page is page 1). Entries get
    content-relative numbers, so one is subtracted when a cover exists.
    Entries with no matching drawn heading fall back to page 1.

    Returns:
        The same list, for chaining
    """
    headings = [el for el in drawn_elements if el.type in MATCHABLE_TYPES]

    cursor = 0
    for entry in entries:
        for i in range(cursor, len(headings)):
            if headings[i].content == entry.text:
                page = headings[i].page
                entry.page_number = page - 1 if has_cover_page else page
                cursor = i + 1
                logger.debug(f"TOC entry '{entry.text}' -> page {entry.page_number}")
                break

        if entry.page_number is None:
            logger.warning(f"No drawn heading matches TOC entry '{entry.text}'; using page {FALLBACK_PAGE}")
            entry.page_number = FALLBACK_PAGE

    return entries
