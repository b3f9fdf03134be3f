#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Offset Adjuster

Single source of truth for where content page 1 lives once TOC pages
(and an optional cover) precede it. Header/footer numbering must use
this and nothing else.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class PageOffset:
    """
    start_page: 0-based physical index of content page 1
                (equivalently, how many front-matter pages precede it)
    content_page_count: pages from start_page to the end
    """
    start_page: int
    content_page_count: int

    def content_page_number(self, physical_index: int) -> int:
        """1-based content page number for a 0-based physical page index."""
        return physical_index - self.start_page + 1

    def physical_page_number(self, content_page: int) -> int:
        """1-based physical page for a content-relative page number."""
        return content_page + self.start_page

    def to_dict(self) -> Dict[str, int]:
        return {
            "start_page": self.start_page,
            "content_page_count": self.content_page_count,
        }


def adjust_page_number_offset(toc_page_count: int, has_cover_page: bool, total_pages: int) -> PageOffset:
    """
    Example:
        adjust_page_number_offset(2, True, 10) -> PageOffset(start_page=3, content_page_count=7)
    """
    start_page = toc_page_count + (1 if has_cover_page else 0)
    return PageOffset(start_page=start_page, content_page_count=total_pages - start_page)
