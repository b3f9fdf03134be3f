#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Decorator

Assigns every physical page a role and draws headers and footers:
- Cover: undecorated
- Table of contents: lower-case roman page labels (i, ii, iii...)
- Content: document title header, "Page {page} of {total}" footer

Content numbering comes only from adjust_page_number_offset(), so it
stays correct after TOC pages are inserted in front of the content.

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import List
import logging

from config.constants import FOOTER_TEMPLATE, HEADER_FOOTER_OFFSET

from ..context import LayoutContext
from ..surface import Page
from ..toc.offset import PageOffset, adjust_page_number_offset

logger = logging.getLogger(__name__)


class PageRole(Enum):
    """What a physical page holds"""
    COVER = "cover"
    TABLE_OF_CONTENTS = "toc"
    CONTENT = "content"


@dataclass
class PageInfo:
    """Decoration for one physical page"""
    index: int              # 0-based physical index
    role: PageRole
    display_number: str     # "" on the cover
    header: str
    footer: str


def to_roman(num: int) -> str:
    """Convert a positive number to upper-case Roman numerals"""
    val = [
        1000, 900, 500, 400,
        100, 90, 50, 40,
        10, 9, 5, 4, 1
    ]
    syms = [
        'M', 'CM', 'D', 'CD',
        'C', 'XC', 'L', 'XL',
        'X', 'IX', 'V', 'IV', 'I'
    ]
    roman_num = ''
    i = 0
    while num > 0:
        for _ in range(num // val[i]):
            roman_num += syms[i]
            num -= val[i]
        i += 1
    return roman_num


class PageDecorator:
    """
    Draws headers and footers once the page sequence is final.

    Usage:
        decorator = PageDecorator(title="Intake Form")
        offset = decorator.decorate(ctx, toc_page_count)
    """

    def __init__(
        self,
        title: str = "",
        show_header: bool = True,
        show_footer: bool = True,
        footer_template: str = FOOTER_TEMPLATE,
    ):
        self.title = title
        self.show_header = show_header
        self.show_footer = show_footer
        self.footer_template = footer_template

    def page_infos(self, total_pages: int, toc_page_count: int, has_cover_page: bool) -> List[PageInfo]:
        """Role, label, header and footer for every physical page."""
        offset = adjust_page_number_offset(toc_page_count, has_cover_page, total_pages)
        return [self._page_info(i, offset, has_cover_page) for i in range(total_pages)]

    def _page_info(self, index: int, offset: PageOffset, has_cover_page: bool) -> PageInfo:
        if has_cover_page and index == 0:
            return PageInfo(index, PageRole.COVER, "", "", "")

        if index < offset.start_page:
            toc_number = index - (1 if has_cover_page else 0) + 1
            label = to_roman(toc_number).lower()
            return PageInfo(
                index,
                PageRole.TABLE_OF_CONTENTS,
                label,
                header="",
                footer=label if self.show_footer else "",
            )

        page = offset.content_page_number(index)
        footer = ""
        if self.show_footer:
            footer = self.footer_template.replace("{page}", str(page)).replace(
                "{total}", str(offset.content_page_count)
            )

        return PageInfo(
            index,
            PageRole.CONTENT,
            str(page),
            header=self.title if self.show_header else "",
            footer=footer,
        )

    def decorate(self, ctx: LayoutContext, toc_page_count: int) -> PageOffset:
        """
        Draw header and footer text onto every page of ``ctx``.

        Returns:
            The page offset used for numbering
        """
        total = ctx.page_count
        offset = adjust_page_number_offset(toc_page_count, ctx.has_cover_page, total)

        for info in self.page_infos(total, toc_page_count, ctx.has_cover_page):
            self._draw(ctx, ctx.pages[info.index], info)

        logger.info(
            f"Decorated {total} pages: content starts at index {offset.start_page}, "
            f"{offset.content_page_count} content pages"
        )
        return offset

    def _draw(self, ctx: LayoutContext, page: Page, info: PageInfo) -> None:
        geometry = ctx.geometry

        if info.header:
            style = ctx.stylesheet.header
            font = ctx.font(style.font)
            y = geometry.height - min(HEADER_FOOTER_OFFSET, geometry.margins.top / 2)
            page.draw_text(info.header, geometry.margins.left, y, style.font_size, font, style.color)

        if info.footer:
            style = ctx.stylesheet.footer
            font = ctx.font(style.font)
            width = font.width_of_text_at_size(info.footer, style.font_size)
            x = (geometry.width - width) / 2
            y = min(HEADER_FOOTER_OFFSET, geometry.margins.bottom / 2)
            page.draw_text(info.footer, x, y, style.font_size, font, style.color)

