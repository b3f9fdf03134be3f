#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Context

Single-owner state threaded through one document render:
- live page list and current cursor (page index + baseline y)
- page geometry and stylesheet
- the drawn-element record (what was placed, and on which page)

A context is created per document and never shared between renders.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from formflow.formatting import PageGeometry, Stylesheet, TocEntry

from .surface import FontHandle, Page, PdfSurface


@dataclass(frozen=True)
class DrawnElement:
    """Fact about one placed element. Never modified after it is recorded."""
    type: str                 # heading | title | paragraph | table | field | admonition | rule | spacer
    content: str
    page: int                 # 1-indexed, absolute (a cover page counts as page 1)
    x: float
    y: float

    def to_dict(self) -> Dict:
        return {
            "type": self.type,
            "content": self.content,
            "page": self.page,
            "x": self.x,
            "y": self.y,
        }


@dataclass
class LayoutContext:
    """Mutable layout state for one document. Exactly one writer at a time."""
    surface: PdfSurface
    geometry: PageGeometry
    stylesheet: Stylesheet
    pages: List[Page] = field(default_factory=list)
    page_index: int = -1
    y: float = 0.0                      # current baseline ceiling, PDF coordinates
    is_first_on_page: bool = True
    has_following: bool = False         # more content comes after the element being placed
    drawn_elements: List[DrawnElement] = field(default_factory=list)
    has_cover_page: bool = False
    fonts: Dict[str, FontHandle] = field(default_factory=dict)
    field_names: Set[str] = field(default_factory=set)
    toc_entries: List[TocEntry] = field(default_factory=list)

    # ------------------------------------------------------------------ pages

    @property
    def current_page(self) -> Page:
        return self.pages[self.page_index]

    @property
    def page_number(self) -> int:
        """Absolute, 1-indexed number of the page under the cursor."""
        return self.page_index + 1

    def new_page(self) -> Page:
        """Append a page and move the cursor to its top margin."""
        page = self.surface.add_page(self.geometry.width, self.geometry.height)
        self.pages.append(page)
        self.page_index = len(self.pages) - 1
        self.y = self.geometry.content_top
        self.is_first_on_page = True
        return page

    # ------------------------------------------------------------------ cursor

    def available_height(self) -> float:
        return self.y - self.geometry.content_bottom

    def fits(self, height: float) -> bool:
        return height <= self.available_height()

    def ensure_space(self, height: float) -> bool:
        """
        Break to a new page when ``height`` does not fit below the cursor.

        An element that is already first on its page is never pushed
        further: oversized elements are placed and allowed to overflow.

        Returns:
            True if a page break happened
        """
        if self.fits(height) or self.is_first_on_page:
            return False
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        """Move the cursor down. The cursor never moves up within a page."""
        if height > 0:
            self.y -= height

    # ------------------------------------------------------------------ record

    def record(self, element_type: str, content: str, x: float, y: float) -> DrawnElement:
        drawn = DrawnElement(
            type=element_type,
            content=content,
            page=self.page_number,
            x=x,
            y=y,
        )
        self.drawn_elements.append(drawn)
        self.is_first_on_page = False
        return drawn

    # ------------------------------------------------------------------ fonts

    def font(self, name: str) -> FontHandle:
        handle = self.fonts.get(name)
        if handle is None:
            handle = self.surface.embed_font(name)
            self.fonts[name] = handle
        return handle

    def unique_field_name(self, name: str) -> str:
        """AcroForm names must be unique per document; suffix repeats."""
        candidate = name
        n = 2
        while candidate in self.field_names:
            candidate = f"{name}_{n}"
            n += 1
        self.field_names.add(candidate)
        return candidate

    @property
    def page_count(self) -> int:
        return len(self.pages)
