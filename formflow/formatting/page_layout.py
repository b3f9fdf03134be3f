#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Layout - page size and margins in points.

Manages:
- Named page sizes (letter, legal, A4, A5)
- Margins and the resulting content area
- Geometry validation (the only layout input that can be rejected)
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, TYPE_CHECKING

from config.constants import PAGE_SIZES, DEFAULT_PAGE_SIZE, DEFAULT_MARGINS

if TYPE_CHECKING:
    from config.settings import Settings


class LayoutError(Exception):
    """Base error for layout failures"""
    pass


class InvalidGeometryError(LayoutError):
    """Raised when page size or margins cannot host any content"""
    pass


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class Margins:
    """Page margins in points."""
    top: float
    bottom: float
    left: float
    right: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


@dataclass(frozen=True)
class PageGeometry:
    """Page size plus margins, in points."""
    width: float
    height: float
    margins: Margins

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def content_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def content_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom

    @property
    def content_top(self) -> float:
        """Baseline ceiling for the first line on a page (PDF coordinates, origin bottom-left)."""
        return self.height - self.margins.top

    @property
    def content_bottom(self) -> float:
        return self.margins.bottom

    def validate(self) -> "PageGeometry":
        """
        Reject geometry that cannot be laid out.

        Raises:
            InvalidGeometryError: for negative, zero or non-finite dimensions,
                negative margins, or margins that leave no content area
        """
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise InvalidGeometryError(f"Page {name} must be a positive finite number, got {value!r}")

        for side, value in self.margins.to_dict().items():
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
                raise InvalidGeometryError(f"Margin '{side}' must be a non-negative finite number, got {value!r}")

        if self.content_width <= 0 or self.content_height <= 0:
            raise InvalidGeometryError(
                f"Margins leave no content area ({self.content_width:.1f} x {self.content_height:.1f} pt)"
            )

        return self

    @classmethod
    def from_name(
        cls,
        page_size: str = DEFAULT_PAGE_SIZE,
        margins: Optional[Dict[str, float]] = None,
    ) -> "PageGeometry":
        """
        Build geometry from a named page size.

        Args:
            page_size: Page size name ("letter", "legal", "A4", "A5"), case-insensitive
            margins: Margin overrides by side

        Raises:
            InvalidGeometryError: for unknown page size names
        """
        lookup = {name.lower(): dims for name, dims in PAGE_SIZES.items()}
        dims = lookup.get((page_size or DEFAULT_PAGE_SIZE).lower())
        if dims is None:
            raise InvalidGeometryError(
                f"Unknown page size '{page_size}'. Available: {', '.join(PAGE_SIZES)}"
            )

        values = dict(DEFAULT_MARGINS)
        if margins:
            values.update(margins)

        return cls(
            width=dims[0],
            height=dims[1],
            margins=Margins(
                top=values["top"],
                bottom=values["bottom"],
                left=values["left"],
                right=values["right"],
            ),
        )

    @classmethod
    def from_settings(cls, settings: "Settings", page_size: Optional[str] = None) -> "PageGeometry":
        """Geometry from application settings, optionally overriding the page size name."""
        return cls.from_name(page_size or settings.page_size, settings.margins())
