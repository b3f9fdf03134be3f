#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Resolved Stylesheet - concrete style values used by the PDF layout.

Values are already resolved (no token lookups happen here). Sizes are
points, colours are hex strings.
"""

from dataclasses import dataclass, field
from typing import Dict

from config.constants import FONT_BODY, FONT_HEADING


# =============================================================================
# STYLE BLOCKS
# =============================================================================

@dataclass(frozen=True)
class TextStyle:
    font: str
    font_size: float
    color: str
    line_height: float = 1.4          # multiple of font size
    margin_top: float = 0.0
    margin_bottom: float = 0.0

    @property
    def leading(self) -> float:
        return self.font_size * self.line_height


@dataclass(frozen=True)
class RuleStyle:
    thickness: float = 1.0
    color: str = "#d1d5db"
    margin_top: float = 12.0
    margin_bottom: float = 12.0


@dataclass(frozen=True)
class TableStyle:
    header_font: str = FONT_HEADING
    header_font_size: float = 10.0
    header_text_color: str = "#111827"
    header_background: str = "#f3f4f6"
    cell_font: str = FONT_BODY
    cell_font_size: float = 10.0
    cell_text_color: str = "#374151"
    row_background: str = "#ffffff"
    alternate_row_color: str = "#f9fafb"
    border_color: str = "#d1d5db"
    border_width: float = 0.5
    cell_padding: float = 4.0
    row_height: float = 20.0
    header_height: float = 22.0
    margin_bottom: float = 12.0


@dataclass(frozen=True)
class FieldStyle:
    label_font: str = FONT_BODY
    label_font_size: float = 10.0
    label_color: str = "#374151"
    label_margin_bottom: float = 4.0
    border_color: str = "#9ca3af"
    border_width: float = 1.0
    background: str = "#ffffff"
    font_size: float = 10.0
    text_height: float = 22.0
    textarea_line_height: float = 14.0
    textarea_default_lines: int = 4
    toggle_size: float = 12.0         # checkbox and radio
    dropdown_height: float = 22.0
    signature_height: float = 40.0
    required_border_color: str = "#dc2626"
    margin_bottom: float = 12.0


@dataclass(frozen=True)
class AdmonitionStyle:
    background: str
    border_color: str
    title_color: str
    content_color: str
    border_width: float = 3.0
    padding: float = 10.0
    title_font: str = FONT_HEADING
    title_font_size: float = 11.0
    content_font: str = FONT_BODY
    content_font_size: float = 10.0
    content_line_height: float = 1.4
    margin_bottom: float = 12.0


@dataclass(frozen=True)
class Stylesheet:
    headings: Dict[int, TextStyle]
    paragraph: TextStyle
    title: TextStyle
    rule: RuleStyle = field(default_factory=RuleStyle)
    table: TableStyle = field(default_factory=TableStyle)
    fields: FieldStyle = field(default_factory=FieldStyle)
    admonitions: Dict[str, AdmonitionStyle] = field(default_factory=dict)
    header: TextStyle = TextStyle(FONT_BODY, 9, "#6b7280")
    footer: TextStyle = TextStyle(FONT_BODY, 9, "#6b7280")

    def heading(self, level: int) -> TextStyle:
        return self.headings.get(level, self.headings[max(self.headings)])


# =============================================================================
# DEFAULTS
# =============================================================================

_HEADING_SCALE = {
    # level: (font size, margin top, margin bottom)
    1: (24, 18, 10),
    2: (18, 16, 8),
    3: (15, 14, 6),
    4: (13, 12, 6),
    5: (12, 10, 4),
    6: (11, 10, 4),
}

_ADMONITION_COLORS = {
    # variant: (background, border, title, content)
    "warning": ("#fffbeb", "#f59e0b", "#92400e", "#78350f"),
    "note": ("#eff6ff", "#3b82f6", "#1e40af", "#1e3a8a"),
    "info": ("#ecfeff", "#06b6d4", "#155e75", "#164e63"),
    "tip": ("#f0fdf4", "#22c55e", "#166534", "#14532d"),
    "danger": ("#fef2f2", "#ef4444", "#991b1b", "#7f1d1d"),
}


def default_stylesheet(body_font: str = FONT_BODY, heading_font: str = FONT_HEADING) -> Stylesheet:
    """Build the built-in stylesheet with the given font families."""
    headings = {
        level: TextStyle(
            font=heading_font,
            font_size=size,
            color="#111827",
            line_height=1.25,
            margin_top=top,
            margin_bottom=bottom,
        )
        for level, (size, top, bottom) in _HEADING_SCALE.items()
    }

    admonitions = {
        variant: AdmonitionStyle(
            background=bg,
            border_color=border,
            title_color=title,
            content_color=content,
            title_font=heading_font,
            content_font=body_font,
        )
        for variant, (bg, border, title, content) in _ADMONITION_COLORS.items()
    }

    return Stylesheet(
        headings=headings,
        paragraph=TextStyle(body_font, 11, "#1f2937", line_height=1.5, margin_bottom=10),
        title=TextStyle(heading_font, 28, "#111827", line_height=1.2, margin_bottom=20),
        table=TableStyle(header_font=heading_font, cell_font=body_font),
        fields=FieldStyle(label_font=body_font),
        admonitions=admonitions,
        header=TextStyle(body_font, 9, "#6b7280"),
        footer=TextStyle(body_font, 9, "#6b7280"),
    )
