#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Flow Layout Executor

Places content elements top to bottom, page after page:
- Measures each element before placing it
- Breaks to a new page when an element does not fit
- Wraps paragraphs line by line and tables row by row
- Records every placed element (type, text, page) for the TOC

Pagination rules:
- Atomic elements (heading, field, admonition, rule, spacer) move whole
  to the next page when they do not fit. If they are already first on a
  page they are placed anyway and may overflow.
- Paragraphs break between lines, tables between rows (header repeated).

Version: 1.0.0
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence
import logging

from formflow.contracts import (
    Admonition,
    CONTENT_TYPES,
    ContentElement,
    CoverPage,
    Field,
    Heading,
    Paragraph,
    Rule,
    Spacer,
    Table,
    validate_content,
)
from formflow.formatting import PageGeometry, Stylesheet, default_stylesheet

from ..context import LayoutContext
from ..surface import FontHandle, PdfSurface, WidgetOp, widget_safe_name

logger = logging.getLogger(__name__)

CELL_LINE_FACTOR = 1.2   # table cell leading as a multiple of font size
TOGGLE_GAP = 6           # space between a checkbox/radio and its label
OPTION_GAP = 4           # vertical space between radio options


def wrap_text(text: str, font: FontHandle, size: float, max_width: float) -> List[str]:
    """
    Greedy word wrap.

    Explicit newlines start a new line. Words wider than ``max_width`` are
    broken by character.
    """
    lines: List[str] = []

    for raw_line in text.split("\n"):
        words = raw_line.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if font.width_of_text_at_size(candidate, size) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
                current = ""

            if font.width_of_text_at_size(word, size) <= max_width:
                current = word
                continue

            # Break an over-long word by character
            chunk = ""
            for ch in word:
                if chunk and font.width_of_text_at_size(chunk + ch, size) > max_width:
                    lines.append(chunk)
                    chunk = ch
                else:
                    chunk += ch
            current = chunk

        lines.append(current)

    return lines


class FlowLayoutEngine:
    """
    Lays out a content sequence onto pages.

    Usage:
        engine = FlowLayoutEngine(PageGeometry.from_name("letter"))
        ctx = engine.layout(content, title="Intake Form")
        ctx.drawn_elements   # what landed where
    """

    PLACERS = {
        Heading: "_place_heading",
        Paragraph: "_place_paragraph",
        Table: "_place_table",
        Field: "_place_field",
        Admonition: "_place_admonition",
        Rule: "_place_rule",
        Spacer: "_place_spacer",
    }

    def __init__(
        self,
        geometry: PageGeometry,
        stylesheet: Optional[Stylesheet] = None,
        font_paths: Optional[Dict[str, Path]] = None,
    ):
        """
        Initialize flow layout engine.

        Args:
            geometry: Page size and margins
            stylesheet: Resolved styles (built-in defaults when omitted)
            font_paths: TrueType files for non-standard font names
        """
        self.geometry = geometry
        self.stylesheet = stylesheet or default_stylesheet()
        self.font_paths = dict(font_paths or {})

        self._placers: Dict[type, Callable[[LayoutContext, ContentElement], None]] = {
            cls: getattr(self, name) for cls, name in self.PLACERS.items()
        }

    def layout(
        self,
        content: Sequence[ContentElement],
        surface: Optional[PdfSurface] = None,
        cover_page: Optional[CoverPage] = None,
        title: Optional[str] = None,
    ) -> LayoutContext:
        """
        Lay out the whole content sequence.

        Args:
            content: Content elements in document order
            surface: Target surface (a new one is created when omitted)
            cover_page: Draw a cover page as physical page 1
            title: Document title (cover title fallback, or drawn above content)

        Returns:
            The finished LayoutContext (pages + drawn-element record)

        Raises:
            InvalidGeometryError: for unusable page geometry
            ContentValidationError: for malformed content
        """
        self.geometry.validate()
        validate_content(content)

        ctx = LayoutContext(
            surface=surface or PdfSurface(title=title),
            geometry=self.geometry,
            stylesheet=self.stylesheet,
        )
        for name, path in self.font_paths.items():
            ctx.fonts[name] = ctx.surface.embed_font(name, path)

        logger.info(f"Flow layout: {len(content)} elements on {self.geometry.width:.0f}x{self.geometry.height:.0f}pt pages")

        if cover_page is not None:
            self._draw_cover_page(ctx, cover_page, title)

        ctx.new_page()

        if title and cover_page is None:
            self._place_title(ctx, title)

        for i, element in enumerate(content):
            ctx.has_following = i + 1 < len(content)
            self._placers[type(element)](ctx, element)

        logger.info(
            f"Flow complete: {len(ctx.drawn_elements)} elements across {ctx.page_count} pages"
            + (" (incl. cover)" if ctx.has_cover_page else "")
        )

        return ctx

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _break_if_needed(self, ctx: LayoutContext, height: float, what: str) -> bool:
        broke = ctx.ensure_space(height)
        if broke:
            logger.debug(f"Page break before {what} -> page {ctx.page_number}")
        elif height > ctx.available_height():
            logger.debug(f"{what} ({height:.1f}pt) overflows page {ctx.page_number}; placed anyway")
        return broke

    def _line_break_if_needed(self, ctx: LayoutContext, height: float) -> None:
        """Mid-element break: only when the cursor is below the page top."""
        if not ctx.fits(height) and ctx.y < self.geometry.content_top:
            ctx.new_page()
            logger.debug(f"Continued on page {ctx.page_number}")

    def _draw_centered(self, ctx: LayoutContext, text: str, y: float, font: FontHandle, size: float, color: str):
        width = font.width_of_text_at_size(text, size)
        x = (self.geometry.width - width) / 2
        ctx.current_page.draw_text(text, x, y, size, font, color)

    # =========================================================================
    # COVER & TITLE
    # =========================================================================

    def _draw_cover_page(self, ctx: LayoutContext, cover: CoverPage, title: Optional[str]) -> None:
        """Cover page is physical page 1. It is not content and is not recorded."""
        ctx.new_page()
        ctx.has_cover_page = True

        styles = self.stylesheet
        heading_font = ctx.font(styles.title.font)
        body_font = ctx.font(styles.paragraph.font)

        y = self.geometry.height * 0.6
        cover_title = cover.title or title or ""
        if cover_title:
            for line in wrap_text(cover_title, heading_font, styles.title.font_size, self.geometry.content_width):
                self._draw_centered(ctx, line, y, heading_font, styles.title.font_size, styles.title.color)
                y -= styles.title.leading

        y -= styles.title.margin_bottom
        for text, size in ((cover.subtitle, 16), (cover.author, 12), (cover.date, 11)):
            if text:
                self._draw_centered(ctx, text, y, body_font, size, styles.paragraph.color)
                y -= size * 1.8

    def _place_title(self, ctx: LayoutContext, title: str) -> None:
        style = self.stylesheet.title
        font = ctx.font(style.font)
        lines = wrap_text(title, font, style.font_size, self.geometry.content_width)

        x = self.geometry.margins.left
        top = ctx.y
        ctx.record("title", title, x, top)
        for line in lines:
            ctx.current_page.draw_text(line, x, ctx.y - style.font_size, style.font_size, font, style.color)
            ctx.advance(style.leading)
        ctx.advance(style.margin_bottom)

    # =========================================================================
    # ELEMENTS
    # =========================================================================

    def _place_heading(self, ctx: LayoutContext, element: Heading) -> None:
        style = self.stylesheet.heading(element.level)
        font = ctx.font(style.font)
        lines = wrap_text(element.text, font, style.font_size, self.geometry.content_width)

        margin_top = 0 if ctx.is_first_on_page else style.margin_top
        height = margin_top + len(lines) * style.leading + style.margin_bottom
        if ctx.has_following:
            # Keep the heading with at least one line of what follows
            height += self.stylesheet.paragraph.leading

        if self._break_if_needed(ctx, height, f"heading '{element.text}'"):
            margin_top = 0

        ctx.advance(margin_top)
        x = self.geometry.margins.left
        ctx.record("heading", element.text, x, ctx.y)

        for line in lines:
            ctx.current_page.draw_text(line, x, ctx.y - style.font_size, style.font_size, font, style.color)
            ctx.advance(style.leading)

        ctx.advance(style.margin_bottom)

    def _place_paragraph(self, ctx: LayoutContext, element: Paragraph) -> None:
        style = self.stylesheet.paragraph
        size = element.font_size or style.font_size
        leading = size * style.line_height
        font = ctx.font(style.font)

        width = self.geometry.content_width
        if element.max_width:
            width = min(width, element.max_width)

        lines = wrap_text(element.text, font, size, width)

        # The first line decides where the paragraph starts
        self._break_if_needed(ctx, leading, "paragraph")

        x = self.geometry.margins.left
        ctx.record("paragraph", element.text, x, ctx.y)

        for line in lines:
            self._line_break_if_needed(ctx, leading)
            if line:
                ctx.current_page.draw_text(line, x, ctx.y - size, size, font, style.color)
            ctx.advance(leading)
            ctx.is_first_on_page = False

        ctx.advance(style.margin_bottom)

    # ------------------------------------------------------------------ table

    def _column_widths(self, element: Table) -> List[float]:
        total = self.geometry.content_width
        explicit = sum(c.width for c in element.columns if c.width)
        flexible = [c for c in element.columns if not c.width]

        if explicit > total or (explicit == total and flexible):
            # Explicit widths overflow: scale every column into the content width
            weights = [c.width or total / len(element.columns) for c in element.columns]
            scale = total / sum(weights)
            return [w * scale for w in weights]

        share = (total - explicit) / len(flexible) if flexible else 0
        return [c.width if c.width else share for c in element.columns]

    def _cell_lines(self, text: str, font: FontHandle, size: float, width: float, padding: float) -> List[str]:
        return wrap_text(text, font, size, max(width - 2 * padding, 1))

    def _draw_table_row(
        self,
        ctx: LayoutContext,
        cells: Sequence[str],
        widths: Sequence[float],
        height: float,
        font: FontHandle,
        size: float,
        color: str,
        background: str,
    ) -> None:
        style = self.stylesheet.table
        page = ctx.current_page
        top = ctx.y
        x = self.geometry.margins.left

        page.draw_rect(x, top - height, sum(widths), height, fill=background)

        for i, width in enumerate(widths):
            page.draw_rect(x, top - height, width, height, stroke=style.border_color, line_width=style.border_width)
            text = cells[i] if i < len(cells) else ""
            baseline = top - style.cell_padding - size
            for line in self._cell_lines(text, font, size, width, style.cell_padding):
                if line:
                    page.draw_text(line, x + style.cell_padding, baseline, size, font, color)
                baseline -= size * CELL_LINE_FACTOR
            x += width

        ctx.advance(height)

    def _row_height(self, cells: Sequence[str], widths: Sequence[float], font: FontHandle, size: float, minimum: float) -> float:
        padding = self.stylesheet.table.cell_padding
        most = 1
        for i, width in enumerate(widths):
            text = cells[i] if i < len(cells) else ""
            most = max(most, len(self._cell_lines(text, font, size, width, padding)))
        return max(minimum, 2 * padding + most * size * CELL_LINE_FACTOR)

    def _place_table(self, ctx: LayoutContext, element: Table) -> None:
        style = self.stylesheet.table
        header_font = ctx.font(style.header_font)
        cell_font = ctx.font(style.cell_font)
        widths = self._column_widths(element)
        headers = [c.header for c in element.columns]

        header_height = self._row_height(headers, widths, header_font, style.header_font_size, style.header_height)
        row_heights = [
            self._row_height(row, widths, cell_font, style.cell_font_size, style.row_height)
            for row in element.rows
        ]

        # Never leave a header orphaned at the bottom of a page
        first_block = header_height + (row_heights[0] if row_heights else 0)
        self._break_if_needed(ctx, first_block, "table")

        ctx.record("table", " | ".join(headers), self.geometry.margins.left, ctx.y)

        def draw_header():
            self._draw_table_row(
                ctx, headers, widths, header_height, header_font,
                style.header_font_size, style.header_text_color, style.header_background,
            )

        draw_header()
        rows_on_page = 0

        for i, (row, height) in enumerate(zip(element.rows, row_heights)):
            if not ctx.fits(height):
                if rows_on_page:
                    ctx.new_page()
                    logger.debug(f"Table continues on page {ctx.page_number}; header repeated")
                    draw_header()
                    rows_on_page = 0
                else:
                    logger.debug(f"Table row {i} ({height:.1f}pt) overflows page {ctx.page_number}; placed anyway")
            background = style.alternate_row_color if i % 2 else style.row_background
            self._draw_table_row(
                ctx, row, widths, height, cell_font,
                style.cell_font_size, style.cell_text_color, background,
            )
            rows_on_page += 1

        ctx.is_first_on_page = False
        ctx.advance(style.margin_bottom)

    # ------------------------------------------------------------------ field

    def _field_control_height(self, element: Field) -> float:
        fs = self.stylesheet.fields
        kind = element.field_type

        if kind == "textarea":
            return (element.lines or fs.textarea_default_lines) * fs.textarea_line_height
        if kind == "checkbox":
            return max(fs.toggle_size, fs.label_font_size * 1.2)
        if kind == "radio":
            n = len(element.options)
            return n * fs.toggle_size + max(n - 1, 0) * OPTION_GAP
        if kind == "dropdown":
            return fs.dropdown_height
        if kind == "signature":
            return fs.signature_height
        return fs.text_height

    def _place_field(self, ctx: LayoutContext, element: Field) -> None:
        fs = self.stylesheet.fields
        label_font = ctx.font(fs.label_font)
        x = self.geometry.margins.left
        width = self.geometry.content_width

        label = element.label or element.field_name
        if element.required:
            label = f"{label} *"

        inline_label = element.field_type == "checkbox"
        label_height = 0 if inline_label else fs.label_font_size * 1.2 + fs.label_margin_bottom
        control_height = self._field_control_height(element)

        self._break_if_needed(ctx, label_height + control_height, f"field '{element.field_name}'")

        page = ctx.current_page
        ctx.record("field", element.label or element.field_name, x, ctx.y)

        if not inline_label:
            page.draw_text(label, x, ctx.y - fs.label_font_size, fs.label_font_size, label_font, fs.label_color)
            ctx.advance(label_height)

        top = ctx.y
        name = ctx.unique_field_name(widget_safe_name(element.field_name))
        common = dict(
            tooltip=element.label or element.field_name,
            required=element.required,
            font_size=fs.font_size,
            border_color=fs.border_color,
            fill_color=fs.background,
            border_width=fs.border_width,
        )
        kind = element.field_type

        if kind in ("text", "date", "number", "textarea"):
            page.add_widget(WidgetOp(
                kind="text", name=name, x=x, y=top - control_height,
                width=width, height=control_height,
                value=element.default or "", multiline=kind == "textarea", **common,
            ))

        elif kind == "dropdown":
            options = tuple(element.options)
            value = element.default if element.default in options else options[0]
            page.add_widget(WidgetOp(
                kind="choice", name=name, x=x, y=top - control_height,
                width=width, height=control_height, value=value, options=options, **common,
            ))

        elif kind == "checkbox":
            size = fs.toggle_size
            page.add_widget(WidgetOp(
                kind="checkbox", name=name, x=x, y=top - size, width=size, height=size,
                selected=(element.default or "").lower() in ("true", "yes", "1", "on"), **common,
            ))
            page.draw_text(label, x + size + TOGGLE_GAP, top - size + 2, fs.label_font_size, label_font, fs.label_color)

        elif kind == "radio":
            size = fs.toggle_size
            y = top
            for option in element.options:
                page.add_widget(WidgetOp(
                    kind="radio", name=name, x=x, y=y - size, width=size, height=size,
                    value=widget_safe_name(option), selected=option == element.default, **common,
                ))
                page.draw_text(option, x + size + TOGGLE_GAP, y - size + 2, fs.label_font_size, label_font, fs.label_color)
                y -= size + OPTION_GAP

        elif kind == "signature":
            border = fs.required_border_color if element.required else fs.border_color
            page.draw_rect(x, top - control_height, width, control_height,
                           fill=fs.background, stroke=border, line_width=fs.border_width)
            page.draw_line((x + 8, top - control_height + 10), (x + width - 8, top - control_height + 10),
                           thickness=0.5, color=fs.border_color)

        ctx.advance(control_height + fs.margin_bottom)

    # ------------------------------------------------------------------ boxes

    def _place_admonition(self, ctx: LayoutContext, element: Admonition) -> None:
        st = self.stylesheet.admonitions[element.variant]
        title_font = ctx.font(st.title_font)
        body_font = ctx.font(st.content_font)

        x = self.geometry.margins.left
        width = self.geometry.content_width
        inner_x = x + st.border_width + st.padding
        inner_width = width - st.border_width - 2 * st.padding

        line_height = st.content_font_size * st.content_line_height
        title_height = st.title_font_size * 1.3 + 4 if element.title else 0
        lines = wrap_text(element.text, body_font, st.content_font_size, inner_width)
        box_height = 2 * st.padding + title_height + len(lines) * line_height

        self._break_if_needed(ctx, box_height, f"{element.variant} admonition")

        page = ctx.current_page
        top = ctx.y
        ctx.record("admonition", element.title or element.text, x, top)

        page.draw_rect(x, top - box_height, width, box_height, fill=st.background)
        page.draw_rect(x, top - box_height, st.border_width, box_height, fill=st.border_color)

        y = top - st.padding
        if element.title:
            page.draw_text(element.title, inner_x, y - st.title_font_size, st.title_font_size, title_font, st.title_color)
            y -= title_height
        for line in lines:
            if line:
                page.draw_text(line, inner_x, y - st.content_font_size, st.content_font_size, body_font, st.content_color)
            y -= line_height

        ctx.advance(box_height + st.margin_bottom)

    def _place_rule(self, ctx: LayoutContext, element: Rule) -> None:
        st = self.stylesheet.rule
        self._break_if_needed(ctx, st.margin_top + st.thickness + st.margin_bottom, "rule")

        ctx.advance(st.margin_top)
        x = self.geometry.margins.left
        y = ctx.y - st.thickness / 2
        ctx.current_page.draw_line((x, y), (x + self.geometry.content_width, y), st.thickness, st.color)
        ctx.record("rule", "", x, ctx.y)
        ctx.advance(st.thickness + st.margin_bottom)

    def _place_spacer(self, ctx: LayoutContext, element: Spacer) -> None:
        self._break_if_needed(ctx, element.height, "spacer")
        ctx.record("spacer", "", self.geometry.margins.left, ctx.y)
        ctx.advance(element.height)


# Every content variant must have a placer.
_missing = set(CONTENT_TYPES) - set(FlowLayoutEngine.PLACERS)
if _missing:
    raise TypeError(f"FlowLayoutEngine has no placer for: {sorted(t.__name__ for t in _missing)}")
