#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Surface

Page-addressable drawing surface on top of ReportLab.

ReportLab's canvas writes pages strictly in order, but the TOC pages are
only known after the content is laid out and must land *before* it. The
surface therefore records each page as a display list and replays all
pages onto a ReportLab canvas in their final order on save().

Primitives used by the layout core:
- add_page / insert_page / get_page
- embed_font -> FontHandle (width_of_text_at_size is the measurement primitive)
- save -> PDF bytes

Version: 1.0.0
"""

import io
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from reportlab.lib.colors import HexColor
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError
from reportlab.pdfgen import canvas as pdf_canvas

from config.logging_config import get_logger

logger = get_logger(__name__)


class FontError(Exception):
    """Raised when a font cannot be embedded"""
    pass


@dataclass(frozen=True)
class FontHandle:
    """Opaque handle to a registered font."""
    name: str

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, self.name, size)


# =============================================================================
# DRAW OPERATIONS
# =============================================================================

@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font: str
    size: float
    color: str = "#000000"

    def replay(self, c) -> None:
        c.setFillColor(HexColor(self.color))
        c.setFont(self.font, self.size)
        c.drawString(self.x, self.y, self.text)


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 1.0
    color: str = "#000000"

    def replay(self, c) -> None:
        c.setStrokeColor(HexColor(self.color))
        c.setLineWidth(self.thickness)
        c.line(self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    line_width: float = 1.0

    def replay(self, c) -> None:
        c.saveState()
        if self.fill:
            c.setFillColor(HexColor(self.fill))
        if self.stroke:
            c.setStrokeColor(HexColor(self.stroke))
            c.setLineWidth(self.line_width)
        c.rect(
            self.x, self.y, self.width, self.height,
            stroke=1 if self.stroke else 0,
            fill=1 if self.fill else 0,
        )
        c.restoreState()


@dataclass(frozen=True)
class WidgetOp:
    """Interactive AcroForm widget."""
    kind: str                       # text | checkbox | radio | choice
    name: str
    x: float
    y: float
    width: float
    height: float
    tooltip: str = ""
    value: str = ""
    options: Tuple[str, ...] = ()
    multiline: bool = False
    required: bool = False
    selected: bool = False
    font_size: float = 10.0
    border_color: str = "#9ca3af"
    fill_color: str = "#ffffff"
    border_width: float = 1.0

    def replay(self, c) -> None:
        form = c.acroForm
        border = HexColor(self.border_color)
        fill = HexColor(self.fill_color)
        required = " required" if self.required else ""

        if self.kind == "text":
            form.textfield(
                name=self.name, tooltip=self.tooltip, value=self.value,
                x=self.x, y=self.y, width=self.width, height=self.height,
                fontSize=self.font_size, borderColor=border, fillColor=fill,
                borderWidth=self.border_width, forceBorder=True,
                fieldFlags=("multiline" if self.multiline else "") + required,
            )
        elif self.kind == "checkbox":
            form.checkbox(
                name=self.name, tooltip=self.tooltip, checked=self.selected,
                x=self.x, y=self.y, size=self.width, buttonStyle="check",
                borderColor=border, fillColor=fill,
                borderWidth=self.border_width, forceBorder=True,
                fieldFlags=required.strip(),
            )
        elif self.kind == "radio":
            form.radio(
                name=self.name, tooltip=self.tooltip, value=self.value,
                selected=self.selected, x=self.x, y=self.y, size=self.width,
                buttonStyle="circle", shape="circle",
                borderColor=border, fillColor=fill,
                borderWidth=self.border_width, forceBorder=True,
                fieldFlags="noToggleToOff radio" + required,
            )
        elif self.kind == "choice":
            form.choice(
                name=self.name, tooltip=self.tooltip, value=self.value,
                options=list(self.options),
                x=self.x, y=self.y, width=self.width, height=self.height,
                fontSize=self.font_size, borderColor=border, fillColor=fill,
                borderWidth=self.border_width, fieldFlags="combo" + required, forceBorder=True,
            )
        else:
            raise ValueError(f"Unknown widget kind: {self.kind}")


DrawOp = Union[TextOp, LineOp, RectOp, WidgetOp]


# =============================================================================
# PAGE & SURFACE
# =============================================================================

class Page:
    """One page: size plus an ordered display list."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.ops: List[DrawOp] = []

    def get_size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        font: FontHandle,
        color: str = "#000000",
    ) -> None:
        self.ops.append(TextOp(text, x, y, font.name, size, color))

    def draw_line(
        self,
        start: Tuple[float, float],
        end: Tuple[float, float],
        thickness: float = 1.0,
        color: str = "#000000",
    ) -> None:
        self.ops.append(LineOp(start[0], start[1], end[0], end[1], thickness, color))

    def draw_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        fill: Optional[str] = None,
        stroke: Optional[str] = None,
        line_width: float = 1.0,
    ) -> None:
        self.ops.append(RectOp(x, y, width, height, fill, stroke, line_width))

    def add_widget(self, widget: WidgetOp) -> None:
        self.ops.append(widget)

    @property
    def texts(self) -> List[str]:
        """Plain strings drawn on this page, in drawing order."""
        return [op.text for op in self.ops if isinstance(op, TextOp)]

    def text_ops(self) -> List[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def __repr__(self):
        return f"<Page {self.width:.0f}x{self.height:.0f}: {len(self.ops)} ops>"


class PdfSurface:
    """
    Ordered, index-addressable collection of pages backed by ReportLab.

    Usage:
        surface = PdfSurface(title="My Form")
        page = surface.add_page(612, 792)
        font = surface.embed_font("Helvetica")
        page.draw_text("Hello", 72, 720, 12, font)
        pdf_bytes = surface.save()
    """

    def __init__(self, title: Optional[str] = None):
        self.title = title
        self._pages: List[Page] = []
        self._fonts: Dict[str, FontHandle] = {}

    # ------------------------------------------------------------------ pages

    def add_page(self, width: float, height: float) -> Page:
        page = Page(width, height)
        self._pages.append(page)
        return page

    def insert_page(self, index: int, size: Sequence[float]) -> Page:
        """
        Insert a blank page so that it ends up at position ``index``.

        Raises:
            IndexError: if index is outside 0..page_count
        """
        if index < 0 or index > len(self._pages):
            raise IndexError(f"Cannot insert page at {index}; document has {len(self._pages)} pages")
        page = Page(size[0], size[1])
        self._pages.insert(index, page)
        return page

    def get_page(self, index: int) -> Page:
        return self._pages[index]

    def get_pages(self) -> List[Page]:
        return list(self._pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    # ------------------------------------------------------------------ fonts

    def embed_font(self, name: str, path: Optional[Union[str, Path]] = None) -> FontHandle:
        """
        Register a font and return its handle.

        Standard PDF fonts (Helvetica, Times-Roman, Courier and their variants)
        need no path. TrueType fonts are registered from ``path``.

        Raises:
            FontError: if the font file cannot be read or the name is unknown
        """
        if name in self._fonts:
            return self._fonts[name]

        if path is not None:
            try:
                pdfmetrics.registerFont(TTFont(name, str(path)))
            except (TTFError, OSError) as e:
                raise FontError(f"Cannot embed font '{name}' from {path}: {e}") from e
            logger.debug(f"Embedded TrueType font {name} from {path}")

        try:
            pdfmetrics.getFont(name)
        except KeyError as e:
            raise FontError(f"Unknown font '{name}'") from e

        handle = FontHandle(name)
        self._fonts[name] = handle
        return handle

    # ------------------------------------------------------------------ output

    def save(self) -> bytes:
        """Replay every page onto a ReportLab canvas and return the PDF bytes."""
        buffer = io.BytesIO()
        first_size = self._pages[0].get_size() if self._pages else (612, 792)
        c = pdf_canvas.Canvas(buffer, pagesize=first_size)
        if self.title:
            c.setTitle(self.title)

        for page in self._pages:
            c.setPageSize(page.get_size())
            for op in page.ops:
                op.replay(c)
            c.showPage()

        c.save()
        data = buffer.getvalue()
        logger.debug(f"Serialized {len(self._pages)} pages ({len(data)} bytes)")
        return data


def widget_safe_name(text: str) -> str:
    """AcroForm-safe token for radio export values and generated field names."""
    token = re.sub(r'[^A-Za-z0-9_]+', '_', text).strip('_')
    return token or "option"
