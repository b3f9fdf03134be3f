#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Agent

Main orchestrator for the layout core.
Takes a DocumentSchema and produces a finished PDF.

Pipeline (strictly sequential, one LayoutContext per call):
1. Resolve and validate page geometry
2. Flow layout (cover, title, content) -> drawn-element record
3. Insert TOC pages
4. Decorate headers/footers using the page offset
5. Serialize

Version: 1.0.0
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import io
import logging

from pypdf import PdfReader

from config.settings import Settings, settings as default_settings
from formflow.contracts import DocumentSchema
from formflow.formatting import PageGeometry, TocEntry, default_stylesheet, generate_anchor_id

from .context import DrawnElement
from .executor.flow import FlowLayoutEngine
from .sections.manager import PageDecorator
from .toc.offset import PageOffset
from .toc.pdf_toc import insert_toc_pages

logger = logging.getLogger(__name__)


@dataclass
class PdfResult:
    """Output of one PDF render"""
    pdf_bytes: bytes
    page_count: int
    toc_page_count: int
    offset: PageOffset
    drawn_elements: List[DrawnElement] = field(default_factory=list)
    toc_entries: List[TocEntry] = field(default_factory=list)

    def physical_page(self, entry: TocEntry) -> int:
        """1-based page in the final PDF where a TOC entry's heading sits."""
        return self.offset.physical_page_number(entry.page_number)

    def reader(self) -> PdfReader:
        """Parse the produced bytes back (page count, text, form fields)."""
        return PdfReader(io.BytesIO(self.pdf_bytes))


class LayoutAgent:
    """
    Layout Core orchestrator.

    Usage:
        agent = LayoutAgent()
        result = agent.generate_pdf(DocumentSchema.from_dict(raw))
        result.pdf_bytes

        # Or straight to disk:
        path = agent.render_to_file(raw, "form.pdf")
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize Layout Agent.

        Args:
            settings: Application settings (global settings when omitted)
        """
        self.settings = settings or default_settings
        self.stylesheet = default_stylesheet(self.settings.body_font, self.settings.heading_font)
        self.decorator_options = dict(
            show_header=self.settings.show_header,
            show_footer=self.settings.show_footer,
            footer_template=self.settings.footer_template,
        )

        logger.info(
            f"LayoutAgent initialized: {self.settings.page_size}, "
            f"fonts={self.settings.body_font}/{self.settings.heading_font}"
        )

    def _font_paths(self) -> Dict[str, Path]:
        paths = {}
        for name in {self.settings.body_font, self.settings.heading_font}:
            path = self.settings.font_path(name)
            if path is not None:
                paths[name] = path
        return paths

    def generate_pdf(self, schema: Union[DocumentSchema, Dict[str, Any]]) -> PdfResult:
        """
        Render a document to PDF bytes.

        Args:
            schema: DocumentSchema or its raw dict form

        Returns:
            PdfResult with bytes, page counts and the drawn-element record

        Raises:
            ContentValidationError: malformed content or TOC config
            InvalidGeometryError: unusable page size or margins
            FontError: configured font cannot be embedded
        """
        if not isinstance(schema, DocumentSchema):
            schema = DocumentSchema.from_dict(schema)

        logger.info(f"=== Generating PDF: {schema.title or '(untitled)'} ===")

        logger.info("Step 1: Resolving page geometry...")
        geometry = PageGeometry.from_settings(self.settings, schema.page_size).validate()

        logger.info("Step 2: Flow layout...")
        engine = FlowLayoutEngine(geometry, self.stylesheet, self._font_paths())
        ctx = engine.layout(schema.content, cover_page=schema.cover_page, title=schema.title or None)

        logger.info("Step 3: Table of contents...")
        toc_page_count = insert_toc_pages(ctx, schema.table_of_contents, schema.content, ctx.has_cover_page)

        logger.info("Step 4: Headers and footers...")
        decorator = PageDecorator(title=schema.title, **self.decorator_options)
        offset = decorator.decorate(ctx, toc_page_count)

        logger.info("Step 5: Serializing...")
        pdf_bytes = ctx.surface.save()

        logger.info(f"=== PDF complete: {ctx.page_count} pages ({toc_page_count} TOC), {len(pdf_bytes)} bytes ===")

        return PdfResult(
            pdf_bytes=pdf_bytes,
            page_count=ctx.page_count,
            toc_page_count=toc_page_count,
            offset=offset,
            drawn_elements=list(ctx.drawn_elements),
            toc_entries=list(ctx.toc_entries),
        )

    def default_output_path(self, schema: DocumentSchema) -> Path:
        """<output_dir>/<title-slug>.pdf"""
        stem = generate_anchor_id(schema.title) or "document"
        return Path(self.settings.output_dir) / f"{stem}.pdf"

    def render_to_file(
        self,
        schema: Union[DocumentSchema, Dict[str, Any]],
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Render and write the PDF.

        Args:
            schema: DocumentSchema or its raw dict form
            output_path: Target file (defaults to <output_dir>/<title-slug>.pdf)

        Returns:
            Path to created file
        """
        if not isinstance(schema, DocumentSchema):
            schema = DocumentSchema.from_dict(schema)

        result = self.generate_pdf(schema)

        path = Path(output_path) if output_path is not None else self.default_output_path(schema)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(result.pdf_bytes)

        logger.info(f"Output: {path}")
        return path
