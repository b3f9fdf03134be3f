#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DOCX Table of Contents - Word TOC field via python-docx.

Word fills in entries and page numbers when fields are updated
(Ctrl+A, F9 or right-click > Update Field), so no layout pass is needed.
"""

from typing import Any, Dict, Optional, Union
import logging

from docx.enum.text import WD_BREAK
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from formflow.contracts import TableOfContents
from formflow.formatting import Stylesheet, default_stylesheet, resolve_toc_config

logger = logging.getLogger(__name__)


def build_toc_instruction(min_level: int, max_level: int, show_page_numbers: bool = True) -> str:
    r"""
    Field code for a Word TOC.

    \o heading range, \h hyperlinks, \z hide tab/page in web view,
    \u outline levels, \n suppresses page numbers.
    """
    instruction = f'TOC \\o "{min_level}-{max_level}" \\h \\z \\u'
    if not show_page_numbers:
        instruction += " \\n"
    return instruction


def _hex_to_rgb(color: str) -> RGBColor:
    return RGBColor.from_string(color.lstrip("#").upper())


def create_docx_toc(
    document,
    raw_toc_config: Union[TableOfContents, Dict[str, Any], None],
    stylesheet: Optional[Stylesheet] = None,
) -> int:
    """
    Append a TOC title, a TOC field and a page break to ``document``.

    Args:
        document: python-docx Document
        raw_toc_config: Raw tableOfContents block (None / disabled -> no-op)
        stylesheet: Styles for the title (built-in defaults when omitted)

    Returns:
        Number of paragraphs appended (0 when the TOC is disabled)
    """
    config = resolve_toc_config(raw_toc_config)
    if config is None:
        return 0

    title_style = (stylesheet or default_stylesheet()).heading(1)

    # Title
    title = document.add_paragraph()
    title.paragraph_format.space_after = Pt(title_style.margin_bottom)
    run = title.add_run(config.title)
    run.font.name = title_style.font
    run.font.size = Pt(title_style.font_size)
    run.font.color.rgb = _hex_to_rgb(title_style.color)
    run.font.bold = True

    # TOC field
    paragraph = document.add_paragraph()
    run = paragraph.add_run()
    fldChar1 = OxmlElement('w:fldChar')
    fldChar1.set(qn('w:fldCharType'), 'begin')

    instrText = OxmlElement('w:instrText')
    instrText.set(qn('xml:space'), 'preserve')
    instrText.text = build_toc_instruction(config.min_level, config.max_level, config.show_page_numbers)

    fldChar2 = OxmlElement('w:fldChar')
    fldChar2.set(qn('w:fldCharType'), 'separate')

    fldChar3 = OxmlElement('w:fldChar')
    fldChar3.set(qn('w:fldCharType'), 'end')

    run._r.append(fldChar1)
    run._r.append(instrText)
    run._r.append(fldChar2)
    run._r.append(fldChar3)

    # Page break after TOC
    breaker = document.add_paragraph()
    breaker.add_run().add_break(WD_BREAK.PAGE)

    logger.info(f"DOCX TOC field added for levels {config.min_level}-{config.max_level}")
    return 3
