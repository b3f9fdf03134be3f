#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Schema Contracts

Raw, possibly partial configuration objects handed over by the schema
parser: the table-of-contents block, the cover page and the document
description that bundles them with the content sequence.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField, ValidationError

from .base import ContentValidationError
from .content import ContentElement, parse_content


class TableOfContents(BaseModel):
    """Raw tableOfContents block. Every key is optional; defaults are applied on resolve."""
    enabled: Optional[bool] = None
    title: Optional[str] = None
    min_level: Optional[int] = PydanticField(default=None, ge=1, le=6, alias="minLevel")
    max_level: Optional[int] = PydanticField(default=None, ge=1, le=6, alias="maxLevel")
    numbered: Optional[bool] = None
    show_page_numbers: Optional[bool] = PydanticField(default=None, alias="showPageNumbers")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


@dataclass(frozen=True)
class CoverPage:
    """Cover page text. Title falls back to the document title."""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None


@dataclass
class DocumentSchema:
    """A parsed flow document ready for layout."""
    title: str = ""
    content: List[ContentElement] = field(default_factory=list)
    table_of_contents: Optional[TableOfContents] = None
    cover_page: Optional[CoverPage] = None
    page_size: Optional[str] = None

    @property
    def has_cover_page(self) -> bool:
        return self.cover_page is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentSchema":
        """
        Build a DocumentSchema from a raw dict.

        Accepts either a top-level "title" or a "form": {"title": ...} block.

        Raises:
            ContentValidationError: if content or TOC config is malformed
        """
        form = data.get("form") or {}
        title = data.get("title", form.get("title", ""))

        content = parse_content(data.get("content") or [])

        toc = None
        raw_toc = data.get("tableOfContents", data.get("table_of_contents"))
        if raw_toc is not None:
            try:
                toc = TableOfContents.model_validate(raw_toc)
            except ValidationError as e:
                raise ContentValidationError(
                    [f"tableOfContents: {err['msg']} ({'.'.join(map(str, err['loc']))})" for err in e.errors()]
                ) from e

        cover = None
        raw_cover = data.get("coverPage", data.get("cover_page"))
        if raw_cover is not None:
            cover = CoverPage(
                title=raw_cover.get("title"),
                subtitle=raw_cover.get("subtitle"),
                author=raw_cover.get("author"),
                date=raw_cover.get("date"),
            )

        return cls(
            title=title or "",
            content=content,
            table_of_contents=toc,
            cover_page=cover,
            page_size=data.get("pageSize", form.get("pageSize")),
        )
