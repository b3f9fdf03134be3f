#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Contracts Module

Data handed to the layout core by the schema parser:
- Content model (closed set of element variants)
- Raw table-of-contents configuration
- Document schema (title, cover page, content)

Usage:
    from formflow.contracts import DocumentSchema

    schema = DocumentSchema.from_dict(raw)
"""

from .base import ContractError, ContentValidationError
from .content import (
    Heading,
    Paragraph,
    Table,
    TableColumn,
    Field,
    Admonition,
    Rule,
    Spacer,
    ContentElement,
    CONTENT_TYPES,
    FIELD_TYPES,
    ADMONITION_VARIANTS,
    parse_content,
    validate_content,
)
from .schema import TableOfContents, CoverPage, DocumentSchema

__all__ = [
    "ContractError",
    "ContentValidationError",
    "Heading",
    "Paragraph",
    "Table",
    "TableColumn",
    "Field",
    "Admonition",
    "Rule",
    "Spacer",
    "ContentElement",
    "CONTENT_TYPES",
    "FIELD_TYPES",
    "ADMONITION_VARIANTS",
    "parse_content",
    "validate_content",
    "TableOfContents",
    "CoverPage",
    "DocumentSchema",
]
