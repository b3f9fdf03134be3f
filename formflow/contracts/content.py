#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Content Model

The closed set of content elements a flow document is built from:
heading, paragraph, table, field, admonition, rule and spacer.

Elements are frozen dataclasses. They are produced once by the schema
parser (``parse_content``) and only read afterwards.

Version: 1.0.0
"""

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from .base import ContentValidationError


FIELD_TYPES = (
    "text", "textarea", "checkbox", "radio",
    "dropdown", "signature", "date", "number",
)

ADMONITION_VARIANTS = ("warning", "note", "info", "tip", "danger")


# =============================================================================
# ELEMENTS
# =============================================================================

@dataclass(frozen=True)
class Heading:
    """Section heading, level 1 (outermost) to 6."""
    kind: ClassVar[str] = "heading"
    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    """Body text. Wraps on word boundaries."""
    kind: ClassVar[str] = "paragraph"
    text: str
    max_width: Optional[float] = None
    font_size: Optional[float] = None


@dataclass(frozen=True)
class TableColumn:
    """Table column definition."""
    header: str
    key: Optional[str] = None
    width: Optional[float] = None


@dataclass(frozen=True)
class Table:
    """Grid of text cells with a header row."""
    kind: ClassVar[str] = "table"
    columns: Tuple[TableColumn, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class Field:
    """Fillable form field with a label."""
    kind: ClassVar[str] = "field"
    field_type: str
    field_name: str
    label: str
    options: Tuple[str, ...] = ()
    required: bool = False
    default: Optional[str] = None
    lines: Optional[int] = None  # textarea height in lines


@dataclass(frozen=True)
class Admonition:
    """Highlighted call-out box (warning, note, info, tip, danger)."""
    kind: ClassVar[str] = "admonition"
    variant: str
    text: str
    title: Optional[str] = None


@dataclass(frozen=True)
class Rule:
    """Horizontal rule."""
    kind: ClassVar[str] = "rule"


@dataclass(frozen=True)
class Spacer:
    """Fixed vertical gap in points."""
    kind: ClassVar[str] = "spacer"
    height: float


ContentElement = Union[Heading, Paragraph, Table, Field, Admonition, Rule, Spacer]

# Every consumer that dispatches on element type must cover this tuple.
CONTENT_TYPES: Tuple[type, ...] = (Heading, Paragraph, Table, Field, Admonition, Rule, Spacer)


# =============================================================================
# VALIDATION
# =============================================================================

def _is_non_negative_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value >= 0
    )


def validate_element(element: Any, index: int) -> List[str]:
    """
    Check one element against the content model invariants.

    Returns:
        List of human-readable problems (empty when valid)
    """
    where = f"content[{index}]"

    if not isinstance(element, CONTENT_TYPES):
        return [f"{where}: unsupported element {type(element).__name__}"]

    errors = []

    if isinstance(element, Heading):
        if isinstance(element.level, bool) or not isinstance(element.level, int) \
                or not 1 <= element.level <= 6:
            errors.append(f"{where}: heading level must be an integer in 1..6, got {element.level!r}")
        if not isinstance(element.text, str):
            errors.append(f"{where}: heading text must be a string")

    elif isinstance(element, Paragraph):
        if not isinstance(element.text, str):
            errors.append(f"{where}: paragraph text must be a string")
        if element.max_width is not None and not _is_non_negative_number(element.max_width):
            errors.append(f"{where}: maxWidth must be a non-negative number")
        if element.font_size is not None and (
            not _is_non_negative_number(element.font_size) or element.font_size == 0
        ):
            errors.append(f"{where}: fontSize must be a positive number")

    elif isinstance(element, Table):
        if not element.columns:
            errors.append(f"{where}: table needs at least one column")
        for col in element.columns:
            if col.width is not None and not _is_non_negative_number(col.width):
                errors.append(f"{where}: column '{col.header}' width must be a non-negative number")
        for row_no, row in enumerate(element.rows):
            if len(row) > len(element.columns):
                errors.append(f"{where}: row {row_no} has more cells than columns")

    elif isinstance(element, Field):
        if element.field_type not in FIELD_TYPES:
            errors.append(f"{where}: unknown field type {element.field_type!r}")
        if not element.field_name:
            errors.append(f"{where}: field needs a fieldName")
        if element.field_type in ("radio", "dropdown") and not element.options:
            errors.append(f"{where}: {element.field_type} field needs options")
        if element.lines is not None and (
            isinstance(element.lines, bool) or not isinstance(element.lines, int) or element.lines < 1
        ):
            errors.append(f"{where}: lines must be a positive integer")

    elif isinstance(element, Admonition):
        if element.variant not in ADMONITION_VARIANTS:
            errors.append(f"{where}: unknown admonition variant {element.variant!r}")
        if not isinstance(element.text, str):
            errors.append(f"{where}: admonition text must be a string")

    elif isinstance(element, Spacer):
        if not _is_non_negative_number(element.height):
            errors.append(f"{where}: spacer height must be a non-negative finite number")

    return errors


def validate_content(content: Sequence[Any]) -> None:
    """
    Validate a whole content sequence.

    Raises:
        ContentValidationError: listing every problem found
    """
    if isinstance(content, (str, bytes, dict)) or not isinstance(content, Sequence):
        raise ContentValidationError(["content must be a sequence of elements"])

    errors: List[str] = []
    for i, element in enumerate(content):
        errors.extend(validate_element(element, i))

    if errors:
        raise ContentValidationError(errors)


# =============================================================================
# PARSING
# =============================================================================

def _get(raw: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First present key wins (camelCase schema keys and snake_case both accepted)."""
    for key in keys:
        if key in raw:
            return raw[key]
    return default


def _parse_columns(raw_columns: Sequence[Any]) -> Tuple[TableColumn, ...]:
    columns = []
    for col in raw_columns or ():
        if isinstance(col, str):
            columns.append(TableColumn(header=col))
        else:
            columns.append(TableColumn(
                header=str(_get(col, "header", "label", default="")),
                key=_get(col, "key", "id"),
                width=_get(col, "width"),
            ))
    return tuple(columns)


def _parse_rows(raw_rows: Sequence[Any], columns: Tuple[TableColumn, ...]) -> Tuple[Tuple[str, ...], ...]:
    rows = []
    for row in raw_rows or ():
        if isinstance(row, dict):
            cells = tuple(
                "" if row.get(col.key or col.header) is None else str(row.get(col.key or col.header))
                for col in columns
            )
        else:
            cells = tuple("" if cell is None else str(cell) for cell in row)
        rows.append(cells)
    return tuple(rows)


def _build_element(raw: Dict[str, Any]) -> ContentElement:
    """Build one element from its raw dict. Raises KeyError/TypeError/ValueError on bad shape."""
    kind = raw["type"]

    if kind == "heading":
        return Heading(level=raw["level"], text=raw["text"])

    if kind == "paragraph":
        return Paragraph(
            text=raw["text"],
            max_width=_get(raw, "maxWidth", "max_width"),
            font_size=_get(raw, "fontSize", "font_size"),
        )

    if kind == "table":
        columns = _parse_columns(raw["columns"])
        return Table(columns=columns, rows=_parse_rows(raw.get("rows"), columns))

    if kind == "field":
        options = _get(raw, "options", default=()) or ()
        default = raw.get("default")
        return Field(
            field_type=_get(raw, "fieldType", "field_type"),
            field_name=_get(raw, "fieldName", "field_name", "name", default=""),
            label=raw.get("label", ""),
            options=tuple(
                str(o.get("label", o.get("value", ""))) if isinstance(o, dict) else str(o)
                for o in options
            ),
            required=bool(raw.get("required", False)),
            default=None if default is None else str(default),
            lines=raw.get("lines"),
        )

    if kind == "admonition":
        return Admonition(variant=raw.get("variant", "note"), text=raw["text"], title=raw.get("title"))

    if kind == "rule":
        return Rule()

    if kind == "spacer":
        return Spacer(height=raw["height"])

    raise ValueError(f"unknown content type {kind!r}")


def parse_content(raw_items: Sequence[Any]) -> List[ContentElement]:
    """
    Convert raw schema dicts into content elements.

    Args:
        raw_items: Sequence of dicts with a "type" key

    Returns:
        List of validated content elements

    Raises:
        ContentValidationError: if any item is malformed (all problems reported)
    """
    if raw_items is None:
        return []
    if isinstance(raw_items, (str, bytes, dict)) or not isinstance(raw_items, Sequence):
        raise ContentValidationError(["content must be a list"])

    elements: List[ContentElement] = []
    errors: List[str] = []

    for i, raw in enumerate(raw_items):
        if isinstance(raw, CONTENT_TYPES):
            element = raw
        elif not isinstance(raw, dict):
            errors.append(f"content[{i}]: expected an object, got {type(raw).__name__}")
            continue
        else:
            try:
                element = _build_element(raw)
            except KeyError as e:
                errors.append(f"content[{i}]: missing required key {e}")
                continue
            except (TypeError, ValueError) as e:
                errors.append(f"content[{i}]: {e}")
                continue

        problems = validate_element(element, i)
        if problems:
            errors.extend(problems)
        else:
            elements.append(element)

    if errors:
        raise ContentValidationError(errors)

    return elements
