#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Table of Contents Generator - TOC entries from the content sequence.

Provides:
- Config resolution (raw, partial config -> fully defaulted config)
- Heading extraction within a level range
- Hierarchical numbering (1, 1.1, 1.1.1)
- URL-safe anchor generation
- Markdown rendering of the entry list

Shared by every output format. Works on the original content sequence,
never on laid-out pages.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from config.constants import (
    TOC_DEFAULT_TITLE,
    TOC_DEFAULT_MIN_LEVEL,
    TOC_DEFAULT_MAX_LEVEL,
    MAX_HEADING_LEVEL,
)
from formflow.contracts import Heading, TableOfContents


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class ResolvedTocConfig:
    """TOC settings with every default applied."""
    enabled: bool = True
    title: str = TOC_DEFAULT_TITLE
    min_level: int = TOC_DEFAULT_MIN_LEVEL
    max_level: int = TOC_DEFAULT_MAX_LEVEL
    numbered: bool = False
    show_page_numbers: bool = True


@dataclass
class TocEntry:
    """Single entry in the Table of Contents."""
    text: str
    level: int
    anchor_id: str
    numbering: Optional[str] = None     # set by assign_numbering()
    page_number: Optional[int] = None   # set by the page-number matcher

    def __repr__(self):
        indent = "  " * (self.level - 1)
        return f"{indent}[L{self.level}] {self.text}"


# =============================================================================
# CONFIG
# =============================================================================

def resolve_toc_config(
    raw: Union[TableOfContents, Dict[str, Any], None],
) -> Optional[ResolvedTocConfig]:
    """
    Merge a raw tableOfContents block with defaults.

    Args:
        raw: TableOfContents model, plain dict, or None

    Returns:
        ResolvedTocConfig, or None when the TOC is absent or explicitly disabled
    """
    if raw is None:
        return None

    if not isinstance(raw, TableOfContents):
        raw = TableOfContents.model_validate(raw)

    if raw.enabled is False:
        return None

    return ResolvedTocConfig(
        enabled=True,
        title=raw.title if raw.title is not None else TOC_DEFAULT_TITLE,
        min_level=raw.min_level if raw.min_level is not None else TOC_DEFAULT_MIN_LEVEL,
        max_level=raw.max_level if raw.max_level is not None else TOC_DEFAULT_MAX_LEVEL,
        numbered=bool(raw.numbered),
        show_page_numbers=raw.show_page_numbers is not False,
    )


# =============================================================================
# EXTRACTION & NUMBERING
# =============================================================================

def generate_anchor_id(text: str) -> str:
    """
    Convert heading text to a URL-safe anchor.

    - Lowercase
    - Remove characters other than word characters, whitespace and hyphens
    - Whitespace runs become a single hyphen
    - Collapse repeated hyphens, trim them from both ends

    Example:
        "Section 1: Overview!" -> "section-1-overview"
    """
    anchor = text.lower()
    anchor = re.sub(r'[^\w\s-]', '', anchor)
    anchor = re.sub(r'\s+', '-', anchor)
    anchor = re.sub(r'-+', '-', anchor)
    return anchor.strip('-')


def extract_toc_entries(content: Sequence[Any], config: ResolvedTocConfig) -> List[TocEntry]:
    """
    Collect TOC entries from headings within [min_level, max_level].

    Args:
        content: Original content sequence (document order)
        config: Resolved TOC config

    Returns:
        Entries in the order their headings appear
    """
    entries = []

    for element in content:
        if not isinstance(element, Heading):
            continue
        if element.level < config.min_level or element.level > config.max_level:
            continue

        entries.append(TocEntry(
            text=element.text,
            level=element.level,
            anchor_id=generate_anchor_id(element.text),
        ))

    return entries


def assign_numbering(entries: List[TocEntry]) -> List[TocEntry]:
    """
    Assign hierarchical numbering (1, 1.1, 1.1.1) in place.

    The shallowest level present is depth 0. A same-or-shallower entry
    resets every deeper counter, so "B1" after "B" is 2.1, never 2.2.

    Returns:
        The same list, for chaining
    """
    if not entries:
        return entries

    min_level = min(e.level for e in entries)
    counters = [0] * (MAX_HEADING_LEVEL + 1)

    for entry in entries:
        depth = entry.level - min_level
        counters[depth] += 1

        for i in range(depth + 1, len(counters)):
            counters[i] = 0

        entry.numbering = ".".join(str(c) for c in counters[:depth + 1])

    return entries


def toc_to_markdown(entries: Sequence[TocEntry], title: Optional[str] = TOC_DEFAULT_TITLE) -> str:
    """
    Render entries as a Markdown list of anchor links.

    Link targets are the entries' anchor ids, the same ``id`` an HTML
    rendering puts on each heading.

    Example output:
        ## Table of Contents

        - [1 Introduction](#introduction)
          - [1.1 Background](#background)
    """
    lines = []

    if title:
        lines.append(f"## {title}")
        lines.append("")

    if not entries:
        return "\n".join(lines)

    min_level = min(e.level for e in entries)
    for entry in entries:
        indent = "  " * (entry.level - min_level)
        label = f"{entry.numbering} {entry.text}" if entry.numbering else entry.text
        lines.append(f"{indent}- [{label}](#{entry.anchor_id})")

    return "\n".join(lines)
