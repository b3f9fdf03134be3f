"""
Unit Tests for TOC Generator

Config resolution, heading extraction, hierarchical numbering, anchors
and Markdown rendering.
"""

import pytest
from formflow.contracts import Heading, Paragraph, Spacer, TableOfContents
from formflow.formatting import (
    ResolvedTocConfig,
    TocEntry,
    resolve_toc_config,
    extract_toc_entries,
    assign_numbering,
    generate_anchor_id,
    toc_to_markdown,
)


def _entries(*specs):
    return [TocEntry(text=text, level=level, anchor_id=generate_anchor_id(text)) for level, text in specs]


class TestResolveTocConfig:
    """Test raw TOC config -> resolved config."""

    def test_none_returns_none(self):
        """Absent TOC config resolves to None."""
        assert resolve_toc_config(None) is None

    def test_disabled_returns_none(self):
        """enabled: false resolves to None."""
        assert resolve_toc_config({"enabled": False}) is None
        assert resolve_toc_config(TableOfContents(enabled=False)) is None

    def test_empty_config_gets_defaults(self):
        """An empty block is enabled with every default applied."""
        config = resolve_toc_config({})
        assert config == ResolvedTocConfig(
            enabled=True,
            title="Table of Contents",
            min_level=1,
            max_level=3,
            numbered=False,
            show_page_numbers=True,
        )

    def test_partial_config_merges(self):
        """Given keys override, the rest default."""
        config = resolve_toc_config({"title": "Contents", "maxLevel": 2, "numbered": True})
        assert config.title == "Contents"
        assert config.min_level == 1
        assert config.max_level == 2
        assert config.numbered is True
        assert config.show_page_numbers is True

    def test_snake_case_keys_accepted(self):
        """Python field names work as well as schema aliases."""
        config = resolve_toc_config({"min_level": 2, "show_page_numbers": False})
        assert config.min_level == 2
        assert config.show_page_numbers is False


class TestGenerateAnchorId:
    """Test URL-safe anchor generation."""

    def test_punctuation_removed(self):
        assert generate_anchor_id("Section 1: Overview!") == "section-1-overview"

    def test_surrounding_whitespace_trimmed(self):
        assert generate_anchor_id("  Hello  ") == "hello"

    def test_runs_collapse(self):
        """Repeated spaces and hyphens collapse to one hyphen."""
        assert generate_anchor_id("a   b --- c") == "a-b-c"

    def test_idempotent(self):
        """Applying twice gives the same anchor."""
        once = generate_anchor_id("Goals & Non-Goals (Draft)")
        assert generate_anchor_id(once) == once
        assert once == "goals-non-goals-draft"

    def test_only_punctuation(self):
        assert generate_anchor_id("?!") == ""


class TestExtractTocEntries:
    """Test heading extraction."""

    def test_level_range_is_exact(self):
        """Levels {1,2,3,4,1} with range [2,3] keep only levels 2 and 3, in order."""
        content = [
            Heading(1, "One"),
            Heading(2, "Two"),
            Heading(3, "Three"),
            Heading(4, "Four"),
            Heading(1, "One again"),
        ]
        config = resolve_toc_config({"minLevel": 2, "maxLevel": 3})

        entries = extract_toc_entries(content, config)

        assert [(e.level, e.text) for e in entries] == [(2, "Two"), (3, "Three")]

    def test_non_headings_ignored(self):
        content = [Paragraph("Introduction"), Spacer(10), Heading(1, "Introduction")]
        entries = extract_toc_entries(content, resolve_toc_config({}))
        assert len(entries) == 1

    def test_entries_have_anchors_and_no_page(self):
        entries = extract_toc_entries([Heading(1, "Getting Started")], resolve_toc_config({}))
        assert entries[0].anchor_id == "getting-started"
        assert entries[0].page_number is None
        assert entries[0].numbering is None

    def test_empty_content(self):
        assert extract_toc_entries([], resolve_toc_config({})) == []


class TestAssignNumbering:
    """Test hierarchical numbering."""

    def test_hierarchical_reset(self):
        """Deeper counters reset when a shallower heading appears (2.1, not 2.2)."""
        entries = _entries((1, "A"), (2, "A1"), (3, "A1a"), (1, "B"), (2, "B1"))
        assign_numbering(entries)
        assert [e.numbering for e in entries] == ["1", "1.1", "1.1.1", "2", "2.1"]

    def test_third_top_level(self):
        entries = _entries((1, "A"), (1, "B"), (1, "C"), (2, "C1"))
        assign_numbering(entries)
        assert [e.numbering for e in entries] == ["1", "2", "3", "3.1"]

    def test_minimum_level_is_depth_zero(self):
        """When the shallowest entry is level 2, level-2 entries number 1, 2..."""
        entries = _entries((2, "X"), (3, "X1"), (2, "Y"))
        assign_numbering(entries)
        assert [e.numbering for e in entries] == ["1", "1.1", "2"]

    def test_six_levels(self):
        entries = _entries(*[(level, f"L{level}") for level in range(1, 7)])
        assign_numbering(entries)
        assert entries[-1].numbering == "1.1.1.1.1.1"

    def test_returns_same_list(self):
        entries = _entries((1, "A"))
        assert assign_numbering(entries) is entries

    def test_empty(self):
        assert assign_numbering([]) == []


class TestTocToMarkdown:
    """Test Markdown rendering."""

    def test_nested_links(self):
        entries = _entries((1, "Introduction"), (2, "Background"))
        md = toc_to_markdown(entries, "Contents")
        assert md.splitlines() == [
            "## Contents",
            "",
            "- [Introduction](#introduction)",
            "  - [Background](#background)",
        ]

    def test_numbering_prefixed(self):
        entries = assign_numbering(_entries((1, "Introduction"), (2, "Background")))
        md = toc_to_markdown(entries)
        assert "- [1 Introduction](#introduction)" in md
        assert "  - [1.1 Background](#background)" in md

    def test_no_title(self):
        md = toc_to_markdown(_entries((1, "Only")), title=None)
        assert md == "- [Only](#only)"

    def test_link_targets_match_heading_ids(self):
        """Every link points at the id a renderer would give its heading."""
        content = [Heading(1, "Section 1: Overview!"), Paragraph("x"), Heading(2, "Next Steps")]
        config = resolve_toc_config({})
        md = toc_to_markdown(extract_toc_entries(content, config), title=None)

        targets = [line.rsplit("(#", 1)[1].rstrip(")") for line in md.splitlines()]
        assert targets == [generate_anchor_id(h.text) for h in content if isinstance(h, Heading)]
        assert targets == ["section-1-overview", "next-steps"]
