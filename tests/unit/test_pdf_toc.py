"""
Unit Tests for PDF TOC page insertion and rendering
"""

import pytest
from formflow.contracts import CoverPage, Heading, Paragraph
from formflow.formatting import Margins, PageGeometry
from formflow.layout import FontHandle, insert_toc_pages
from formflow.layout.toc import calculate_toc_page_count, entries_per_page


def _texts_at(page, text):
    return [op for op in page.text_ops() if op.text == text]


class TestTocPageCount:
    """Test TOC page allocation."""

    def test_entries_per_page_letter(self, letter_geometry):
        """(792 - 72 - 72 - 18 - 24) / 20 = 30.3 -> 30."""
        assert entries_per_page(letter_geometry) == 30

    def test_entries_per_page_small_margins(self):
        geometry = PageGeometry(612, 792, Margins(36, 36, 36, 36))
        assert entries_per_page(geometry) == 33

    @pytest.mark.parametrize("count,expected", [(0, 1), (1, 1), (30, 1), (31, 2), (61, 3)])
    def test_ceiling_with_floor_of_one(self, count, expected):
        assert calculate_toc_page_count(count, 30) == expected


class TestInsertTocPagesNoOp:
    """Test the cases that insert nothing."""

    def test_no_config(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        assert insert_toc_pages(ctx, None, toc_content, False) == 0
        assert ctx.page_count == 1

    def test_disabled(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        assert insert_toc_pages(ctx, {"enabled": False}, toc_content, False) == 0
        assert ctx.page_count == 1

    def test_empty_content(self, engine):
        ctx = engine.layout([])
        assert insert_toc_pages(ctx, {}, [], False) == 0
        assert ctx.page_count == 1

    def test_no_headings_in_range(self, engine):
        content = [Heading(1, "Only H1"), Paragraph("Text.")]
        ctx = engine.layout(content)
        assert insert_toc_pages(ctx, {"minLevel": 4, "maxLevel": 6}, content, False) == 0
        assert ctx.page_count == 1
        assert ctx.toc_entries == []


class TestInsertTocPages:
    """Test insertion position and page bookkeeping."""

    def test_inserted_at_start_without_cover(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        content_page = ctx.pages[0]

        inserted = insert_toc_pages(ctx, {}, toc_content, False)

        assert inserted == 1
        assert ctx.page_count == 2
        assert ctx.pages[1] is content_page
        assert ctx.pages[0].texts[0] == "Table of Contents"

    def test_inserted_after_cover(self, engine, toc_content):
        ctx = engine.layout(toc_content, cover_page=CoverPage(title="Cover Title"))
        cover = ctx.pages[0]

        inserted = insert_toc_pages(ctx, {}, toc_content, ctx.has_cover_page)

        assert inserted == 1
        assert ctx.page_count == 3
        assert ctx.pages[0] is cover
        assert ctx.pages[1].texts[0] == "Table of Contents"

    def test_live_pages_match_surface(self, engine, toc_content):
        ctx = engine.layout(toc_content, cover_page=CoverPage())
        insert_toc_pages(ctx, {}, toc_content, True)

        assert ctx.pages == ctx.surface.get_pages()

    def test_entries_get_content_relative_pages(self, engine, toc_content):
        ctx = engine.layout(toc_content, cover_page=CoverPage())
        insert_toc_pages(ctx, {}, toc_content, True)

        # Levels 1-3 by default; all headings sit on the first content page
        assert [e.text for e in ctx.toc_entries] == [
            "Introduction", "Background", "Objectives", "Primary Goals", "Conclusion",
        ]
        assert all(e.page_number == 1 for e in ctx.toc_entries)

    def test_overflow_onto_second_page(self, engine):
        content = [Heading(1, f"Section {i}") for i in range(35)]
        ctx = engine.layout(content)

        inserted = insert_toc_pages(ctx, {}, content, False)

        assert inserted == 2
        first, second = ctx.pages[0], ctx.pages[1]
        assert "Table of Contents" in first.texts
        assert "Table of Contents" not in second.texts
        assert "Section 29" in first.texts
        assert "Section 30" in second.texts


class TestRenderTocContent:
    """Test what is drawn on TOC pages."""

    def test_custom_title(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {"title": "Contents"}, toc_content, False)
        assert ctx.pages[0].texts[0] == "Contents"

    def test_indent_by_level(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {}, toc_content, False)
        page = ctx.pages[0]

        (intro,) = _texts_at(page, "Introduction")
        (background,) = _texts_at(page, "Background")
        (goals,) = _texts_at(page, "Primary Goals")
        assert intro.x == 72
        assert background.x == 92
        assert goals.x == 112

    def test_numbered_entries(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {"numbered": True}, toc_content, False)
        texts = ctx.pages[0].texts

        assert "1  Introduction" in texts
        assert "1.1  Background" in texts
        assert "1.2.1  Primary Goals" in texts
        assert "2  Conclusion" in texts

    def test_unnumbered_by_default(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {}, toc_content, False)
        texts = ctx.pages[0].texts

        assert "Introduction" in texts
        assert "1  Introduction" not in texts

    def test_page_number_right_aligned(self, engine, toc_content, letter_geometry):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {}, toc_content, False)
        font = FontHandle("Helvetica")

        numbers = _texts_at(ctx.pages[0], "1")
        assert len(numbers) == 5
        right_edge = letter_geometry.margins.left + letter_geometry.content_width
        for op in numbers:
            assert op.x + font.width_of_text_at_size("1", op.size) == pytest.approx(right_edge)

    def test_dot_leaders_between_text_and_number(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {}, toc_content, False)
        page = ctx.pages[0]

        (intro,) = _texts_at(page, "Introduction")
        number = next(op for op in _texts_at(page, "1") if op.y == intro.y)
        dots = [op for op in _texts_at(page, ".") if op.y == intro.y]
        font = FontHandle("Helvetica")

        assert dots
        assert dots[0].x == pytest.approx(intro.x + font.width_of_text_at_size("Introduction", 11) + 8)
        assert dots[-1].x + font.width_of_text_at_size(".", 11) < number.x - 8

    def test_no_page_numbers(self, engine, toc_content):
        ctx = engine.layout(toc_content)
        insert_toc_pages(ctx, {"showPageNumbers": False}, toc_content, False)
        texts = ctx.pages[0].texts

        assert "." not in texts
        assert "1" not in texts

    def test_leader_omitted_when_no_room(self, engine):
        long_text = "W" * 45
        content = [Heading(1, long_text)]
        ctx = engine.layout(content)
        insert_toc_pages(ctx, {}, content, False)
        texts = ctx.pages[0].texts

        assert long_text in texts
        assert "1" in texts
        assert "." not in texts
