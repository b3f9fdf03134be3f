"""
Unit Tests for Page Decorator (headers, footers, page labels)
"""

import pytest
from formflow.contracts import CoverPage
from formflow.layout import PageDecorator, PageRole, insert_toc_pages
from formflow.layout.sections import to_roman


class TestToRoman:
    """Test Roman numeral conversion."""

    @pytest.mark.parametrize("num,expected", [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (1994, "MCMXCIV")])
    def test_values(self, num, expected):
        assert to_roman(num) == expected


class TestPageInfos:
    """Test per-page roles and labels."""

    def test_cover_toc_content(self):
        infos = PageDecorator(title="Doc").page_infos(total_pages=5, toc_page_count=1, has_cover_page=True)

        assert [i.role for i in infos] == [
            PageRole.COVER,
            PageRole.TABLE_OF_CONTENTS,
            PageRole.CONTENT,
            PageRole.CONTENT,
            PageRole.CONTENT,
        ]
        assert [i.display_number for i in infos] == ["", "i", "1", "2", "3"]
        assert infos[2].footer == "Page 1 of 3"
        assert infos[4].footer == "Page 3 of 3"

    def test_cover_is_undecorated(self):
        cover = PageDecorator(title="Doc").page_infos(3, 1, True)[0]
        assert cover.header == ""
        assert cover.footer == ""

    def test_toc_pages_roman_without_cover(self):
        infos = PageDecorator().page_infos(total_pages=3, toc_page_count=2, has_cover_page=False)

        assert [i.display_number for i in infos] == ["i", "ii", "1"]
        assert infos[1].footer == "ii"
        assert infos[2].footer == "Page 1 of 1"

    def test_header_only_on_content(self):
        infos = PageDecorator(title="Doc").page_infos(3, 1, False)
        assert [i.header for i in infos] == ["", "Doc", "Doc"]

    def test_no_toc(self):
        infos = PageDecorator().page_infos(2, 0, False)
        assert [i.footer for i in infos] == ["Page 1 of 2", "Page 2 of 2"]

    def test_switches_off(self):
        infos = PageDecorator(title="Doc", show_header=False, show_footer=False).page_infos(2, 1, False)
        assert all(i.header == "" and i.footer == "" for i in infos)

    def test_custom_template(self):
        infos = PageDecorator(footer_template="{page}/{total}").page_infos(3, 0, False)
        assert infos[1].footer == "2/3"


class TestDecorate:
    """Test drawing onto a laid-out document."""

    def test_footers_drawn_after_toc_insertion(self, engine, toc_content):
        ctx = engine.layout(toc_content, cover_page=CoverPage(title="Cover"))
        toc_pages = insert_toc_pages(ctx, {}, toc_content, True)

        offset = PageDecorator(title="Doc").decorate(ctx, toc_pages)

        assert offset.start_page == 2
        assert offset.content_page_count == 1
        assert "Page 1 of 1" in ctx.pages[2].texts
        assert "Doc" in ctx.pages[2].texts
        assert "i" in ctx.pages[1].texts
        assert "Page 1 of 1" not in ctx.pages[0].texts
