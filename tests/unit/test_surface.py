"""
Unit Tests for PDF Surface (display-list pages replayed onto ReportLab)
"""

import io

import pytest
from pypdf import PdfReader

from formflow.layout import FontError, PdfSurface
from formflow.layout.surface import WidgetOp, widget_safe_name


class TestPages:
    """Test page addressing."""

    def test_add_and_get(self):
        surface = PdfSurface()
        page = surface.add_page(612, 792)
        assert surface.page_count == 1
        assert surface.get_page(0) is page
        assert page.get_size() == (612, 792)

    def test_insert_page_at_index(self):
        surface = PdfSurface()
        a = surface.add_page(612, 792)
        b = surface.add_page(612, 792)

        inserted = surface.insert_page(1, (612, 792))

        assert surface.get_pages() == [a, inserted, b]

    def test_insert_at_end(self):
        surface = PdfSurface()
        surface.add_page(612, 792)
        page = surface.insert_page(1, (595.28, 841.89))
        assert surface.get_page(1) is page

    @pytest.mark.parametrize("index", [-1, 2])
    def test_insert_out_of_range(self, index):
        surface = PdfSurface()
        surface.add_page(612, 792)
        with pytest.raises(IndexError):
            surface.insert_page(index, (612, 792))


class TestFonts:
    """Test font embedding and measurement."""

    def test_standard_font(self):
        font = PdfSurface().embed_font("Helvetica")
        assert font.name == "Helvetica"
        assert font.width_of_text_at_size("abc", 12) > 0

    def test_width_scales_with_size(self):
        font = PdfSurface().embed_font("Helvetica")
        assert font.width_of_text_at_size("abc", 24) == pytest.approx(2 * font.width_of_text_at_size("abc", 12))

    def test_handle_cached(self):
        surface = PdfSurface()
        assert surface.embed_font("Helvetica") is surface.embed_font("Helvetica")

    def test_unknown_font(self):
        with pytest.raises(FontError):
            PdfSurface().embed_font("No-Such-Font")

    def test_missing_truetype_file(self, temp_dir):
        with pytest.raises(FontError):
            PdfSurface().embed_font("Custom", temp_dir / "missing.ttf")


class TestSave:
    """Test serialization."""

    def test_pages_in_final_order(self):
        surface = PdfSurface(title="Ordered")
        font = surface.embed_font("Helvetica")
        surface.add_page(612, 792).draw_text("SECOND", 72, 700, 12, font)
        surface.insert_page(0, (612, 792)).draw_text("FIRST", 72, 700, 12, font)

        data = surface.save()

        assert data.startswith(b"%PDF")
        reader = PdfReader(io.BytesIO(data))
        assert len(reader.pages) == 2
        assert "FIRST" in reader.pages[0].extract_text()
        assert "SECOND" in reader.pages[1].extract_text()

    def test_page_size_preserved(self):
        surface = PdfSurface()
        surface.add_page(595.28, 841.89)
        reader = PdfReader(io.BytesIO(surface.save()))
        box = reader.pages[0].mediabox
        assert float(box.width) == pytest.approx(595.28, abs=0.01)
        assert float(box.height) == pytest.approx(841.89, abs=0.01)

    def test_form_fields_written(self):
        surface = PdfSurface()
        page = surface.add_page(612, 792)
        page.add_widget(WidgetOp(kind="text", name="full_name", x=72, y=700, width=200, height=20))
        page.add_widget(WidgetOp(kind="checkbox", name="agree", x=72, y=660, width=12, height=12))

        reader = PdfReader(io.BytesIO(surface.save()))

        fields = reader.get_fields()
        assert "full_name" in fields
        assert "agree" in fields

    def test_unknown_widget_kind(self):
        surface = PdfSurface()
        surface.add_page(612, 792).add_widget(WidgetOp(kind="slider", name="x", x=0, y=0, width=1, height=1))
        with pytest.raises(ValueError):
            surface.save()


class TestWidgetSafeName:
    """Test AcroForm name sanitizing."""

    def test_punctuation_replaced(self):
        assert widget_safe_name("Yes, please!") == "Yes_please"

    def test_empty_falls_back(self):
        assert widget_safe_name("!!") == "option"
