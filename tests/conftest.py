"""
Pytest configuration and shared fixtures for FormFlow tests.
"""
import sys
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from formflow.contracts import Heading, Paragraph
from formflow.formatting import PageGeometry, default_stylesheet
from formflow.layout import FlowLayoutEngine


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="formflow_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Letter pages, 72pt margins, output into a temp directory."""
    return Settings(
        page_size="letter",
        margin_top=72,
        margin_bottom=72,
        margin_left=72,
        margin_right=72,
        output_dir=temp_dir,
        font_dir=None,
    )


# ============================================================================
# Fixtures: Layout
# ============================================================================

@pytest.fixture
def letter_geometry() -> PageGeometry:
    """612 x 792 pt, 72pt margins -> content area 468 x 648."""
    return PageGeometry.from_name("letter")


@pytest.fixture
def engine(letter_geometry: PageGeometry) -> FlowLayoutEngine:
    return FlowLayoutEngine(letter_geometry, default_stylesheet())


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def toc_content():
    """Headings at levels 1-3 with short paragraphs (fits on one page)."""
    return [
        Heading(1, "Introduction"),
        Paragraph("Intro text."),
        Heading(2, "Background"),
        Paragraph("Background text."),
        Heading(2, "Objectives"),
        Paragraph("Objectives text."),
        Heading(3, "Primary Goals"),
        Paragraph("Goals text."),
        Heading(1, "Conclusion"),
        Paragraph("Conclusion text."),
    ]


@pytest.fixture
def toc_schema():
    """Raw schema dict with a TOC block; callers may extend tableOfContents."""
    def _make(**toc_options):
        return {
            "form": {"title": "TOC Integration Test"},
            "tableOfContents": {"enabled": True, **toc_options},
            "content": [
                {"type": "heading", "level": 1, "text": "Introduction"},
                {"type": "paragraph", "text": "Intro text."},
                {"type": "heading", "level": 2, "text": "Background"},
                {"type": "paragraph", "text": "Background text."},
                {"type": "heading", "level": 2, "text": "Objectives"},
                {"type": "paragraph", "text": "Objectives text."},
                {"type": "heading", "level": 3, "text": "Primary Goals"},
                {"type": "paragraph", "text": "Goals text."},
                {"type": "heading", "level": 1, "text": "Conclusion"},
                {"type": "paragraph", "text": "Conclusion text."},
            ],
        }
    return _make
