#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_MARGINS,
    FONT_BODY,
    FONT_HEADING,
    FOOTER_TEMPLATE,
    LOG_LEVEL,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Page ==========
    page_size: str = DEFAULT_PAGE_SIZE  # letter | legal | A4 | A5
    margin_top: float = DEFAULT_MARGINS["top"]
    margin_bottom: float = DEFAULT_MARGINS["bottom"]
    margin_left: float = DEFAULT_MARGINS["left"]
    margin_right: float = DEFAULT_MARGINS["right"]

    # ========== Fonts ==========
    body_font: str = FONT_BODY
    heading_font: str = FONT_HEADING
    font_dir: Optional[Path] = None  # Directory searched for custom .ttf files

    # ========== Headers & Footers ==========
    show_header: bool = True
    show_footer: bool = True
    footer_template: str = FOOTER_TEMPLATE  # {page} and {total} are substituted

    # ========== Output ==========
    output_dir: Path = BASE_DIR / "data" / "output"

    # ========== Logging ==========
    log_level: str = LOG_LEVEL

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        env_prefix = "FORMFLOW_"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def margins(self) -> dict:
        """Margins as a dict keyed by side."""
        return {
            "top": self.margin_top,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
            "right": self.margin_right,
        }

    def font_path(self, font_name: str) -> Optional[Path]:
        """Locate a TrueType file for font_name inside font_dir, if configured."""
        if self.font_dir is None:
            return None
        candidate = Path(self.font_dir) / f"{font_name}.ttf"
        return candidate if candidate.exists() else None


# Global settings instance
settings = Settings()
