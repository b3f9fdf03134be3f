"""
Renderer Module - output-format specific TOC rendering.
"""

from .docx_toc import create_docx_toc, build_toc_instruction

__all__ = ["create_docx_toc", "build_toc_instruction"]
