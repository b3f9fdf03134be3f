"""
Layout Executor - places content onto pages.
"""

from .flow import FlowLayoutEngine, wrap_text

__all__ = ["FlowLayoutEngine", "wrap_text"]
