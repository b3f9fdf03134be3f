#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sections Module

Provides page roles and header/footer decoration.
"""

from .manager import PageDecorator, PageInfo, PageRole, to_roman

__all__ = [
    "PageDecorator",
    "PageInfo",
    "PageRole",
    "to_roman",
]
