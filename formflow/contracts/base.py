#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Contract Classes

Errors raised when a document description is not a well-formed contract.
"""

from typing import List


class ContractError(Exception):
    """Base error for contract violations"""
    pass


class ContentValidationError(ContractError):
    """Raised when a content sequence or document description fails validation"""
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Content validation failed: {errors}")
