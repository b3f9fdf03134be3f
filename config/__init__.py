"""
Configuration module for FormFlow.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, logger
from .settings import Settings, settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'logger',
    # Settings
    'Settings',
    'settings',
    # Constants (all exported via *)
]
