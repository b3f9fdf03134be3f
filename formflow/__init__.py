"""
FormFlow - flow-layout PDF forms with a post-render Table of Contents.
"""

__version__ = "1.0.0"
