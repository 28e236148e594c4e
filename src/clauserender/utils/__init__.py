#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/utils/__init__.py
"""Utility modules for the clauserender package."""

from clauserender.utils.decorators import debug_timer
from clauserender.utils.html_utils import escape_html, style_attribute
from clauserender.utils.io_utils import write_content

__all__ = ["debug_timer", "escape_html", "style_attribute", "write_content"]
