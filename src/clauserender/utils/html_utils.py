#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/utils/html_utils.py
"""HTML helpers for the block renderer."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Mapping, Optional


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape HTML special characters."""
    return _html_escape(text, quote=quote)


def style_attribute(declarations: Mapping[str, Optional[str]]) -> str:
    """Build a ``style="..."`` attribute from CSS declarations.

    Declarations whose value is None are dropped; an empty mapping gives an
    empty string so the result can be appended to a tag unconditionally.

    Examples
    --------
        >>> style_attribute({"background-color": "#ffe08a"})
        ' style="background-color: #ffe08a"'

    """
    parts = [f"{name}: {value}" for name, value in declarations.items() if value is not None]
    if not parts:
        return ""
    return f' style="{escape_html("; ".join(parts))}"'
