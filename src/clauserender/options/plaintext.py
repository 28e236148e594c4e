#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/options/plaintext.py
"""Options for rendering output blocks as plain text."""

from __future__ import annotations

from dataclasses import dataclass, field

from clauserender.constants import DEFAULT_TEXT_INDENT
from clauserender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextRendererOptions(BaseRendererOptions):
    """Options for rendering output blocks to readable plain text.

    Parameters
    ----------
    indent : str, default "  "
        Indentation added for each level of clause or list nesting
    bullet : str, default "-"
        Marker written before each list item
    show_labels : bool, default True
        Prefix clauses with their number ("1.") or letter ("(a)")

    """

    indent: str = field(
        default=DEFAULT_TEXT_INDENT,
        metadata={"help": "Indentation per nesting level", "importance": "core"},
    )
    bullet: str = field(
        default="-",
        metadata={"help": "List item marker", "importance": "core"},
    )
    show_labels: bool = field(
        default=True,
        metadata={"help": "Prefix clauses with their number or letter", "importance": "core"},
    )
