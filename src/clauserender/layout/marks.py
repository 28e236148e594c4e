#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/marks.py
"""Inherited text formatting (marks) for the layout engine.

Marks flow down one recursive path only. Once an ancestor sets ``bold`` or
``underline`` every descendant renders with it, except where the layout
deliberately starts from :data:`CLEARED_MARKS` (the description suffix of a
heading-4). Siblings never see each other's marks because a new
:class:`MarkSet` is derived per node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from clauserender.blocks import BlockStyle


@dataclass(frozen=True)
class MarkSet:
    """Formatting flags in effect for a node."""

    bold: bool = False
    underline: bool = False

    def to_style(self, highlight_color: Optional[str] = None) -> BlockStyle:
        """Return the block style carrying these marks."""
        return BlockStyle(bold=self.bold, underline=self.underline, highlight_color=highlight_color)


CLEARED_MARKS = MarkSet()


def derive_marks(parent_marks: MarkSet, node: Any) -> MarkSet:
    """Combine inherited marks with the flags declared on ``node``.

    Parameters
    ----------
    parent_marks : MarkSet
        Marks in effect for the parent
    node : Node
        Node whose own ``bold``/``underline`` flags are added

    Returns
    -------
    MarkSet
        New mark set; a flag already set by an ancestor is never cleared

    """
    bold = parent_marks.bold or getattr(node, "bold", False) is True
    underline = parent_marks.underline or getattr(node, "underline", False) is True
    if bold == parent_marks.bold and underline == parent_marks.underline:
        return parent_marks
    return MarkSet(bold=bold, underline=underline)


def own_marks(node: Any) -> MarkSet:
    """Return the marks declared on ``node`` alone, ignoring its ancestors."""
    return derive_marks(CLEARED_MARKS, node)


__all__ = ["MarkSet", "CLEARED_MARKS", "derive_marks", "own_marks"]
