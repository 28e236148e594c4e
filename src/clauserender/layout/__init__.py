#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/__init__.py
"""Layout engine: document nodes in, output blocks out."""

from clauserender.layout.marks import CLEARED_MARKS, MarkSet, derive_marks, own_marks
from clauserender.layout.numbering import ClauseLabel, NumberingState, to_alpha_label
from clauserender.layout.sections import (
    SectionKind,
    classify_section,
    has_block_level_child,
    is_definition_entry_title,
    is_definitions_title,
)
from clauserender.layout.walker import LayoutEngine

__all__ = [
    "LayoutEngine",
    "MarkSet",
    "CLEARED_MARKS",
    "derive_marks",
    "own_marks",
    "ClauseLabel",
    "NumberingState",
    "to_alpha_label",
    "SectionKind",
    "classify_section",
    "has_block_level_child",
    "is_definition_entry_title",
    "is_definitions_title",
]
