#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/sections.py
"""Recognition of sections that get special layout.

The editor does not tag sections with a kind; they are recognised by their
human-readable titles. All title matching lives in this module so that a
future upstream section tag only needs to change :func:`classify_section`
and the two definition predicates.

Matching rules:

- Parties: a ``block`` whose title is exactly the parties title.
- Agreement to Provide Services: a ``paragraph`` or ``block`` whose title
  equals the agreement title, ignoring case.
- Definitions: a clause whose title equals the definitions title, ignoring
  case. Inside that section, clauses whose title contains the definition
  keyword (ignoring case) are lettered.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from clauserender.ast.nodes import Block, Node, Paragraph
from clauserender.constants import BLOCK_LEVEL_NODE_TYPES
from clauserender.options.layout import LayoutOptions

_DEFAULT_OPTIONS = LayoutOptions()


class SectionKind(Enum):
    """Special layouts a paragraph or block can receive."""

    NONE = "none"
    PARTIES = "parties"
    AGREEMENT = "agreement"


def _normalize(title: Optional[str]) -> Optional[str]:
    return title.lower() if isinstance(title, str) else None


def classify_section(node: Node, options: LayoutOptions | None = None) -> SectionKind:
    """Decide which special layout, if any, applies to ``node``.

    Parameters
    ----------
    node : Node
        A paragraph or block node; any other node classifies as NONE
    options : LayoutOptions or None, default None
        Supplies the section titles

    Returns
    -------
    SectionKind
        The layout to apply

    """
    options = options or _DEFAULT_OPTIONS
    if not isinstance(node, (Block, Paragraph)):
        return SectionKind.NONE

    if isinstance(node, Block) and node.title == options.parties_title:
        return SectionKind.PARTIES
    if _normalize(node.title) == options.agreement_title.lower():
        return SectionKind.AGREEMENT
    return SectionKind.NONE


def is_definitions_title(title: Optional[str], options: LayoutOptions | None = None) -> bool:
    """Return True when ``title`` names the definitions section itself."""
    options = options or _DEFAULT_OPTIONS
    return _normalize(title) == options.definitions_title.lower()


def is_definition_entry_title(title: Optional[str], options: LayoutOptions | None = None) -> bool:
    """Return True when ``title`` marks a single definition clause."""
    options = options or _DEFAULT_OPTIONS
    normalized = _normalize(title)
    return normalized is not None and options.definition_keyword.lower() in normalized


def has_block_level_child(children: list[Node]) -> bool:
    """Return True when any child needs its own layout container."""
    return any(child.node_type in BLOCK_LEVEL_NODE_TYPES for child in children)


__all__ = [
    "SectionKind",
    "classify_section",
    "is_definitions_title",
    "is_definition_entry_title",
    "has_block_level_child",
]
