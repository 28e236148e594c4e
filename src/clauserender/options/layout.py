#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/options/layout.py
"""Options for the layout engine.

The section titles are configurable so that a differently worded contract
template can reuse the special layouts; the defaults match the titles the
contract editor produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from clauserender.constants import (
    AGREEMENT_TITLE,
    DEFAULT_FLATTEN_NESTED_PARAGRAPHS,
    DEFAULT_MAX_DEPTH,
    MAX_NODE_DEPTH,
    DEFINITION_KEYWORD,
    DEFINITIONS_TITLE,
    PARTIES_TITLE,
)
from clauserender.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class LayoutOptions(CloneFrozenMixin):
    """Configuration for converting a document tree into output blocks.

    Parameters
    ----------
    flatten_nested_paragraphs : bool, default True
        Collapse paragraph children that carry only text into text leaves
        before rendering a paragraph or block.
    max_depth : int, default 100
        Deepest nesting level rendered, at most ``MAX_NODE_DEPTH`` (150).
        Deeper subtrees are omitted with a warning.
    parties_title : str, default "Parties"
        Exact (case-sensitive) title of the block laid out as the party list.
    agreement_title : str, default "agreement to provide services"
        Title, compared case-insensitively, of the section whose children are
        rendered as flat spans.
    definitions_title : str, default "definitions"
        Title, compared case-insensitively, of the clause that starts
        definition lettering.
    definition_keyword : str, default "definition"
        Substring, compared case-insensitively, that marks a clause inside the
        definitions section as a lettered definition.

    Examples
    --------
    Render without the nested paragraph workaround:
        >>> options = LayoutOptions(flatten_nested_paragraphs=False)

    """

    flatten_nested_paragraphs: bool = field(
        default=DEFAULT_FLATTEN_NESTED_PARAGRAPHS,
        metadata={"help": "Collapse text-only nested paragraphs into text", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum nesting depth rendered", "type": int, "importance": "security"},
    )
    parties_title: str = field(
        default=PARTIES_TITLE,
        metadata={"help": "Title of the block rendered as the numbered party list", "importance": "core"},
    )
    agreement_title: str = field(
        default=AGREEMENT_TITLE,
        metadata={"help": "Title of the section rendered as flat spans", "importance": "core"},
    )
    definitions_title: str = field(
        default=DEFINITIONS_TITLE,
        metadata={"help": "Title of the clause that starts definition lettering", "importance": "core"},
    )
    definition_keyword: str = field(
        default=DEFINITION_KEYWORD,
        metadata={"help": "Title substring of lettered definition clauses", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate layout options.

        Raises
        ------
        ValueError
            If max_depth is outside 1..MAX_NODE_DEPTH or a title is empty.

        """
        if not 1 <= self.max_depth <= MAX_NODE_DEPTH:
            raise ValueError(f"max_depth must be between 1 and {MAX_NODE_DEPTH}, got {self.max_depth}")
        for name in ("parties_title", "agreement_title", "definitions_title", "definition_keyword"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")
