#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for clauserender.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Editor Node Types - type strings emitted by the upstream editor
3. Section Titles - human-readable titles that trigger special layout
4. Layout Defaults - defaults for the layout engine options
5. Renderer Defaults - defaults for the output sinks
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BlockKind = Literal[
    "heading-1",
    "heading-4",
    "paragraph",
    "div",
    "unordered-list",
    "list-item",
    "inline-span",
    "numbered-clause",
    "lettered-clause",
    "line-break",
]

OutputFormat = Literal["html", "json", "text"]

# =============================================================================
# Editor Node Types
# =============================================================================

NODE_MENTION = "mention"
NODE_CLAUSE = "clause"
NODE_PARAGRAPH = "paragraph"
NODE_BLOCK = "block"
NODE_HEADING_1 = "heading-1"
NODE_HEADING_4 = "heading-4"
NODE_UNORDERED_LIST = "unordered-list"
NODE_ORDERED_LIST = "ordered-list"
NODE_LIST_ITEM = "list-item"
NODE_LIST_ITEM_CONTENT = "list-item-content"
NODE_TEXT = "text"

# Short tag names the editor emits, mapped onto the canonical type strings
NODE_TYPE_ALIASES: dict[str, str] = {
    "p": NODE_PARAGRAPH,
    "h1": NODE_HEADING_1,
    "h4": NODE_HEADING_4,
    "ul": NODE_UNORDERED_LIST,
    "list": NODE_UNORDERED_LIST,
    "ol": NODE_ORDERED_LIST,
    "li": NODE_LIST_ITEM,
    "lic": NODE_LIST_ITEM_CONTENT,
}

# Children of these types force the parent into a generic container
BLOCK_LEVEL_NODE_TYPES = frozenset(
    {
        NODE_HEADING_1,
        NODE_HEADING_4,
        NODE_UNORDERED_LIST,
        NODE_ORDERED_LIST,
        NODE_CLAUSE,
    }
)

# Keys consumed by the node model; anything else lands in node metadata
RESERVED_NODE_KEYS = frozenset({"type", "text", "children", "bold", "underline", "color", "title"})

# =============================================================================
# Section Titles
# =============================================================================

PARTIES_TITLE = "Parties"
AGREEMENT_TITLE = "agreement to provide services"
DEFINITIONS_TITLE = "definitions"
DEFINITION_KEYWORD = "definition"

# Party labels are the double-quoted terms, e.g. (the "Provider")
PARTY_LABEL_PATTERN = r'"([^"]*)"'

# =============================================================================
# Layout Defaults
# =============================================================================

DEFAULT_FLATTEN_NESTED_PARAGRAPHS = True
DEFAULT_MAX_DEPTH = 100

# Each nesting level costs several interpreter frames while converting and
# laying out; deeper trees must stay well inside the default recursion limit.
MAX_NODE_DEPTH = 150

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_OUTPUT_FORMAT: OutputFormat = "html"
DEFAULT_HTML_TITLE = "Contract"
DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_INCLUDE_CSS = True
DEFAULT_JSON_INDENT = 2
DEFAULT_TEXT_INDENT = "  "

JSON_SCHEMA_VERSION = 1
