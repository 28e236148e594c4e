#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/ast/nodes.py
"""Node classes for the editor document tree.

The upstream contract editor emits a loosely typed JSON tree. This module
defines the closed set of node variants that tree is read into, so that the
layout engine can dispatch on a class rather than on a free-form ``type``
string. Each node supports the visitor pattern through ``accept``.

Node Hierarchy
--------------
Container nodes:
    - Document, Clause, Block, Paragraph
    - HeadingOne, HeadingFour
    - UnorderedList, ListItem, ListItemContent

Inline nodes:
    - Text, Mention

Fallback:
    - UnknownNode keeps the raw ``type`` of anything the editor emitted that
      is not one of the variants above.

Nodes are never mutated by the layout engine. Every node carries its own
``bold`` and ``underline`` flags; the inherited formatting is computed during
layout, not stored on the tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from clauserender.constants import (
    NODE_BLOCK,
    NODE_CLAUSE,
    NODE_HEADING_1,
    NODE_HEADING_4,
    NODE_LIST_ITEM,
    NODE_LIST_ITEM_CONTENT,
    NODE_MENTION,
    NODE_PARAGRAPH,
    NODE_TEXT,
    NODE_UNORDERED_LIST,
)


class Node(ABC):
    """Base class for all document nodes.

    Parameters
    ----------
    bold : bool, default = False
        Whether the editor marked this node bold
    underline : bool, default = False
        Whether the editor marked this node underlined
    metadata : dict, default = empty dict
        Input keys the node model does not interpret

    """

    bold: bool
    underline: bool
    metadata: dict[str, Any]

    @property
    @abstractmethod
    def node_type(self) -> str:
        """Return the canonical editor type string of this node."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


@dataclass
class Document(Node):
    """Root node holding the ordered top-level nodes of a contract.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in document order
    metadata : dict, default = empty dict
        Keys of the root editor object other than ``children``

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return "document"

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Text(Node):
    """Plain text leaf.

    Parameters
    ----------
    text : str
        Text content; embedded newlines are hard line breaks

    """

    text: str = ""
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_TEXT

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Mention(Node):
    """Highlighted inline field such as a party name or a fee amount.

    Parameters
    ----------
    color : str or None, default = None
        Display colour chosen in the editor
    children : list of Node, default = empty list
        Nodes making up the displayed label

    """

    color: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_MENTION

    @property
    def label(self) -> str:
        """Return the text of the first child, the way the mention is displayed."""
        if self.children and isinstance(self.children[0], Text):
            return self.children[0].text
        return ""

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_mention(self)


@dataclass
class Clause(Node):
    """Numbered (or lettered) contract clause.

    Parameters
    ----------
    title : str or None, default = None
        Clause title, used to detect the definitions section
    children : list of Node, default = empty list
        Clause body

    """

    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_CLAUSE

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_clause(self)


@dataclass
class Block(Node):
    """Titled generic block, e.g. the Parties block.

    Parameters
    ----------
    title : str or None, default = None
        Block title
    children : list of Node, default = empty list
        Block content

    """

    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_BLOCK

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block(self)


@dataclass
class Paragraph(Node):
    """Paragraph node.

    The editor sometimes nests a paragraph one level too deep and puts its
    content straight into ``text`` instead of a text child; ``text`` keeps
    that content so layout can collapse it back into a text leaf.

    Parameters
    ----------
    title : str or None, default = None
        Section title, if the paragraph heads a section
    text : str or None, default = None
        Inline text carried directly on the paragraph
    children : list of Node, default = empty list
        Paragraph content

    """

    title: Optional[str] = None
    text: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_PARAGRAPH

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class HeadingOne(Node):
    """Document title heading."""

    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_HEADING_1

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading_one(self)


@dataclass
class HeadingFour(Node):
    """Section heading whose first child is the title and the rest a description."""

    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_HEADING_4

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading_four(self)


@dataclass
class UnorderedList(Node):
    """Bulleted list."""

    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_UNORDERED_LIST

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_unordered_list(self)


@dataclass
class ListItem(Node):
    """Single bullet of an unordered list."""

    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_LIST_ITEM

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class ListItemContent(Node):
    """Inline content wrapper inside a list item."""

    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return NODE_LIST_ITEM_CONTENT

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item_content(self)


@dataclass
class UnknownNode(Node):
    """Node whose ``type`` is not one the layout engine knows.

    Parameters
    ----------
    raw_type : str
        The canonicalised ``type`` string from the input
    text : str or None, default = None
        Text carried by the node, if any
    children : list of Node, default = empty list
        Children carried by the node

    """

    raw_type: str = ""
    text: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    bold: bool = False
    underline: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def node_type(self) -> str:
        return self.raw_type

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_unknown(self)


__all__ = [
    "Node",
    "Document",
    "Text",
    "Mention",
    "Clause",
    "Block",
    "Paragraph",
    "HeadingOne",
    "HeadingFour",
    "UnorderedList",
    "ListItem",
    "ListItemContent",
    "UnknownNode",
]
