#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/ast/visitors.py
"""Visitor pattern implementation for document node traversal.

Every node variant in :mod:`clauserender.ast.nodes` has one abstract
``visit_*`` method here, so a concrete visitor that forgets a variant cannot
be instantiated. :class:`UnknownNode` has its own method as well, which keeps
the handling of unrecognised editor types an explicit decision in each
visitor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from clauserender.ast.nodes import (
    Block,
    Clause,
    Document,
    HeadingFour,
    HeadingOne,
    ListItem,
    ListItemContent,
    Mention,
    Node,
    Paragraph,
    Text,
    UnknownNode,
    UnorderedList,
)


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Examples
    --------
    Visitor that collects clause titles:

        >>> class ClauseTitles(NodeVisitor):
        ...     def __init__(self):
        ...         self.titles = []
        ...
        ...     def visit_clause(self, node):
        ...         self.titles.append(node.title)
        ...         self.visit_children(node)
        ...
        ...     # remaining visit_* methods call self.visit_children(node)

    """

    def visit_children(self, node: Node) -> list[Any]:
        """Visit each child of ``node`` in order and collect the results."""
        return [child.accept(self) for child in getattr(node, "children", [])]

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the Document root."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text leaf."""

    @abstractmethod
    def visit_mention(self, node: Mention) -> Any:
        """Visit a Mention node."""

    @abstractmethod
    def visit_clause(self, node: Clause) -> Any:
        """Visit a Clause node."""

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_heading_one(self, node: HeadingOne) -> Any:
        """Visit a HeadingOne node."""

    @abstractmethod
    def visit_heading_four(self, node: HeadingFour) -> Any:
        """Visit a HeadingFour node."""

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_list_item_content(self, node: ListItemContent) -> Any:
        """Visit a ListItemContent node."""

    @abstractmethod
    def visit_unknown(self, node: UnknownNode) -> Any:
        """Visit a node whose editor type is not recognised."""


__all__ = ["NodeVisitor"]
