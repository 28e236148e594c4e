#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/ast/__init__.py
"""Document node model for editor contract trees.

Examples
--------
    >>> from clauserender.ast import Clause, Document, Paragraph, Text
    >>> doc = Document(children=[
    ...     Clause(title="Term", children=[Paragraph(children=[Text(text="One year.")])])
    ... ])

"""

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
from clauserender.ast.serialization import canonical_node_type, dict_to_node, editor_data_to_document
from clauserender.ast.visitors import NodeVisitor

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
    "NodeVisitor",
    "canonical_node_type",
    "dict_to_node",
    "editor_data_to_document",
]
