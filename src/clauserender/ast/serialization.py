#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/ast/serialization.py
"""Conversion of editor JSON values into document nodes.

The contract editor serialises its document as a JSON array whose first
element holds the top-level nodes under ``children``::

    [{"children": [
        {"type": "h1", "children": [{"text": "SERVICES AGREEMENT"}]},
        {"type": "clause", "title": "Definitions", "children": [...]}
    ]}]

Conversion is lenient. Nothing here raises for a structurally odd tree: a
missing or non-list ``children`` becomes an empty list, entries that are not
JSON objects are skipped, and unknown ``type`` strings become
:class:`~clauserender.ast.nodes.UnknownNode`. Children nested deeper than
``MAX_NODE_DEPTH`` levels are dropped with a warning.

Examples
--------
    >>> from clauserender.ast.serialization import editor_data_to_document
    >>> doc = editor_data_to_document([{"children": [{"text": "Hello"}]}])
    >>> doc.children[0].text
    'Hello'

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

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
    NODE_TYPE_ALIASES,
    MAX_NODE_DEPTH,
    NODE_UNORDERED_LIST,
    RESERVED_NODE_KEYS,
)

logger = logging.getLogger(__name__)


def canonical_node_type(raw_type: Any) -> Optional[str]:
    """Map an editor ``type`` value onto its canonical type string.

    Parameters
    ----------
    raw_type : Any
        The ``type`` value found on the editor object

    Returns
    -------
    str or None
        Canonical type string, or None when the object carries no usable type

    """
    if not isinstance(raw_type, str) or not raw_type:
        return None
    return NODE_TYPE_ALIASES.get(raw_type, raw_type)


def _flag(data: dict[str, Any], key: str) -> bool:
    return data.get(key) is True


def _optional_str(data: dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _metadata(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in RESERVED_NODE_KEYS}


def _deserialize_children(data: dict[str, Any], depth: int) -> list[Node]:
    """Convert the ``children`` of an editor object, skipping unusable entries.

    Parameters
    ----------
    data : dict
        Editor object whose children should be converted
    depth : int
        Nesting depth of ``data``; top-level nodes are at depth 0

    Returns
    -------
    list[Node]
        Converted children in document order; empty when ``children`` is
        absent or not a list, or when they would nest deeper than
        ``MAX_NODE_DEPTH``

    """
    raw_children = data.get("children")
    if not isinstance(raw_children, list):
        return []

    if raw_children and depth + 1 >= MAX_NODE_DEPTH:
        logger.warning("Dropping children nested deeper than %d levels", MAX_NODE_DEPTH)
        return []

    children: list[Node] = []
    for index, raw_child in enumerate(raw_children):
        if not isinstance(raw_child, dict):
            logger.debug("Skipping non-object child %d of type %s", index, type(raw_child).__name__)
            continue
        children.append(dict_to_node(raw_child, depth + 1))
    return children


def _deserialize_text(data: dict[str, Any], depth: int = 0) -> Text:
    return Text(
        text=_optional_str(data, "text") or "",
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


def _deserialize_mention(data: dict[str, Any], depth: int) -> Mention:
    return Mention(
        color=_optional_str(data, "color"),
        children=_deserialize_children(data, depth),
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


def _deserialize_clause(data: dict[str, Any], depth: int) -> Clause:
    return Clause(
        title=_optional_str(data, "title"),
        children=_deserialize_children(data, depth),
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


def _deserialize_block(data: dict[str, Any], depth: int) -> Block:
    return Block(
        title=_optional_str(data, "title"),
        children=_deserialize_children(data, depth),
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


def _deserialize_paragraph(data: dict[str, Any], depth: int) -> Paragraph:
    return Paragraph(
        title=_optional_str(data, "title"),
        text=_optional_str(data, "text"),
        children=_deserialize_children(data, depth),
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


def _container_deserializer(node_class: type) -> Callable[[dict[str, Any], int], Node]:
    """Build a deserializer for container nodes that carry only children and marks."""

    def deserialize(data: dict[str, Any], depth: int) -> Node:
        return node_class(
            children=_deserialize_children(data, depth),
            bold=_flag(data, "bold"),
            underline=_flag(data, "underline"),
            metadata=_metadata(data),
        )

    return deserialize


def _deserialize_unknown(data: dict[str, Any], node_type: str, depth: int) -> UnknownNode:
    return UnknownNode(
        raw_type=node_type,
        text=_optional_str(data, "text"),
        children=_deserialize_children(data, depth),
        bold=_flag(data, "bold"),
        underline=_flag(data, "underline"),
        metadata=_metadata(data),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], int], Node]] = {
    NODE_TEXT: _deserialize_text,
    NODE_MENTION: _deserialize_mention,
    NODE_CLAUSE: _deserialize_clause,
    NODE_BLOCK: _deserialize_block,
    NODE_PARAGRAPH: _deserialize_paragraph,
    NODE_HEADING_1: _container_deserializer(HeadingOne),
    NODE_HEADING_4: _container_deserializer(HeadingFour),
    NODE_UNORDERED_LIST: _container_deserializer(UnorderedList),
    NODE_LIST_ITEM: _container_deserializer(ListItem),
    NODE_LIST_ITEM_CONTENT: _container_deserializer(ListItemContent),
}


def dict_to_node(data: dict[str, Any], depth: int = 0) -> Node:
    """Convert one editor object into a node.

    Parameters
    ----------
    data : dict
        Editor object, e.g. ``{"type": "clause", "title": "Term", "children": [...]}``
    depth : int, default 0
        Nesting depth of ``data``, used to stop converting overly deep trees

    Returns
    -------
    Node
        The matching node variant. An object without ``type`` but with a string
        ``text`` is a plain text leaf; any other unrecognised shape becomes an
        :class:`UnknownNode`.

    """
    node_type = canonical_node_type(data.get("type"))
    if node_type is None:
        if isinstance(data.get("text"), str):
            return _deserialize_text(data)
        return _deserialize_unknown(data, "", depth)

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is None:
        logger.debug("Unrecognised node type '%s'", node_type)
        return _deserialize_unknown(data, node_type, depth)
    return deserializer(data, depth)


def editor_data_to_document(data: Any) -> Document:
    """Convert a decoded editor JSON value into a :class:`Document`.

    Parameters
    ----------
    data : Any
        Decoded editor JSON. Expected to be a list whose first element is an
        object with a ``children`` list.

    Returns
    -------
    Document
        Document with the top-level nodes; empty when ``data`` does not have
        the expected shape

    """
    if not isinstance(data, list) or not data:
        logger.warning("Editor document is empty or not a list; rendering nothing")
        return Document()

    root = data[0]
    if not isinstance(root, dict):
        logger.warning("Editor document root is %s, not an object; rendering nothing", type(root).__name__)
        return Document()

    metadata = {key: value for key, value in root.items() if key != "children"}
    # the root sits above the top-level nodes, which are at depth 0
    return Document(children=_deserialize_children(root, -1), metadata=metadata)


__all__ = ["canonical_node_type", "dict_to_node", "editor_data_to_document"]
