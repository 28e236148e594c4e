#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for converting editor JSON values into document nodes."""

import logging

import pytest

from clauserender.ast import (
    Block,
    Clause,
    Document,
    HeadingFour,
    HeadingOne,
    ListItem,
    ListItemContent,
    Mention,
    Paragraph,
    Text,
    UnknownNode,
    UnorderedList,
    canonical_node_type,
    dict_to_node,
    editor_data_to_document,
)
from clauserender.constants import MAX_NODE_DEPTH
from utils import chain_depth, editor_doc, nested_paragraphs


@pytest.mark.unit
class TestCanonicalNodeType:
    """Tests for editor type aliases."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("p", "paragraph"),
            ("h1", "heading-1"),
            ("h4", "heading-4"),
            ("ul", "unordered-list"),
            ("list", "unordered-list"),
            ("ol", "ordered-list"),
            ("li", "list-item"),
            ("lic", "list-item-content"),
            ("clause", "clause"),
            ("footnote", "footnote"),
        ],
    )
    def test_aliases(self, raw, expected):
        assert canonical_node_type(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", 3, ["p"]])
    def test_unusable_types(self, raw):
        assert canonical_node_type(raw) is None


@pytest.mark.unit
class TestDictToNode:
    """Tests for converting single editor objects."""

    @pytest.mark.parametrize(
        "data, node_class",
        [
            ({"type": "p"}, Paragraph),
            ({"type": "paragraph"}, Paragraph),
            ({"type": "block"}, Block),
            ({"type": "clause"}, Clause),
            ({"type": "mention"}, Mention),
            ({"type": "h1"}, HeadingOne),
            ({"type": "h4"}, HeadingFour),
            ({"type": "ul"}, UnorderedList),
            ({"type": "li"}, ListItem),
            ({"type": "lic"}, ListItemContent),
            ({"type": "text", "text": "x"}, Text),
        ],
    )
    def test_known_types(self, data, node_class):
        assert isinstance(dict_to_node(data), node_class)

    def test_untyped_text_leaf(self):
        node = dict_to_node({"text": "Hello", "bold": True})
        assert node == Text(text="Hello", bold=True)

    def test_untyped_object_without_text(self):
        node = dict_to_node({"children": []})
        assert isinstance(node, UnknownNode)
        assert node.raw_type == ""

    def test_unknown_type_keeps_text_and_children(self):
        node = dict_to_node({"type": "callout", "text": "Note", "children": [{"text": "x"}]})
        assert isinstance(node, UnknownNode)
        assert node.node_type == "callout"
        assert node.text == "Note"
        assert node.children == [Text(text="x")]

    def test_ordered_list_is_unknown(self):
        node = dict_to_node({"type": "ol", "children": []})
        assert isinstance(node, UnknownNode)
        assert node.node_type == "ordered-list"

    def test_fields(self):
        node = dict_to_node(
            {"type": "paragraph", "title": "Scope", "text": "inline", "underline": True, "id": "p-1", "children": []}
        )
        assert node == Paragraph(title="Scope", text="inline", underline=True, metadata={"id": "p-1"})

    def test_mention_label_and_color(self):
        node = dict_to_node({"type": "mention", "color": "#ffe08a", "children": [{"text": "Acme Ltd"}]})
        assert node.color == "#ffe08a"
        assert node.label == "Acme Ltd"

    def test_non_boolean_flags_ignored(self):
        node = dict_to_node({"text": "x", "bold": "true", "underline": 1})
        assert node.bold is False
        assert node.underline is False

    def test_non_string_title_ignored(self):
        assert dict_to_node({"type": "clause", "title": 7}).title is None

    def test_non_list_children(self):
        assert dict_to_node({"type": "clause", "children": "oops"}).children == []

    def test_non_object_children_skipped(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="clauserender.ast.serialization"):
            node = dict_to_node({"type": "p", "children": ["stray", {"text": "kept"}, None, 4]})
        assert node.children == [Text(text="kept")]
        assert "Skipping non-object child" in caplog.text


@pytest.mark.unit
class TestEditorDataToDocument:
    """Tests for converting the whole editor value."""

    def test_document(self):
        document = editor_data_to_document(editor_doc({"type": "h1", "children": [{"text": "TITLE"}]}))
        assert isinstance(document, Document)
        assert document.children == [HeadingOne(children=[Text(text="TITLE")])]

    def test_root_metadata(self):
        document = editor_data_to_document([{"id": "doc-1", "children": []}])
        assert document.metadata == {"id": "doc-1"}

    def test_only_first_root_is_used(self):
        document = editor_data_to_document([{"children": [{"text": "a"}]}, {"children": [{"text": "b"}]}])
        assert document.children == [Text(text="a")]

    @pytest.mark.parametrize("data", [None, [], {}, "text", [None], ["root"], [{"children": None}]])
    def test_malformed_values_give_empty_document(self, data):
        assert editor_data_to_document(data).children == []

    def test_deep_tree_is_cut_off(self, caplog):
        """Children nested past the node depth cap are dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="clauserender.ast.serialization"):
            document = editor_data_to_document(editor_doc(nested_paragraphs(1000)))

        assert chain_depth(document.children) == MAX_NODE_DEPTH
        assert f"deeper than {MAX_NODE_DEPTH} levels" in caplog.text

    def test_tree_at_the_cap_is_kept(self, caplog):
        with caplog.at_level(logging.WARNING, logger="clauserender.ast.serialization"):
            document = editor_data_to_document(editor_doc(nested_paragraphs(MAX_NODE_DEPTH - 1)))

        # the leaf text sits one level below the innermost paragraph
        assert chain_depth(document.children) == MAX_NODE_DEPTH
        assert caplog.text == ""
