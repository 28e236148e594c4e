#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for special section recognition."""

import pytest

from clauserender.ast import Block, Clause, HeadingFour, Paragraph, Text, UnknownNode, UnorderedList
from clauserender.layout.sections import (
    SectionKind,
    classify_section,
    has_block_level_child,
    is_definition_entry_title,
    is_definitions_title,
)
from clauserender.options import LayoutOptions


@pytest.mark.unit
class TestClassifySection:
    """Tests for classify_section."""

    def test_parties_block(self):
        assert classify_section(Block(title="Parties")) is SectionKind.PARTIES

    def test_parties_title_is_case_sensitive(self):
        assert classify_section(Block(title="parties")) is SectionKind.NONE

    def test_parties_requires_block(self):
        """A paragraph titled Parties gets the default layout."""
        assert classify_section(Paragraph(title="Parties")) is SectionKind.NONE

    @pytest.mark.parametrize("node_class", [Block, Paragraph])
    def test_agreement_section(self, node_class):
        node = node_class(title="Agreement To Provide SERVICES")
        assert classify_section(node) is SectionKind.AGREEMENT

    def test_untitled_and_other_nodes(self):
        assert classify_section(Paragraph()) is SectionKind.NONE
        assert classify_section(Clause(title="Agreement to provide services")) is SectionKind.NONE
        assert classify_section(Text(text="Parties")) is SectionKind.NONE

    def test_custom_titles(self):
        options = LayoutOptions(parties_title="The Parties", agreement_title="scope of work")
        assert classify_section(Block(title="The Parties"), options) is SectionKind.PARTIES
        assert classify_section(Paragraph(title="Scope of Work"), options) is SectionKind.AGREEMENT
        assert classify_section(Block(title="Parties"), options) is SectionKind.NONE


@pytest.mark.unit
class TestDefinitionTitles:
    """Tests for the definition title predicates."""

    def test_definitions_title(self):
        assert is_definitions_title("Definitions")
        assert is_definitions_title("DEFINITIONS")
        assert not is_definitions_title("Definitions and Interpretation")
        assert not is_definitions_title(None)

    def test_definition_entry_title(self):
        assert is_definition_entry_title("Definition of Services")
        assert is_definition_entry_title("Services definition")
        assert not is_definition_entry_title("Term")
        assert not is_definition_entry_title(None)


@pytest.mark.unit
class TestBlockLevelChildren:
    """Tests for the container-versus-paragraph decision."""

    def test_inline_children_only(self):
        assert not has_block_level_child([Text(text="a"), Paragraph(text="b")])

    @pytest.mark.parametrize(
        "child",
        [Clause(), HeadingFour(), UnorderedList(), UnknownNode(raw_type="heading-1"), UnknownNode(raw_type="ordered-list")],
    )
    def test_block_level_child(self, child):
        assert has_block_level_child([Text(text="a"), child])

    def test_empty(self):
        assert not has_block_level_child([])
