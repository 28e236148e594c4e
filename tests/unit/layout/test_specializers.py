#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Parties and Agreement to Provide Services layouts."""

import pytest

from clauserender.ast import Block, Clause, Document, Mention, Paragraph, Text, editor_data_to_document
from clauserender.layout import LayoutEngine
from clauserender.layout.specializers import party_label, segment_party_paragraph
from utils import block, clause, editor_doc, leaf_texts, mention, paragraph, parties_paragraph, text


def layout(data):
    return LayoutEngine().render(editor_data_to_document(data))


@pytest.mark.unit
class TestPartySegmentation:
    """Tests for splitting the Parties paragraph."""

    def test_segments(self):
        document = editor_data_to_document(editor_doc(parties_paragraph()))
        segments = segment_party_paragraph(document.children[0])

        assert [m.label for m in segments.mentions] == ["Acme Ltd", "Jane Doe"]
        assert [party_label(node) for node in segments.labels] == ["Provider", "Client"]
        assert [node.text for node in segments.rest] == [" Each being a party to this Agreement."]

    def test_first_unrelated_child_ends_collecting(self):
        """Mentions and labels after the first unrelated child belong to the rest."""
        para = Paragraph(
            children=[
                Mention(children=[Text(text="A")]),
                Text(text=" and also "),
                Mention(children=[Text(text="B")]),
                Text(text='(the "X")'),
            ]
        )
        segments = segment_party_paragraph(para)

        assert len(segments.mentions) == 1
        assert segments.labels == []
        assert len(segments.rest) == 3

    def test_party_label(self):
        assert party_label(Text(text=' (the "Provider"), and ')) == "Provider"
        assert party_label(Text(text="no quotes")) == ""
        assert party_label(None) == ""


@pytest.mark.unit
class TestPartiesBlock:
    """Tests for the Parties block layout."""

    def test_party_lines(self):
        """Each mention becomes a numbered line with its role, followed by the rest."""
        [section] = layout(editor_doc(block("Parties", parties_paragraph())))

        assert section.kind == "div"
        assert section.metadata == {"section": "parties"}
        first, second, rest = section.children
        assert first.plain_text() == "1. Acme Ltd (Provider)"
        assert second.plain_text() == "2. Jane Doe (Client)"
        assert rest.text == " Each being a party to this Agreement."

    def test_party_line_styles(self):
        [section] = layout(editor_doc(block("Parties", parties_paragraph())))
        line = section.children[1]

        assert line.role == "party"
        assert line.metadata["party_index"] == 2
        name = next(child for child in line.children if child.role == "mention")
        label = next(child for child in line.children if child.role == "party-label")
        assert name.style.highlight_color == "#c5e1a5"
        assert label.text == "Client"
        assert label.style.bold is True

    def test_fewer_labels_than_mentions(self):
        data = editor_doc(block("Parties", paragraph(mention("A"), mention("B"), text(' (the "X")'))))
        [section] = layout(data)
        assert [line.plain_text() for line in section.children] == ["1. A (X)", "2. B ()"]

    @pytest.mark.parametrize(
        "children, expected",
        [
            ([mention("X Ltd"), text('"Provider"')], ["1. X Ltd (Provider)"]),
            (
                [mention("A"), text(' (the "Provider"), and '), mention("B"), text(' (the "Client").')],
                ["1. A (Provider)", "2. B (Client)"],
            ),
        ],
        ids=["bare-quoted-label", "no-trailing-text"],
    )
    def test_party_lines_without_rest(self, children, expected):
        """A bare quoted term is a label, and no trailing text adds no extra block."""
        [section] = layout(editor_doc(block("Parties", paragraph(*children))))
        assert [line.plain_text() for line in section.children] == expected

    def test_mention_keeps_its_own_marks(self):
        data = editor_doc(block("Parties", paragraph(mention("Acme Ltd", bold=True), text(' (the "Provider")'))))
        [section] = layout(data)
        name = next(child for child in section.children[0].children if child.role == "mention")
        assert name.style.bold is True
        assert name.style.highlight_color == "#ffe08a"

    def test_inherited_marks(self):
        [section] = layout(editor_doc(block("Parties", parties_paragraph(), underline=True)))
        assert all(span.style.underline for span in section.children[0].children)

    @pytest.mark.parametrize(
        "children",
        [[], [clause("Term", text("x"))], [text("loose text")]],
        ids=["empty", "clause-only", "text-only"],
    )
    def test_parties_without_paragraph_renders_nothing(self, children):
        assert layout(editor_doc(block("Parties", *children))) == []

    def test_title_must_match_exactly(self):
        [container] = layout(editor_doc(block("parties", parties_paragraph())))
        assert container.metadata == {}
        assert "1. Acme Ltd (Provider)" not in container.plain_text()


@pytest.mark.unit
class TestAgreementSection:
    """Tests for the Agreement to Provide Services layout."""

    def test_children_become_flat_spans(self):
        node = Paragraph(
            title="Agreement to Provide Services",
            children=[
                Text(text="The Provider shall provide the Services to ", bold=True),
                Mention(color="#c5e1a5", children=[Text(text="Jane"), Text(text=" Doe")]),
                Text(text="."),
            ],
        )
        [section] = LayoutEngine().render(Document(children=[node]))

        assert section.kind == "paragraph"
        assert section.metadata == {"section": "agreement", "title": "Agreement to Provide Services"}
        assert [child.text for child in section.children] == [
            "The Provider shall provide the Services to ",
            "Jane Doe",
            ".",
        ]
        assert section.children[0].style.bold is True
        assert section.children[1].role == "mention"
        assert section.children[1].style.highlight_color == "#c5e1a5"

    def test_children_use_only_their_own_marks(self):
        node = Block(title="agreement to provide services", bold=True, children=[Text(text="plain")])
        [section] = LayoutEngine().render(Document(children=[node]))
        assert section.children[0].style.bold is False

    def test_grandchildren_are_not_laid_out(self):
        node = Block(
            title="Agreement to provide services",
            children=[Paragraph(children=[Text(text="deep")]), Clause(title="Scope")],
        )
        engine = LayoutEngine()
        [section] = engine.render(Document(children=[node]))

        assert section.kind == "div"
        assert leaf_texts([section]) == ["", ""]
        assert engine.numbering.clause_counter == 1
