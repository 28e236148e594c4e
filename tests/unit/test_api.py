#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the top-level API functions."""

import json
from io import StringIO

import pytest

from clauserender import Document, layout_document, load_document, render
from clauserender.exceptions import InvalidOptionsError, ValidationError
from clauserender.options import HtmlRendererOptions, JsonRendererOptions, LayoutOptions
from utils import clause, editor_doc, nested_paragraphs, paragraph, text

DATA = editor_doc(clause("Term", paragraph(text("One year."))))


@pytest.mark.unit
class TestLoadDocument:
    """Tests for load_document."""

    def test_document_passthrough(self):
        document = Document()
        assert load_document(document) is document

    def test_json_text(self):
        assert len(load_document(json.dumps(DATA)).children) == 1


@pytest.mark.unit
class TestLayoutDocument:
    """Tests for layout_document."""

    def test_decoded_list(self):
        [block] = layout_document(DATA)
        assert block.kind == "numbered-clause"
        assert block.label == "1"

    def test_root_object(self):
        assert len(layout_document(DATA[0])) == 1

    def test_options(self):
        [block] = layout_document(DATA, LayoutOptions(max_depth=1))
        assert block.children == []


@pytest.mark.unit
class TestRender:
    """Tests for render."""

    def test_default_html(self):
        html = render(DATA)
        assert html.startswith('<div class="clause">')

    def test_formats(self):
        assert json.loads(render(DATA, "json"))["blocks"][0]["label"] == "1"
        assert render(DATA, "text") == "1. One year."

    def test_keyword_overrides(self):
        html = render(DATA, standalone=True, title="Term Sheet")
        assert "<title>Term Sheet</title>" in html

    def test_override_merges_with_options(self):
        html = render(DATA, renderer_options=HtmlRendererOptions(title="Base"), standalone=True)
        assert "<title>Base</title>" in html

    def test_output_stream(self):
        stream = StringIO()
        assert render(json.dumps(DATA), "text", output=stream) is None
        assert stream.getvalue() == "1. One year."

    def test_unknown_format(self):
        with pytest.raises(ValidationError) as exc_info:
            render(DATA, "pdf")  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "output_format"

    def test_unknown_override(self):
        with pytest.raises(ValidationError, match="standalon"):
            render(DATA, standalon=True)

    def test_invalid_override_value(self):
        with pytest.raises(ValidationError, match="indent"):
            render(DATA, "json", indent=-2)

    def test_mismatched_options(self):
        with pytest.raises(InvalidOptionsError):
            render(DATA, "html", renderer_options=JsonRendererOptions())

    @pytest.mark.parametrize("output_format", ["html", "json", "text"])
    def test_deep_document(self, output_format):
        """A document nested far past the depth limit still renders."""
        output = render(editor_doc(nested_paragraphs(1000)), output_format)
        assert isinstance(output, str)
        assert "bottom" not in output
