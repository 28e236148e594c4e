#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the HTML renderer."""

from io import BytesIO, StringIO

import pytest

from clauserender.blocks import BlockStyle, OutputBlock, line_break, span
from clauserender.exceptions import InvalidOptionsError
from clauserender.options import HtmlRendererOptions, JsonRendererOptions
from clauserender.renderers.html import HtmlRenderer


def clause_block(label="1", kind="numbered-clause", children=None):
    return OutputBlock(kind=kind, label=label, children=children or [span("Body")])


@pytest.mark.unit
class TestHtmlMarkup:
    """Tests for the markup of each block kind."""

    def test_plain_span(self):
        assert HtmlRenderer().render_to_string([span("Hello")]) == "<span>Hello</span>"

    def test_span_classes(self):
        html = HtmlRenderer().render_to_string([span("x", BlockStyle(bold=True, underline=True))])
        assert html == '<span class="bold underline">x</span>'

    def test_mention_background(self):
        html = HtmlRenderer().render_to_string([span("Acme", BlockStyle(highlight_color="#ffe08a"), role="mention")])
        assert html == '<span style="background-color: #ffe08a">Acme</span>'

    def test_text_is_escaped(self):
        html = HtmlRenderer().render_to_string([span('Fees < $5 & "more"')])
        assert html == '<span>Fees &lt; $5 &amp; "more"</span>'

    def test_line_break(self):
        html = HtmlRenderer().render_to_string([OutputBlock(kind="paragraph", children=[span("A"), line_break(), span("B")])])
        assert html == "<p><span>A</span><br /><span>B</span></p>"

    def test_clause(self):
        html = HtmlRenderer().render_to_string([clause_block()])
        assert html == (
            '<div class="clause"><div class="clause-number">1.</div>'
            '<div class="clause-body"><span>Body</span></div></div>'
        )

    def test_lettered_clause(self):
        html = HtmlRenderer().render_to_string([clause_block(label="b", kind="lettered-clause")])
        assert '<div class="clause-number">b.</div>' in html

    def test_description_span(self):
        description = OutputBlock(kind="inline-span", children=[span(" - details")], metadata={"role": "description"})
        heading = OutputBlock(kind="heading-4", children=[span("Fees", BlockStyle(bold=True)), description])
        html = HtmlRenderer().render_to_string([heading])
        assert html == (
            '<h4><span class="bold">Fees</span>'
            '<span style="font-weight: normal; text-decoration: none"><span> - details</span></span></h4>'
        )

    def test_list(self):
        item = OutputBlock(kind="list-item", children=[OutputBlock(kind="inline-span", children=[span("one")])])
        html = HtmlRenderer().render_to_string([OutputBlock(kind="unordered-list", children=[item])])
        assert html == "<ul><li><span><span>one</span></span></li></ul>"

    def test_heading_one_and_div(self):
        blocks = [
            OutputBlock(kind="heading-1", children=[span("TITLE")]),
            OutputBlock(kind="div", children=[span("x")]),
        ]
        assert HtmlRenderer().render_to_string(blocks) == "<h1><span>TITLE</span></h1>\n<div><span>x</span></div>"

    def test_heading_one_keeps_its_marks(self):
        heading = OutputBlock(kind="heading-1", children=[span("TITLE")], style=BlockStyle(underline=True))
        assert HtmlRenderer().render_to_string([heading]) == '<h1 class="underline"><span>TITLE</span></h1>'

    def test_class_prefix(self):
        renderer = HtmlRenderer(HtmlRendererOptions(css_class_prefix="cr-"))
        html = renderer.render_to_string([clause_block(children=[span("x", BlockStyle(bold=True))])])
        assert 'class="cr-clause"' in html
        assert 'class="cr-clause-number"' in html
        assert 'class="cr-bold"' in html


@pytest.mark.unit
class TestHtmlDocument:
    """Tests for fragment versus standalone output."""

    def test_fragment_by_default(self):
        assert "<html" not in HtmlRenderer().render_to_string([span("x")])

    def test_standalone_page(self):
        renderer = HtmlRenderer(HtmlRendererOptions(standalone=True, title="Services <Agreement>"))
        html = renderer.render_to_string([span("x")])

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Services &lt;Agreement&gt;</title>" in html
        assert "<style>" in html
        assert ".clause-number" in html
        assert "<body>\n<span>x</span>\n</body>" in html

    def test_standalone_without_css(self):
        renderer = HtmlRenderer(HtmlRendererOptions(standalone=True, include_css=False))
        assert "<style>" not in renderer.render_to_string([])


@pytest.mark.unit
class TestHtmlRendererIO:
    """Tests for options validation and writing output."""

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlRenderer(JsonRendererOptions())
        assert exc_info.value.renderer_name == "html"

    def test_render_to_path(self, tmp_path):
        path = tmp_path / "out.html"
        HtmlRenderer().render([span("Ünïcode")], path)
        assert path.read_text(encoding="utf-8") == "<span>Ünïcode</span>"

    def test_render_to_streams(self):
        text_stream = StringIO()
        binary_stream = BytesIO()
        HtmlRenderer().render([span("x")], text_stream)
        HtmlRenderer().render([span("x")], binary_stream)
        assert text_stream.getvalue() == "<span>x</span>"
        assert binary_stream.getvalue() == b"<span>x</span>"
