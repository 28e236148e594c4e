#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/renderers/html.py
"""HTML rendering of laid-out contract blocks.

This module provides the HtmlRenderer class which converts the output block
forest into HTML. The markup mirrors what the contract viewer displays:

- clauses become ``<div class="clause">`` with a ``clause-number`` and a
  ``clause-body`` child
- bold and underline marks become the ``bold`` / ``underline`` classes
- mentions carry their highlight colour as an inline ``background-color``
- the description suffix of a heading-4 is reset to normal weight

The renderer emits an HTML fragment by default, or a complete page with an
embedded stylesheet in standalone mode.

"""

from __future__ import annotations

import logging
from typing import Callable

from clauserender.blocks import OutputBlock
from clauserender.options.html import HtmlRendererOptions
from clauserender.renderers.base import BaseRenderer
from clauserender.utils.html_utils import escape_html, style_attribute

logger = logging.getLogger(__name__)

_DESCRIPTION_STYLE = {"font-weight": "normal", "text-decoration": "none"}


class HtmlRenderer(BaseRenderer):
    """Render output blocks to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from clauserender.blocks import span
        >>> HtmlRenderer().render_to_string([span("Hello")])
        '<span>Hello</span>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._handlers: dict[str, Callable[[OutputBlock], str]] = {
            "div": self._render_div,
            "paragraph": self._render_paragraph,
            "numbered-clause": self._render_clause,
            "lettered-clause": self._render_clause,
            "heading-1": self._render_heading_one,
            "heading-4": self._render_heading_four,
            "unordered-list": self._render_unordered_list,
            "list-item": self._render_list_item,
            "inline-span": self._render_span,
            "line-break": self._render_line_break,
        }

    def render_to_string(self, blocks: list[OutputBlock]) -> str:
        """Render the block forest to an HTML string.

        Parameters
        ----------
        blocks : list of OutputBlock
            Top-level blocks from the layout engine

        Returns
        -------
        str
            HTML fragment, or a complete page when ``standalone`` is set

        """
        content = self.options.line_separator.join(self.render_block(block) for block in blocks)
        if self.options.standalone:
            return self._wrap_in_document(content)
        return content

    def render_block(self, block: OutputBlock) -> str:
        """Render a single block and its descendants."""
        handler = self._handlers.get(block.kind)
        if handler is None:
            logger.debug("No HTML markup for block kind '%s'", block.kind)
            return ""
        return handler(block)

    def _render_children(self, block: OutputBlock) -> str:
        return "".join(self.render_block(child) for child in block.children)

    def _class(self, *names: str) -> str:
        """Build a ``class`` attribute from class names, applying the configured prefix."""
        names = tuple(name for name in names if name)
        if not names:
            return ""
        prefix = self.options.css_class_prefix
        return ' class="{}"'.format(" ".join(f"{prefix}{name}" for name in names))

    def _style_class(self, block: OutputBlock) -> str:
        return self._class(*block.style.css_classes())

    def _wrap_in_document(self, content: str) -> str:
        sep = self.options.line_separator
        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self.options.title)}</title>",
        ]
        if self.options.include_css:
            parts.extend(["<style>", self._generate_default_css(), "</style>"])
        parts.extend(["</head>", "<body>", content, "</body>", "</html>"])
        return sep.join(parts) + sep

    def _generate_default_css(self) -> str:
        p = self.options.css_class_prefix
        return f"""
        body {{
            font-family: Georgia, "Times New Roman", serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
        }}
        .{p}bold {{ font-weight: bold; }}
        .{p}underline {{ text-decoration: underline; }}
        .{p}clause {{ display: flex; gap: 0.75em; margin: 0.5em 0; }}
        .{p}clause-number {{ min-width: 2em; font-weight: bold; }}
        .{p}clause-body {{ flex: 1; }}
        h1 {{ text-align: center; }}
        h4 {{ margin: 1em 0 0.25em 0; }}
        """.rstrip()

    def _render_div(self, block: OutputBlock) -> str:
        return f"<div{self._style_class(block)}>{self._render_children(block)}</div>"

    def _render_paragraph(self, block: OutputBlock) -> str:
        return f"<p{self._style_class(block)}>{self._render_children(block)}</p>"

    def _render_clause(self, block: OutputBlock) -> str:
        number = escape_html(f"{block.label}.") if block.label else ""
        return (
            f"<div{self._class('clause')}>"
            f"<div{self._class('clause-number')}>{number}</div>"
            f"<div{self._class('clause-body')}>{self._render_children(block)}</div>"
            "</div>"
        )

    def _render_heading_one(self, block: OutputBlock) -> str:
        return f"<h1{self._style_class(block)}>{self._render_children(block)}</h1>"

    def _render_heading_four(self, block: OutputBlock) -> str:
        return f"<h4{self._style_class(block)}>{self._render_children(block)}</h4>"

    def _render_unordered_list(self, block: OutputBlock) -> str:
        return f"<ul>{self._render_children(block)}</ul>"

    def _render_list_item(self, block: OutputBlock) -> str:
        return f"<li>{self._render_children(block)}</li>"

    def _render_span(self, block: OutputBlock) -> str:
        if block.role == "description":
            style = style_attribute(_DESCRIPTION_STYLE)
        else:
            style = style_attribute({"background-color": block.style.highlight_color})

        if block.text is not None:
            content = escape_html(block.text, quote=False)
        else:
            content = self._render_children(block)
        return f"<span{self._style_class(block)}{style}>{content}</span>"

    def _render_line_break(self, block: OutputBlock) -> str:
        return "<br />"


__all__ = ["HtmlRenderer"]
