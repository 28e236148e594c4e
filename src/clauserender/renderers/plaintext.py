#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/renderers/plaintext.py
"""Plain text rendering of laid-out contract blocks.

Marks and highlight colours are dropped. Structure is kept through clause
labels, list bullets and indentation::

    1. Acme Ltd (Provider)
    2. Jane Doe (Client)

    3. Definitions
      (a) "Services" means ...

"""

from __future__ import annotations

from clauserender.blocks import OutputBlock
from clauserender.options.plaintext import PlainTextRendererOptions
from clauserender.renderers.base import BaseRenderer

_INLINE_KINDS = frozenset({"inline-span", "line-break"})


class PlainTextRenderer(BaseRenderer):
    """Render output blocks as indented plain text.

    Parameters
    ----------
    options : PlainTextRendererOptions or None, default = None
        Plain text rendering options

    """

    def __init__(self, options: PlainTextRendererOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextRendererOptions, "text")
        options = options or PlainTextRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextRendererOptions = options

    def render_to_string(self, blocks: list[OutputBlock]) -> str:
        """Render the block forest to plain text.

        Top-level blocks are separated by a blank line.

        Parameters
        ----------
        blocks : list of OutputBlock
            Top-level blocks from the layout engine

        Returns
        -------
        str
            Plain text output

        """
        groups = [lines for lines in (self.render_lines(block) for block in blocks) if lines]
        sep = self.options.line_separator
        return (sep + sep).join(sep.join(lines) for lines in groups)

    def render_lines(self, block: OutputBlock) -> list[str]:
        """Render one block to lines, indented relative to the block itself."""
        if block.kind in _INLINE_KINDS or block.kind in ("paragraph", "heading-4"):
            return _text_lines(block.plain_text())

        if block.kind == "heading-1":
            lines = _text_lines(block.plain_text())
            if lines:
                lines.append("=" * max(len(line) for line in lines))
            return lines

        if block.kind in ("numbered-clause", "lettered-clause"):
            return self._prefixed(self._clause_prefix(block), self._children_lines(block.children))

        if block.kind == "unordered-list":
            lines: list[str] = []
            for item in block.children:
                lines.extend(self._prefixed(f"{self.options.bullet} ", self._children_lines(item.children)))
            return lines

        return self._children_lines(block.children)

    def _clause_prefix(self, block: OutputBlock) -> str:
        if not self.options.show_labels or not block.label:
            return ""
        if block.kind == "lettered-clause":
            return f"({block.label}) "
        return f"{block.label}. "

    def _prefixed(self, prefix: str, body: list[str]) -> list[str]:
        """Put ``prefix`` on the first body line and indent the others."""
        if not body:
            return [prefix.rstrip()] if prefix.strip() else []
        return [prefix + body[0]] + [self.options.indent + line for line in body[1:]]

    def _children_lines(self, children: list[OutputBlock]) -> list[str]:
        """Render siblings, joining runs of inline blocks into running text."""
        lines: list[str] = []
        inline: list[OutputBlock] = []
        for child in children:
            if child.kind in _INLINE_KINDS:
                inline.append(child)
                continue
            if inline:
                lines.extend(_text_lines("".join(block.plain_text() for block in inline)))
                inline = []
            lines.extend(self.render_lines(child))
        if inline:
            lines.extend(_text_lines("".join(block.plain_text() for block in inline)))
        return lines


def _text_lines(text: str) -> list[str]:
    if not text:
        return []
    return text.split("\n")


__all__ = ["PlainTextRenderer"]
