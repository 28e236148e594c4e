#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/blocks.py
"""Output block model produced by the layout engine.

An :class:`OutputBlock` is a display-ready node with HTML-like semantics. The
layout engine produces an ordered forest of them; sinks (the HTML, JSON and
plain-text renderers, or a UI widget library) consume that forest without
needing to know anything about the editor tree it came from.

Leaf spans carry ``text``; every other block carries ``children``. Clause
blocks carry a ``label`` (``"1"``, ``"2"`` ... or ``"a"``, ``"b"`` ...).
The ``metadata`` dict records a ``role`` where the layout engine gives a span
special meaning:

- ``"mention"``: a highlighted editor field
- ``"description"``: the normal-weight suffix of a heading-4
- ``"party"``: one numbered line of the Parties block
- ``"party-label"``: the quoted role of a party, e.g. ``Provider``

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from clauserender.constants import BlockKind


@dataclass(frozen=True)
class BlockStyle:
    """Discrete style attributes carried by an output block.

    Parameters
    ----------
    bold : bool, default = False
        Render in bold weight
    underline : bool, default = False
        Render underlined
    highlight_color : str or None, default = None
        Background colour of a mention highlight

    """

    bold: bool = False
    underline: bool = False
    highlight_color: Optional[str] = None

    def css_classes(self) -> list[str]:
        """Return the CSS class names for the bold and underline marks."""
        classes = []
        if self.bold:
            classes.append("bold")
        if self.underline:
            classes.append("underline")
        return classes

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"bold": self.bold, "underline": self.underline}
        if self.highlight_color is not None:
            result["highlight_color"] = self.highlight_color
        return result


PLAIN_STYLE = BlockStyle()


@dataclass
class OutputBlock:
    """A single displayable block.

    Parameters
    ----------
    kind : BlockKind
        Block kind, e.g. ``"paragraph"`` or ``"numbered-clause"``
    children : list of OutputBlock, default = empty list
        Nested blocks in display order
    label : str or None, default = None
        Clause number or letter
    text : str or None, default = None
        Text of a leaf span
    style : BlockStyle, default = plain style
        Bold, underline and highlight colour
    metadata : dict, default = empty dict
        Extra rendering hints such as ``role``

    """

    kind: BlockKind
    children: list[OutputBlock] = field(default_factory=list)
    label: Optional[str] = None
    text: Optional[str] = None
    style: BlockStyle = PLAIN_STYLE
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def role(self) -> Optional[str]:
        """Return the rendering role recorded by the layout engine, if any."""
        return self.metadata.get("role")

    def plain_text(self) -> str:
        """Return the concatenated text of this block and its descendants.

        Line breaks contribute a newline; clause labels are not included.

        """
        if self.kind == "line-break":
            return "\n"
        if self.text is not None:
            return self.text
        return "".join(child.plain_text() for child in self.children)

    def to_dict(self) -> dict[str, Any]:
        """Convert the block and its descendants into JSON-ready dictionaries."""
        result: dict[str, Any] = {"kind": self.kind}
        if self.label is not None:
            result["label"] = self.label
        if self.text is not None:
            result["text"] = self.text
        result["style"] = self.style.to_dict()
        if self.metadata:
            result["metadata"] = dict(self.metadata)
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


def span(text: str, style: BlockStyle = PLAIN_STYLE, **metadata: Any) -> OutputBlock:
    """Build a leaf inline span."""
    return OutputBlock(kind="inline-span", text=text, style=style, metadata=metadata)


def line_break() -> OutputBlock:
    return OutputBlock(kind="line-break")


def walk_blocks(blocks: list[OutputBlock]):
    """Yield every block in the forest depth first, parents before children."""
    for block in blocks:
        yield block
        yield from walk_blocks(block.children)


__all__ = ["BlockStyle", "PLAIN_STYLE", "OutputBlock", "span", "line_break", "walk_blocks"]
