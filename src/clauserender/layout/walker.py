#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/walker.py
"""Layout engine turning a document tree into output blocks.

The :class:`LayoutEngine` visits the document once per render pass. While it
walks it threads two pieces of state:

- the :class:`~clauserender.layout.marks.MarkSet` in effect, saved and
  restored around every node so that marks flow down one path only, and
- a :class:`~clauserender.layout.numbering.NumberingState`, rebuilt at the
  start of every pass and shared by every clause in it.

Paragraphs and blocks are first checked against the special sections in
:mod:`clauserender.layout.sections`; matching nodes are handed to
:mod:`clauserender.layout.specializers` instead of the default layout.

Malformed input never raises here. A node the engine cannot lay out produces
no blocks and the walk carries on with its siblings.

"""

from __future__ import annotations

import logging

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
from clauserender.ast.visitors import NodeVisitor
from clauserender.blocks import OutputBlock, line_break, span
from clauserender.layout.marks import CLEARED_MARKS, MarkSet, derive_marks
from clauserender.layout.numbering import NumberingState
from clauserender.layout.sections import SectionKind, classify_section, has_block_level_child
from clauserender.layout.specializers import render_agreement_section, render_parties_block
from clauserender.options.layout import LayoutOptions
from clauserender.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


class LayoutEngine(NodeVisitor):
    """Lay out editor document trees as output blocks.

    Parameters
    ----------
    options : LayoutOptions or None, default = None
        Layout options. If None, defaults are used.

    Examples
    --------
        >>> from clauserender.ast import Clause, Document, Text
        >>> engine = LayoutEngine()
        >>> blocks = engine.render(Document(children=[Clause(title="Term", children=[Text(text="One year.")])]))
        >>> blocks[0].kind, blocks[0].label
        ('numbered-clause', '1')

    """

    def __init__(self, options: LayoutOptions | None = None):
        """Initialize the engine with optional layout options."""
        self.options = options or LayoutOptions()
        self._numbering = NumberingState(self.options)
        self._marks = CLEARED_MARKS
        self._depth = 0

    @property
    def current_marks(self) -> MarkSet:
        """Marks in effect for the node currently being visited."""
        return self._marks

    @property
    def numbering(self) -> NumberingState:
        """Numbering state of the current (or most recent) pass."""
        return self._numbering

    def render(self, document: Document) -> list[OutputBlock]:
        """Lay out a whole document in a fresh render pass.

        Parameters
        ----------
        document : Document
            Document to lay out

        Returns
        -------
        list[OutputBlock]
            Top-level blocks in document order

        """
        self._numbering = NumberingState(self.options)
        self._marks = CLEARED_MARKS
        self._depth = 0

        with debug_timer(logger, "Layout"):
            blocks = document.accept(self)

        logger.debug(
            "Laid out %d top-level nodes into %d blocks (%d numbered clauses)",
            len(document.children),
            len(blocks),
            self._numbering.clause_counter - 1,
        )
        return blocks

    def render_node(self, node: Node, marks: MarkSet) -> list[OutputBlock]:
        """Lay out one node under the marks inherited from its parent.

        Parameters
        ----------
        node : Node
            Node to lay out
        marks : MarkSet
            Marks in effect for the parent

        Returns
        -------
        list[OutputBlock]
            Zero or more blocks; multi-line text yields several

        """
        if self._depth >= self.options.max_depth:
            logger.warning(
                "Omitting '%s' node nested deeper than max_depth=%d", node.node_type, self.options.max_depth
            )
            return []

        saved_marks = self._marks
        self._marks = derive_marks(marks, node)
        self._depth += 1
        try:
            return node.accept(self)
        finally:
            self._marks = saved_marks
            self._depth -= 1

    def render_children(self, children: list[Node], marks: MarkSet) -> list[OutputBlock]:
        """Lay out sibling nodes in order, each starting from ``marks``."""
        blocks: list[OutputBlock] = []
        for child in children:
            blocks.extend(self.render_node(child, marks))
        return blocks

    def render_text(self, text: str | None, marks: MarkSet) -> list[OutputBlock]:
        """Lay out a text leaf, splitting embedded newlines into line breaks.

        Each line of multi-line text is trimmed; single-line text is kept as
        it is. Empty text produces nothing.

        """
        if not text:
            return []

        style = marks.to_style()
        if "\n" not in text:
            return [span(text, style)]

        lines = text.split("\n")
        blocks: list[OutputBlock] = []
        for index, line in enumerate(lines):
            blocks.append(span(line.strip(), style))
            if index < len(lines) - 1:
                blocks.append(line_break())
        return blocks

    def prepare_children(self, node: Paragraph | Block) -> list[Node]:
        """Return the children of a paragraph or block ready for layout.

        Paragraph children that carry their content in ``text`` are collapsed
        into plain text leaves. A paragraph with text but no children renders
        that text.

        """
        children = list(node.children)
        if not children and isinstance(node, Paragraph) and node.text:
            return [Text(text=node.text)]

        if not self.options.flatten_nested_paragraphs:
            return children

        return [Text(text=child.text) if isinstance(child, Paragraph) and child.text else child for child in children]

    @staticmethod
    def container_kind(children: list[Node]) -> str:
        """Return ``"div"`` when a child is block-level, else ``"paragraph"``."""
        return "div" if has_block_level_child(children) else "paragraph"

    def visit_document(self, node: Document) -> list[OutputBlock]:
        return self.render_children(node.children, CLEARED_MARKS)

    def visit_text(self, node: Text) -> list[OutputBlock]:
        return self.render_text(node.text, self._marks)

    def visit_mention(self, node: Mention) -> list[OutputBlock]:
        return [
            OutputBlock(
                kind="inline-span",
                children=self.render_children(node.children, self._marks),
                style=self._marks.to_style(node.color),
                metadata={"role": "mention"},
            )
        ]

    def visit_clause(self, node: Clause) -> list[OutputBlock]:
        label = self._numbering.enter_clause(node.title)
        metadata = {"title": node.title} if node.title else {}
        return [
            OutputBlock(
                kind="lettered-clause" if label.lettered else "numbered-clause",
                label=label.text,
                children=self.render_children(node.children, self._marks),
                style=self._marks.to_style(),
                metadata=metadata,
            )
        ]

    def visit_block(self, node: Block) -> list[OutputBlock]:
        return self._render_section(node)

    def visit_paragraph(self, node: Paragraph) -> list[OutputBlock]:
        return self._render_section(node)

    def _render_section(self, node: Paragraph | Block) -> list[OutputBlock]:
        section = classify_section(node, self.options)
        if section is SectionKind.PARTIES:
            return render_parties_block(self, node)

        children = self.prepare_children(node)
        if section is SectionKind.AGREEMENT:
            return render_agreement_section(self, node, children)

        return [
            OutputBlock(
                kind=self.container_kind(children),
                children=self.render_children(children, self._marks),
                style=self._marks.to_style(),
            )
        ]

    def visit_heading_one(self, node: HeadingOne) -> list[OutputBlock]:
        return [
            OutputBlock(
                kind="heading-1",
                children=self.render_children(node.children, self._marks),
                style=self._marks.to_style(),
            )
        ]

    def visit_heading_four(self, node: HeadingFour) -> list[OutputBlock]:
        if not node.children:
            return [OutputBlock(kind="heading-4", style=self._marks.to_style())]

        first, *rest = node.children
        children = self.render_node(first, self._marks)
        if rest:
            # the description suffix never inherits the heading's emphasis
            children.append(
                OutputBlock(
                    kind="inline-span",
                    children=self.render_children(rest, CLEARED_MARKS),
                    metadata={"role": "description"},
                )
            )
        return [OutputBlock(kind="heading-4", children=children, style=self._marks.to_style())]

    def visit_unordered_list(self, node: UnorderedList) -> list[OutputBlock]:
        return [OutputBlock(kind="unordered-list", children=self.render_children(node.children, self._marks))]

    def visit_list_item(self, node: ListItem) -> list[OutputBlock]:
        return [OutputBlock(kind="list-item", children=self.render_children(node.children, self._marks))]

    def visit_list_item_content(self, node: ListItemContent) -> list[OutputBlock]:
        return [
            OutputBlock(
                kind="inline-span",
                children=self.render_children(node.children, self._marks),
                style=self._marks.to_style(),
            )
        ]

    def visit_unknown(self, node: UnknownNode) -> list[OutputBlock]:
        if node.text:
            return self.render_text(node.text, self._marks)
        logger.debug("Skipping unrenderable node of type '%s'", node.raw_type or "<none>")
        return []


__all__ = ["LayoutEngine"]
