#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/specializers.py
"""Special layouts for the Parties block and the Agreement section.

Both override the default paragraph/block layout of the engine for one
subtree. They are plain functions receiving the engine, so they can fall back
on its per-node dispatch for whatever they do not handle themselves.

Parties
-------
The editor writes the parties as one paragraph::

    [mention(Acme Ltd), text(' (the "Provider"), and '),
     mention(Jane Doe), text(' (the "Client").'),
     text(' Each being a party ...')]

which is laid out as one numbered line per party followed by the remaining
text::

    1. Acme Ltd (Provider)
    2. Jane Doe (Client)
    Each being a party ...

Agreement to Provide Services
-----------------------------
Each immediate child becomes one flat span styled by its own flags only;
grandchildren are not laid out.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from clauserender.ast.nodes import Block, Mention, Node, Paragraph
from clauserender.blocks import OutputBlock, span
from clauserender.constants import PARTY_LABEL_PATTERN
from clauserender.layout.marks import MarkSet, derive_marks, own_marks

if TYPE_CHECKING:
    from clauserender.layout.walker import LayoutEngine

logger = logging.getLogger(__name__)

_PARTY_LABEL_RE = re.compile(PARTY_LABEL_PATTERN)


@dataclass
class PartySegments:
    """The children of a Parties paragraph split into the three scan phases.

    Parameters
    ----------
    mentions : list of Mention
        Party mentions found before the first unrelated child
    labels : list of Node
        Text nodes holding a double-quoted role, in order
    rest : list of Node
        Every child from the first one that is neither, inclusive

    """

    mentions: list[Mention] = field(default_factory=list)
    labels: list[Node] = field(default_factory=list)
    rest: list[Node] = field(default_factory=list)


def _node_text(node: Node) -> Optional[str]:
    text = getattr(node, "text", None)
    return text if isinstance(text, str) else None


def _inline_text(node: Node) -> str:
    """Join the text of the immediate children of ``node``."""
    return "".join(_node_text(child) or "" for child in getattr(node, "children", []))


def segment_party_paragraph(paragraph: Paragraph) -> PartySegments:
    """Split a Parties paragraph into mentions, role labels and the rest.

    Scanning goes left to right while collecting: a mention is appended to
    ``mentions``, a text node containing a double-quoted substring to
    ``labels``. The first child that is neither ends collecting, and it and
    every later child go to ``rest``.

    """
    segments = PartySegments()
    collecting = True
    for child in paragraph.children:
        if collecting and isinstance(child, Mention):
            segments.mentions.append(child)
            continue

        text = _node_text(child)
        if collecting and text is not None and _PARTY_LABEL_RE.search(text):
            segments.labels.append(child)
            continue

        collecting = False
        segments.rest.append(child)
    return segments


def party_label(node: Optional[Node]) -> str:
    """Return the quoted role in a label node, e.g. ``Provider`` for ``(the "Provider")``.

    A missing node, or one without a quoted term, gives the empty string.

    """
    if node is None:
        return ""
    match = _PARTY_LABEL_RE.search(_node_text(node) or "")
    return match.group(1) if match else ""


def _party_line(index: int, mention: Mention, label: str, marks: MarkSet) -> OutputBlock:
    label_marks = MarkSet(bold=True, underline=marks.underline)
    return OutputBlock(
        kind="paragraph",
        children=[
            span(f"{index}. ", marks.to_style()),
            span(mention.label, derive_marks(marks, mention).to_style(mention.color), role="mention"),
            span(" (", marks.to_style()),
            span(label, label_marks.to_style(), role="party-label"),
            span(")", marks.to_style()),
        ],
        style=marks.to_style(),
        metadata={"role": "party", "party_index": index},
    )


def render_parties_block(engine: LayoutEngine, node: Block) -> list[OutputBlock]:
    """Lay out the Parties block as numbered party lines plus the remaining text.

    Parameters
    ----------
    engine : LayoutEngine
        Engine laying out the document; renders the remaining children
    node : Block
        The Parties block

    Returns
    -------
    list[OutputBlock]
        A single container block, or nothing when the block has no paragraph

    """
    paragraph = next((child for child in node.children if isinstance(child, Paragraph)), None)
    if paragraph is None:
        logger.debug("Parties block has no paragraph; rendering nothing")
        return []

    marks = derive_marks(engine.current_marks, paragraph)
    segments = segment_party_paragraph(paragraph)
    if len(segments.labels) < len(segments.mentions):
        logger.debug("Parties block has %d mentions but %d labels", len(segments.mentions), len(segments.labels))

    children = [
        _party_line(
            index + 1,
            mention,
            party_label(segments.labels[index] if index < len(segments.labels) else None),
            marks,
        )
        for index, mention in enumerate(segments.mentions)
    ]
    children.extend(engine.render_children(segments.rest, marks))
    return [OutputBlock(kind="div", children=children, style=marks.to_style(), metadata={"section": "parties"})]


def _agreement_span(child: Node) -> OutputBlock:
    marks = own_marks(child)
    if isinstance(child, Mention):
        return span(_inline_text(child), marks.to_style(child.color), role="mention")
    return span(_node_text(child) or "", marks.to_style())


def render_agreement_section(engine: LayoutEngine, node: Paragraph | Block, children: list[Node]) -> list[OutputBlock]:
    """Lay out the Agreement to Provide Services section as flat spans.

    Parameters
    ----------
    engine : LayoutEngine
        Engine laying out the document; decides container versus paragraph
    node : Paragraph or Block
        The section node
    children : list of Node
        The section's children after nested paragraph flattening

    Returns
    -------
    list[OutputBlock]
        A single ``div`` or ``paragraph`` block of spans

    """
    return [
        OutputBlock(
            kind=engine.container_kind(children),
            children=[_agreement_span(child) for child in children],
            metadata={"section": "agreement", "title": node.title},
        )
    ]


__all__ = [
    "PartySegments",
    "segment_party_paragraph",
    "party_label",
    "render_parties_block",
    "render_agreement_section",
]
