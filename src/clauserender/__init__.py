"""clauserender - lay out contract documents written in a clause editor.

The editor saves a contract as a tree of typed JSON nodes: clauses, blocks,
paragraphs, headings, lists, mentions and text leaves, with bold and underline
flags on any of them. clauserender turns that tree into an ordered forest of
display blocks, applying the conventions of a services contract:

- clauses are numbered ``1``, ``2``, ``3`` ... across the whole document
- entries of the "Definitions" clause are lettered ``a``, ``b``, ``c`` ...
- the "Parties" block becomes one numbered line per party with its role
- emphasis flags are inherited down the tree

The blocks can be rendered as HTML, JSON or plain text.

Examples
--------
One call from editor JSON to HTML:

    >>> from clauserender import render
    >>> html = render("contract.json", standalone=True)

The same in separate steps:

    >>> from clauserender import layout_document, load_document
    >>> from clauserender.renderers import PlainTextRenderer
    >>> blocks = layout_document(load_document("contract.json"))
    >>> print(PlainTextRenderer().render_to_string(blocks))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from clauserender.api import layout_document, load_document, render
from clauserender.ast import Document
from clauserender.blocks import BlockStyle, OutputBlock
from clauserender.exceptions import (
    ClauseRenderError,
    FileError,
    InputNotFoundError,
    InvalidOptionsError,
    MalformedFileError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from clauserender.layout import LayoutEngine
from clauserender.options import (
    HtmlRendererOptions,
    JsonRendererOptions,
    LayoutOptions,
    PlainTextRendererOptions,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load_document",
    "layout_document",
    "render",
    "Document",
    "OutputBlock",
    "BlockStyle",
    "LayoutEngine",
    "LayoutOptions",
    "HtmlRendererOptions",
    "JsonRendererOptions",
    "PlainTextRendererOptions",
    "ClauseRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InputNotFoundError",
    "MalformedFileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
