#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the layout engine and the output renderers.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy rather than mutating an instance.
"""

from __future__ import annotations

from clauserender.options.base import BaseRendererOptions, CloneFrozenMixin
from clauserender.options.html import HtmlRendererOptions
from clauserender.options.json import JsonRendererOptions
from clauserender.options.layout import LayoutOptions
from clauserender.options.plaintext import PlainTextRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "LayoutOptions",
    "HtmlRendererOptions",
    "JsonRendererOptions",
    "PlainTextRendererOptions",
]
