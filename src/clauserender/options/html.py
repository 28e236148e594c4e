#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/options/html.py
"""Configuration options for HTML rendering of output blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from clauserender.constants import DEFAULT_HTML_INCLUDE_CSS, DEFAULT_HTML_STANDALONE, DEFAULT_HTML_TITLE
from clauserender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering output blocks to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the fragment in a complete HTML page with <html>, <head> and <body>.
    include_css : bool, default True
        Embed the default contract stylesheet when rendering standalone.
    title : str, default "Contract"
        Page title used in standalone mode.
    css_class_prefix : str, default ""
        Prefix added to every class name the renderer emits, for embedding the
        fragment in a page with its own stylesheet.

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate a complete HTML page", "importance": "core"},
    )
    include_css: bool = field(
        default=DEFAULT_HTML_INCLUDE_CSS,
        metadata={"help": "Embed the default stylesheet in standalone pages", "importance": "core"},
    )
    title: str = field(
        default=DEFAULT_HTML_TITLE,
        metadata={"help": "Page title for standalone output", "importance": "core"},
    )
    css_class_prefix: str = field(
        default="",
        metadata={"help": "Prefix for emitted CSS class names", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate HTML options.

        Raises
        ------
        ValueError
            If the class prefix contains whitespace.

        """
        super().__post_init__()
        if any(ch.isspace() for ch in self.css_class_prefix):
            raise ValueError(f"css_class_prefix must not contain whitespace, got {self.css_class_prefix!r}")
