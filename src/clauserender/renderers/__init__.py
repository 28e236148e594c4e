#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/renderers/__init__.py
"""Renderers turning laid-out output blocks into concrete formats."""

from __future__ import annotations

from clauserender.constants import OutputFormat
from clauserender.exceptions import ValidationError
from clauserender.options.base import BaseRendererOptions
from clauserender.renderers.base import BaseRenderer
from clauserender.renderers.html import HtmlRenderer
from clauserender.renderers.json import JsonRenderer
from clauserender.renderers.plaintext import PlainTextRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "html": HtmlRenderer,
    "json": JsonRenderer,
    "text": PlainTextRenderer,
}


def get_renderer(output_format: OutputFormat, options: BaseRendererOptions | None = None) -> BaseRenderer:
    """Return a renderer instance for ``output_format``.

    Raises
    ------
    ValidationError
        If the format is not one of ``html``, ``json`` or ``text``

    """
    try:
        renderer_class = RENDERERS[output_format]
    except KeyError:
        raise ValidationError(
            f"Unknown output format: {output_format!r}", parameter_name="output_format", parameter_value=output_format
        ) from None
    return renderer_class(options)  # type: ignore[arg-type]


__all__ = ["BaseRenderer", "HtmlRenderer", "JsonRenderer", "PlainTextRenderer", "RENDERERS", "get_renderer"]
