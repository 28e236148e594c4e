"""The main exported API functions for laying out and rendering contracts."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/clauserender/api.py
import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Union

from clauserender.ast.nodes import Document
from clauserender.blocks import OutputBlock
from clauserender.constants import DEFAULT_OUTPUT_FORMAT, OutputFormat
from clauserender.exceptions import ValidationError
from clauserender.layout.walker import LayoutEngine
from clauserender.options.base import BaseRendererOptions
from clauserender.options.layout import LayoutOptions
from clauserender.parsers.editor_json import EditorJsonParser
from clauserender.renderers import RENDERERS, get_renderer

logger = logging.getLogger(__name__)

DocumentInput = Union[Document, str, Path, IO[bytes], IO[str], bytes]


def load_document(source: DocumentInput) -> Document:
    """Load an editor document into a node tree.

    Parameters
    ----------
    source : Document, str, Path, IO[bytes], IO[str] or bytes
        A file path, raw editor JSON (text or bytes), an open stream, or an
        already loaded Document, which is returned unchanged

    Returns
    -------
    Document
        The document tree

    Raises
    ------
    InputNotFoundError
        If a path is given and no such file exists
    ParsingError
        If the input is not valid JSON

    Examples
    --------
        >>> doc = load_document("contract.json")
        >>> len(doc.children)
        12

    """
    if isinstance(source, Document):
        return source
    return EditorJsonParser().parse(source)


def layout_document(document: Union[Document, list, dict], options: Optional[LayoutOptions] = None) -> list[OutputBlock]:
    """Lay out a document tree as output blocks.

    Parameters
    ----------
    document : Document, list or dict
        A Document, or an already decoded editor value (the JSON array the
        editor saves, or its root object)
    options : LayoutOptions, optional
        Layout options

    Returns
    -------
    list[OutputBlock]
        Top-level output blocks in document order

    """
    if not isinstance(document, Document):
        data = [document] if isinstance(document, dict) else document
        document = EditorJsonParser.convert(data)
    return LayoutEngine(options).render(document)


def _create_renderer_options(
    output_format: OutputFormat, options: Optional[BaseRendererOptions], **kwargs: Any
) -> Optional[BaseRendererOptions]:
    """Merge keyword overrides into the renderer options for ``output_format``."""
    if not kwargs:
        return options

    base = options if options is not None else get_renderer(output_format).options
    valid = {f.name for f in fields(base)}
    unknown = sorted(set(kwargs) - valid)
    if unknown:
        raise ValidationError(
            f"Unknown {output_format} renderer option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )
    logger.debug("Applying %s renderer overrides: %s", output_format, ", ".join(sorted(kwargs)))
    try:
        return base.create_updated(**kwargs)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def render(
    source: Union[DocumentInput, list, dict],
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT,  # type: ignore[assignment]
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    layout_options: Optional[LayoutOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Load, lay out and render a contract in one call.

    Parameters
    ----------
    source : Document, str, Path, IO, bytes, list or dict
        Anything :func:`load_document` accepts, or a decoded editor value
    output_format : {"html", "json", "text"}, default "html"
        Output format
    output : str, Path, IO[bytes], IO[str] or None, default None
        Destination. If None, the rendered text is returned.
    layout_options : LayoutOptions, optional
        Layout options
    renderer_options : BaseRendererOptions, optional
        Options for the chosen renderer
    **kwargs
        Individual renderer option overrides, e.g. ``standalone=True``

    Returns
    -------
    str or None
        Rendered text when ``output`` is None, otherwise None

    Raises
    ------
    ValidationError
        If the format or an option override is not recognised
    InvalidOptionsError
        If ``renderer_options`` does not match ``output_format``

    Examples
    --------
        >>> html = render("contract.json", standalone=True, title="Services Agreement")
        >>> render("contract.json", "text", output="contract.txt")

    """
    if output_format not in RENDERERS:
        raise ValidationError(
            f"Unknown output format: {output_format!r}", parameter_name="output_format", parameter_value=output_format
        )

    if isinstance(source, (list, dict)):
        blocks = layout_document(source, layout_options)
    else:
        blocks = layout_document(load_document(source), layout_options)

    options = _create_renderer_options(output_format, renderer_options, **kwargs)
    renderer = get_renderer(output_format, options)
    if output is None:
        return renderer.render_to_string(blocks)

    renderer.render(blocks, output)
    return None


__all__ = ["load_document", "layout_document", "render"]
