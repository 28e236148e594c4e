#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/renderers/base.py
"""Base classes for output block renderers.

Renderers are the sinks of the pipeline: they receive the ordered forest of
:class:`~clauserender.blocks.OutputBlock` values produced by the layout engine
and turn it into a concrete format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from clauserender.blocks import OutputBlock
from clauserender.exceptions import InvalidOptionsError
from clauserender.options.base import BaseRendererOptions
from clauserender.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all block renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class CountingRenderer(BaseRenderer):
        ...     def render_to_string(self, blocks):
        ...         return str(len(blocks))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render_to_string(self, blocks: list[OutputBlock]) -> str:
        """Render the block forest to a string.

        Parameters
        ----------
        blocks : list of OutputBlock
            Top-level blocks from the layout engine

        Returns
        -------
        str
            Rendered output

        """

    def render(self, blocks: list[OutputBlock], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the block forest and write it to ``output``.

        Parameters
        ----------
        blocks : list of OutputBlock
            Top-level blocks from the layout engine
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(blocks), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or an open stream."""
        write_content(text, output)


__all__ = ["BaseRenderer"]
