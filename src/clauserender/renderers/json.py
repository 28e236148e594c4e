#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/renderers/json.py
"""JSON rendering of laid-out contract blocks.

The output is a versioned envelope around the block forest, for consumers
that draw the contract with their own widget library::

    {"schema_version": 1, "blocks": [{"kind": "numbered-clause", ...}]}

"""

from __future__ import annotations

import json

from clauserender.blocks import OutputBlock
from clauserender.constants import JSON_SCHEMA_VERSION
from clauserender.options.json import JsonRendererOptions
from clauserender.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render output blocks as JSON.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
    Compact JSON output:
        >>> from clauserender.options.json import JsonRendererOptions
        >>> renderer = JsonRenderer(JsonRendererOptions(indent=None))
        >>> renderer.render_to_string([])
        '{"schema_version": 1, "blocks": []}'

    """

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def to_dict(self, blocks: list[OutputBlock]) -> dict:
        """Return the versioned envelope for ``blocks`` as a dictionary."""
        return {"schema_version": JSON_SCHEMA_VERSION, "blocks": [block.to_dict() for block in blocks]}

    def render_to_string(self, blocks: list[OutputBlock]) -> str:
        """Render the block forest to a JSON string.

        Parameters
        ----------
        blocks : list of OutputBlock
            Top-level blocks from the layout engine

        Returns
        -------
        str
            JSON document

        """
        return json.dumps(
            self.to_dict(blocks),
            indent=self.options.indent,
            ensure_ascii=self.options.ensure_ascii,
        )


__all__ = ["JsonRenderer"]
