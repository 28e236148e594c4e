#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/options/json.py
"""Options for rendering output blocks as JSON."""

from __future__ import annotations

from dataclasses import dataclass, field

from clauserender.constants import DEFAULT_JSON_INDENT
from clauserender.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JsonRendererOptions(BaseRendererOptions):
    """Options for rendering output blocks to JSON.

    Parameters
    ----------
    indent : int or None, default = 2
        Number of spaces for JSON indentation. None for compact output.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output

    Examples
    --------
    Compact JSON output:
        >>> options = JsonRendererOptions(indent=None)

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)", "type": int, "importance": "core"},
    )
    ensure_ascii: bool = field(
        default=False,
        metadata={"help": "Escape non-ASCII characters", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate JSON options.

        Raises
        ------
        ValueError
            If indent is negative.

        """
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
