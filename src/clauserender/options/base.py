#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for layout and renderer options.

This module defines the foundation classes for the option dataclasses used
throughout the clauserender pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers turn the output block forest into a concrete format (HTML,
    JSON, plain text). Subclasses define format-specific options as frozen
    dataclass fields.

    Parameters
    ----------
    line_separator : str, default "\\n"
        Separator written between top-level output lines

    """

    line_separator: str = field(
        default="\n",
        metadata={"help": "Line ending written between output lines", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If the line separator is not a line ending.

        """
        if self.line_separator not in ("\n", "\r\n"):
            raise ValueError(f"line_separator must be '\\n' or '\\r\\n', got {self.line_separator!r}")
