#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/layout/numbering.py
"""Clause numbering and definition lettering.

A :class:`NumberingState` belongs to exactly one render pass. The layout
engine builds a fresh instance at the start of every pass, so rendering the
same document twice yields the same labels and two documents rendered side by
side never share counters.

State progression::

    Init --clause--> Numbered (1, 2, 3 ...)
         --"Definitions" clause--> inside_definitions = True (irreversible)
         --clause titled "...definition..."--> Lettered (a, b, c ...)

The clause that switches definitions on is itself numbered, never lettered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from clauserender.layout.sections import is_definition_entry_title, is_definitions_title
from clauserender.options.layout import LayoutOptions

logger = logging.getLogger(__name__)


def to_alpha_label(value: int) -> str:
    """Return the letter for a 1-based definition index (1 -> "a").

    Parameters
    ----------
    value : int
        1-based position of the definition

    Returns
    -------
    str
        ``chr(96 + value)``; past "z" this continues into the following code
        points rather than wrapping

    """
    if value < 1:
        raise ValueError(f"Definition index must be positive, got {value}")
    return chr(96 + value)


@dataclass(frozen=True)
class ClauseLabel:
    """Label assigned to a clause.

    Parameters
    ----------
    value : int
        Counter value the label was taken from
    lettered : bool
        True for a definition sub-clause, rendered as a letter

    """

    value: int
    lettered: bool = False

    @property
    def text(self) -> str:
        """Return the display form, e.g. ``"3"`` or ``"c"``."""
        return to_alpha_label(self.value) if self.lettered else str(self.value)


class NumberingState:
    """Counters shared by every clause of one render pass.

    Parameters
    ----------
    options : LayoutOptions or None, default None
        Supplies the titles that drive definition lettering

    """

    def __init__(self, options: LayoutOptions | None = None):
        """Create a state positioned before the first clause."""
        self.options = options or LayoutOptions()
        self.clause_counter = 1
        self.definition_counter = 1
        self.inside_definitions = False

    def enter_clause(self, title: Optional[str]) -> ClauseLabel:
        """Assign the label for the next clause in document order.

        Parameters
        ----------
        title : str or None
            Title of the clause being entered

        Returns
        -------
        ClauseLabel
            Lettered label for a definition inside the definitions section,
            numbered label otherwise

        """
        if is_definitions_title(title, self.options):
            self.inside_definitions = True
            self.definition_counter = 1
            logger.debug("Entering definitions section at clause %d", self.clause_counter)
            return self._next_number()

        if self.inside_definitions and is_definition_entry_title(title, self.options):
            label = ClauseLabel(value=self.definition_counter, lettered=True)
            self.definition_counter += 1
            return label

        return self._next_number()

    def _next_number(self) -> ClauseLabel:
        label = ClauseLabel(value=self.clause_counter)
        self.clause_counter += 1
        return label


__all__ = ["ClauseLabel", "NumberingState", "to_alpha_label"]
