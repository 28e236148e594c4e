#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input parsers producing document trees."""

from clauserender.parsers.editor_json import EditorJsonParser

__all__ = ["EditorJsonParser"]
