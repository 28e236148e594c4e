#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/parsers/editor_json.py
"""Parser for the JSON documents written by the contract editor.

The editor saves a JSON array whose first element is the document root; its
``children`` are the top-level nodes. This parser decodes the JSON and hands
the value to :func:`clauserender.ast.serialization.editor_data_to_document`.
Only undecodable input raises: a well-formed value of the wrong shape gives
an empty document.

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, Any, Union

from clauserender.ast.nodes import Document
from clauserender.ast.serialization import editor_data_to_document
from clauserender.exceptions import ParsingError
from clauserender.utils.decorators import debug_timer
from clauserender.utils.io_utils import read_source_text

logger = logging.getLogger(__name__)


class EditorJsonParser:
    """Convert editor JSON into a :class:`Document`.

    Examples
    --------
        >>> doc = EditorJsonParser().parse('[{"children": [{"type": "p", "text": "Hi"}]}]')
        >>> doc.children[0].node_type
        'paragraph'

    """

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse editor JSON input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            A path, raw JSON text or bytes, or an open stream

        Returns
        -------
        Document
            Document tree; empty when the value has no usable root

        Raises
        ------
        InputNotFoundError
            If a path is given and no such file exists
        MalformedFileError
            If bytes cannot be decoded as UTF-8
        ParsingError
            If the text is not valid JSON

        """
        text = read_source_text(input_data)
        with debug_timer(logger, "Editor JSON parsing"):
            data = self.decode(text)
            return self.convert(data)

    @staticmethod
    def decode(text: str) -> Any:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ParsingError(
                f"Invalid JSON in editor document: {e}", parsing_stage="json_parsing", original_error=e
            ) from e

    @staticmethod
    def convert(data: Any) -> Document:
        """Convert an already decoded editor value into a Document."""
        return editor_data_to_document(data)


__all__ = ["EditorJsonParser"]
