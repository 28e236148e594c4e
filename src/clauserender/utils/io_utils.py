#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/utils/io_utils.py
"""I/O utilities for reading editor documents and writing rendered output."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from clauserender.exceptions import InputNotFoundError, MalformedFileError, OutputWriteError

SourceType = Union[str, Path, IO[bytes], IO[str], bytes]


def _is_binary_stream(stream: object) -> bool:
    if isinstance(stream, BytesIO):
        return True
    if isinstance(stream, StringIO):
        return False
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or an open stream.

    Parameters
    ----------
    content : str
        Rendered output
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive UTF-8
        bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    """
    if isinstance(output, (str, Path)):
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


def read_source_text(source: SourceType) -> str:
    """Read an editor document from a path, raw bytes, a string or a stream.

    A ``str`` starting with ``[`` or ``{`` is taken to be the JSON text
    itself; any other single-line ``str`` is treated as a file path.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Where the document comes from

    Returns
    -------
    str
        The decoded document text

    Raises
    ------
    InputNotFoundError
        If a path does not name an existing file
    MalformedFileError
        If the content is not valid UTF-8

    """
    if isinstance(source, Path) or (isinstance(source, str) and _looks_like_path(source)):
        path = Path(source)
        if not path.is_file():
            raise InputNotFoundError(str(path))
        return _decode(path.read_bytes(), str(path))

    if isinstance(source, bytes):
        return _decode(source, None)

    if isinstance(source, str):
        return source

    if hasattr(source, "read"):
        data = source.read()
        return _decode(data, getattr(source, "name", None)) if isinstance(data, bytes) else data

    raise TypeError(f"Unsupported source type: {type(source)}")


def _looks_like_path(text: str) -> bool:
    stripped = text.lstrip()
    if not stripped or stripped[0] in "[{":
        return False
    return "\n" not in text and len(text) < 4096


def _decode(data: bytes, file_path: str | None) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedFileError("Editor document is not valid UTF-8", file_path=file_path, original_error=e) from e


__all__ = ["SourceType", "read_source_text", "write_content"]
