#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for reading sources and writing output."""

from io import BytesIO, StringIO

import pytest

from clauserender.exceptions import InputNotFoundError, OutputWriteError
from clauserender.utils.io_utils import read_source_text, write_content


@pytest.mark.unit
class TestReadSourceText:
    """Tests for read_source_text."""

    def test_json_text_returned_as_is(self):
        assert read_source_text('[{"children": []}]') == '[{"children": []}]'

    def test_multiline_text_is_not_a_path(self):
        assert read_source_text("line one\nline two") == "line one\nline two"

    def test_path_string(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("[]", encoding="utf-8")
        assert read_source_text(str(path)) == "[]"

    def test_missing_path_string(self):
        with pytest.raises(InputNotFoundError):
            read_source_text("does-not-exist.json")

    def test_streams(self):
        assert read_source_text(StringIO("[1]")) == "[1]"
        assert read_source_text(BytesIO(b"[2]")) == "[2]"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            read_source_text(42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content."""

    def test_write_path(self, tmp_path):
        path = tmp_path / "out.txt"
        write_content("é", str(path))
        assert path.read_bytes() == "é".encode("utf-8")

    def test_write_into_missing_directory(self, tmp_path):
        with pytest.raises(OutputWriteError) as exc_info:
            write_content("x", tmp_path / "missing" / "out.txt")
        assert exc_info.value.rendering_stage == "file_write"

    def test_write_unsupported(self):
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]
