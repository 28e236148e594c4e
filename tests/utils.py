"""Test utilities for the clauserender test suite.

Builders for editor JSON objects keep test documents short, and a few
helpers pull text out of laid-out block forests.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Any

from clauserender.blocks import OutputBlock, walk_blocks


def create_test_temp_dir() -> Path:
    """Create a temporary directory for a test."""
    return Path(tempfile.mkdtemp(prefix="clauserender_test_"))


def cleanup_test_dir(temp_dir: Path) -> None:
    """Remove a temporary directory created by create_test_temp_dir."""
    shutil.rmtree(temp_dir, ignore_errors=True)


def editor_doc(*children: dict) -> list:
    """Wrap top-level editor objects the way the editor saves a document."""
    return [{"children": list(children)}]


def text(value: str, **marks: Any) -> dict:
    return {"text": value, **marks}


def mention(label: str, color: str = "#ffe08a", **marks: Any) -> dict:
    return {"type": "mention", "color": color, "children": [text(label)], **marks}


def paragraph(*children: dict, **extra: Any) -> dict:
    return {"type": "p", "children": list(children), **extra}


def clause(title: str | None, *children: dict, **extra: Any) -> dict:
    return {"type": "clause", "title": title, "children": list(children), **extra}


def block(title: str | None, *children: dict, **extra: Any) -> dict:
    return {"type": "block", "title": title, "children": list(children), **extra}


def parties_paragraph() -> dict:
    """The Parties paragraph as the editor writes it for two parties."""
    return paragraph(
        mention("Acme Ltd"),
        text(' (the "Provider"), and '),
        mention("Jane Doe", color="#c5e1a5"),
        text(' (the "Client").'),
        text(" Each being a party to this Agreement."),
    )


def nested_paragraphs(depth: int, leaf: str = "bottom") -> dict:
    """Build a chain of ``depth`` paragraphs, each the only child of the one above."""
    node = paragraph(text(leaf))
    for _ in range(depth - 1):
        node = paragraph(node)
    return node


def chain_depth(items: list) -> int:
    """Follow first children down a node or block chain and count the levels."""
    depth = 0
    while items:
        depth += 1
        items = getattr(items[0], "children", [])
    return depth


def leaf_texts(blocks: list[OutputBlock]) -> list[str]:
    """Return the text of every leaf span in the forest, in order."""
    return [block.text for block in walk_blocks(blocks) if block.text is not None]


def clause_labels(blocks: list[OutputBlock]) -> list[str]:
    """Return the labels of every clause in the forest, in order."""
    return [block.label for block in walk_blocks(blocks) if block.kind in ("numbered-clause", "lettered-clause")]
