"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/clauserender/cli/output.py
import argparse
import sys
from typing import IO, Optional

from rich.color import Color, ColorParseError
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from clauserender.blocks import OutputBlock

_PREVIEW_LENGTH = 60


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when the --rich flag is set and either --force-rich
    is set or the stream is a TTY.

    """
    if not getattr(args, "rich", False):
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except ValueError:
            # closed stream
            return False
    return False


def _is_terminal_color(value: str) -> bool:
    try:
        Color.parse(value)
    except ColorParseError:
        return False
    return True


def _node_label(block: OutputBlock) -> Text:
    label = Text()
    if block.label:
        label.append(f"{block.label} ", style="bold cyan")
    label.append(block.kind, style="magenta" if block.text is None else "dim")
    if block.role:
        label.append(f" [{block.role}]", style="yellow")

    if block.text is not None:
        preview = block.text if len(block.text) <= _PREVIEW_LENGTH else block.text[: _PREVIEW_LENGTH - 3] + "..."
        style = " ".join(
            name for name, on in (("bold", block.style.bold), ("underline", block.style.underline)) if on
        )
        if block.style.highlight_color and _is_terminal_color(block.style.highlight_color):
            style = f"{style} on {block.style.highlight_color}".strip()
        label.append(" ")
        label.append(repr(preview), style=style or None)
    return label


def _add_children(tree: Tree, blocks: list[OutputBlock]) -> None:
    for block in blocks:
        _add_children(tree.add(_node_label(block)), block.children)


def build_block_tree(blocks: list[OutputBlock], title: str = "Document") -> Tree:
    """Build a rich Tree showing the block forest with kinds, labels and text previews."""
    tree = Tree(Text(title, style="bold"))
    _add_children(tree, blocks)
    return tree


def print_block_tree(blocks: list[OutputBlock], console: Optional[Console] = None, title: str = "Document") -> None:
    """Print the block forest to the terminal as a tree."""
    (console or Console()).print(build_block_tree(blocks, title))


__all__ = ["should_use_rich_output", "build_block_tree", "print_block_tree"]
