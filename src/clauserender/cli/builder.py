#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clauserender/cli/builder.py
"""Argument parser and exit codes for the clauserender command line."""

from __future__ import annotations

import argparse

from clauserender.exceptions import FileError, ParsingError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

OUTPUT_FORMATS = ("html", "json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Options that a configuration file may also set default to None, so that
    a value given on the command line can be told apart from one that was
    left out.

    """
    parser = argparse.ArgumentParser(
        prog="clauserender",
        description="Lay out contract documents saved by the clause editor and render them "
        "as HTML, JSON or plain text.",
    )
    parser.add_argument("input", help="Editor JSON document to render (use '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: html)",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap HTML output in a complete page with the default stylesheet",
    )

    output_group = parser.add_argument_group("terminal output")
    output_group.add_argument(
        "--rich",
        action="store_true",
        default=None,
        help="Show the laid-out block tree in the terminal instead of rendering it",
    )
    output_group.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich terminal output even when stdout is not a TTY",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml). "
        "Default: discovered from the working directory upwards",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore configuration files",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", metavar="PATH", help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Very verbose debug logging with timestamps and timing information",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
