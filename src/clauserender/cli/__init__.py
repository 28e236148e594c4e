"""Command-line interface for the clauserender contract layout library.

Examples
--------
Render a contract to an HTML fragment on stdout::

    $ clauserender contract.json

Write a complete HTML page::

    $ clauserender contract.json --standalone --out contract.html

Plain text, reading the document from stdin::

    $ cat contract.json | clauserender - --format text

Inspect the laid-out block tree in the terminal::

    $ clauserender contract.json --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from clauserender.api import layout_document, load_document
from clauserender.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    OUTPUT_FORMATS,
    create_parser,
    get_exit_code_for_exception,
)
from clauserender.cli.config import find_config_in_parents, load_config_file, options_from_config
from clauserender.cli.output import print_block_tree, should_use_rich_output
from clauserender.constants import DEFAULT_OUTPUT_FORMAT
from clauserender.exceptions import ClauseRenderError, ValidationError
from clauserender.logging_utils import configure_logging
from clauserender.renderers import get_renderer

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> None:
    """Set up logging level based on command-line arguments and configuration.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments
    config : dict
        Loaded configuration, used when ``--log-level`` is not given

    """
    # --trace takes highest precedence, then --verbose, then --log-level, then config
    if parsed_args.trace or parsed_args.verbose:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level or str(config.get("log_level", "WARNING"))

    configure_logging(
        log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        use_rich=should_use_rich_output(parsed_args, stream=sys.stderr),
    )


def _load_config(parsed_args: argparse.Namespace) -> tuple[Dict[str, Any], Optional[Path]]:
    """Load the configuration named by ``--config`` or discovered from the working directory.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file cannot be read or parsed

    """
    if parsed_args.no_config:
        return {}, None

    config_path: Optional[Path] = Path(parsed_args.config) if parsed_args.config else find_config_in_parents()
    if config_path is None:
        return {}, None
    return load_config_file(config_path), config_path


def _read_input(input_arg: str) -> Any:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    return Path(input_arg)


def _run(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> int:
    layout_options, renderer_options = options_from_config(config)

    output_format = parsed_args.format or config.get("format", DEFAULT_OUTPUT_FORMAT)
    if output_format not in OUTPUT_FORMATS:
        raise ValidationError(
            f"Unknown output format in configuration: {output_format!r}",
            parameter_name="format",
            parameter_value=output_format,
        )

    if parsed_args.standalone:
        renderer_options["html"] = renderer_options["html"].create_updated(standalone=True)

    document = load_document(_read_input(parsed_args.input))
    blocks = layout_document(document, layout_options)

    if should_use_rich_output(parsed_args):
        print_block_tree(blocks, title=parsed_args.input)
        return EXIT_SUCCESS

    renderer = get_renderer(output_format, renderer_options[output_format])
    output = parsed_args.out or config.get("output")
    if output:
        renderer.render(blocks, output)
        logger.info("Wrote %s output to %s", output_format, output)
        return EXIT_SUCCESS

    content = renderer.render_to_string(blocks)
    sys.stdout.write(content)
    if content and not content.endswith("\n"):
        sys.stdout.write("\n")
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        config, config_path = _load_config(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.rich is None:
        parsed_args.rich = bool(config.get("rich", False))

    _setup_logging_level(parsed_args, config)
    if config_path is not None:
        logger.debug("Loaded configuration from %s", config_path)

    try:
        return _run(parsed_args, config)
    except ClauseRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.original_error is not None:
            logger.debug("Caused by: %r", e.original_error)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


__all__ = ["main"]
