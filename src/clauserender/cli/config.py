#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the clauserender CLI.

Configuration is read from the first of these found in the working directory
or one of its parents:

- ``.clauserender.toml``
- ``.clauserender.yaml`` / ``.clauserender.yml``
- ``.clauserender.json``
- ``pyproject.toml`` with a ``[tool.clauserender]`` table

Example ``.clauserender.toml``::

    format = "html"
    log_level = "INFO"

    [layout]
    max_depth = 100

    [html]
    standalone = true
    title = "Services Agreement"

"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from clauserender.exceptions import ValidationError
from clauserender.options import (
    BaseRendererOptions,
    CloneFrozenMixin,
    HtmlRendererOptions,
    JsonRendererOptions,
    LayoutOptions,
    PlainTextRendererOptions,
)

CONFIG_FILENAMES = [".clauserender.toml", ".clauserender.yaml", ".clauserender.yml", ".clauserender.json"]

TOP_LEVEL_KEYS = frozenset({"format", "output", "rich", "log_level", "layout", "html", "json", "text"})

RENDERER_OPTION_TABLES: Dict[str, type[BaseRendererOptions]] = {
    "html": HtmlRendererOptions,
    "json": JsonRendererOptions,
    "text": PlainTextRendererOptions,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.clauserender]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict if the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("clauserender")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.clauserender] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Dedicated config files take priority over ``pyproject.toml`` in the same
    directory; a ``pyproject.toml`` only counts when it has a
    ``[tool.clauserender]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # an unreadable pyproject.toml does not stop the search
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            if config is None:
                config = {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json"
            )
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a table at root level, got {type(config).__name__}"
        )
    return config


def _build_options(options_class: type[CloneFrozenMixin], table: Any, table_name: str) -> Any:
    """Create an options instance from one config table.

    Raises
    ------
    ValidationError
        If the table is not a mapping, names an unknown option, or holds an
        invalid value

    """
    if not isinstance(table, dict):
        raise ValidationError(
            f"Config section [{table_name}] must be a table, got {type(table).__name__}",
            parameter_name=table_name,
            parameter_value=table,
        )

    valid = {f.name for f in fields(options_class)}  # type: ignore[arg-type]
    for key, value in table.items():
        if key not in valid:
            raise ValidationError(
                f"Unknown option '{key}' in config section [{table_name}]",
                parameter_name=f"{table_name}.{key}",
                parameter_value=value,
            )

    try:
        return options_class(**table)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid config section [{table_name}]: {e}", original_error=e) from e


def options_from_config(config: Dict[str, Any]) -> tuple[LayoutOptions, Dict[str, BaseRendererOptions]]:
    """Map the option tables of a configuration onto option dataclasses.

    Parameters
    ----------
    config : dict
        Loaded configuration

    Returns
    -------
    tuple of (LayoutOptions, dict)
        Layout options, and renderer options keyed by output format. Formats
        without a table get default options.

    Raises
    ------
    ValidationError
        If a key is not recognised or an option value is invalid

    """
    unknown = sorted(set(config) - TOP_LEVEL_KEYS)
    if unknown:
        raise ValidationError(
            f"Unknown configuration key(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=config[unknown[0]],
        )

    layout_options = _build_options(LayoutOptions, config.get("layout", {}), "layout")
    renderer_options = {
        name: _build_options(options_class, config.get(name, {}), name)
        for name, options_class in RENDERER_OPTION_TABLES.items()
    }
    return layout_options, renderer_options


__all__ = [
    "CONFIG_FILENAMES",
    "find_config_in_parents",
    "load_config_file",
    "options_from_config",
]
