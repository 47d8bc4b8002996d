"""Catalog loader — read a YAML catalog file into Command records.

The file holds a top-level list; each element is a mapping with ``name``,
``description``, and the optional ``url``, ``notes`` and ``examples`` keys.
Each example is a mapping with ``command`` and ``description``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from kex.errors import DuplicateCommandError, ParseError, ReadError
from kex.models import Command, Example

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> list[Command]:
    """Load the catalog at *path*.

    Raises ReadError if the file cannot be read and ParseError if it is not
    valid YAML or does not have the expected shape.
    """
    path = Path(path)
    logger.debug("Loading catalog from %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(path, e) from e

    commands = parse_catalog(data, path)
    logger.debug("Loaded %d command(s) from %s", len(commands), path)
    return commands


def parse_catalog(data: Any, path: str | Path = "<catalog>") -> list[Command]:
    """Turn already-parsed YAML data into an ordered list of commands."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(path, f"expected a list of commands, got {_type_name(data)}")

    commands: list[Command] = []
    seen: set[str] = set()
    for i, item in enumerate(data):
        command = _parse_command(item, i, path)
        if command.name in seen:
            raise DuplicateCommandError(path, command.name)
        seen.add(command.name)
        commands.append(command)
    return commands


def _parse_command(item: Any, index: int, path: str | Path) -> Command:
    where = f"command {index + 1}"
    if not isinstance(item, dict):
        raise ParseError(path, f"{where}: expected a mapping, got {_type_name(item)}")

    name = _scalar(item.get("name"), f"{where}.name", path)
    if not name:
        raise ParseError(path, f"{where}: missing 'name'")

    raw_examples = item.get("examples")
    if raw_examples is None:
        raw_examples = []
    if not isinstance(raw_examples, list):
        raise ParseError(
            path, f"{where} ({name}): 'examples' must be a list, got {_type_name(raw_examples)}"
        )

    examples = []
    for j, raw in enumerate(raw_examples):
        ex_where = f"{where} ({name}) example {j + 1}"
        if not isinstance(raw, dict):
            raise ParseError(path, f"{ex_where}: expected a mapping, got {_type_name(raw)}")
        examples.append(
            Example(
                command=_scalar(raw.get("command"), f"{ex_where}.command", path),
                description=_scalar(raw.get("description"), f"{ex_where}.description", path),
            )
        )

    return Command(
        name=name,
        description=_scalar(item.get("description"), f"{where}.description", path),
        url=_scalar(item.get("url"), f"{where}.url", path),
        notes=_scalar(item.get("notes"), f"{where}.notes", path),
        examples=tuple(examples),
    )


def _scalar(value: Any, where: str, path: str | Path) -> str:
    """Coerce a YAML scalar to a string; absent or null becomes ``""``."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ParseError(path, f"{where}: expected a string, got {_type_name(value)}")
    return str(value)


def _type_name(value: Any) -> str:
    return type(value).__name__
