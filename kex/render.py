"""Renderer — print commands as aligned terminal text or as Markdown.

The output mode is chosen once per invocation and passed in explicitly;
nothing here keeps state between calls.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from rich.console import Console
from rich.table import Table
from rich.text import Text

from kex.models import Command

console = Console(highlight=False)

MAX_COLUMN_WIDTH = 150
COLUMN_PADDING = (0, 4)  # (vertical, horizontal) cell padding
# Tables are laid out at this width regardless of the terminal, so the
# per-column cap is the only limit on line length.
TABLE_WIDTH = 2 * MAX_COLUMN_WIDTH + 2 * COLUMN_PADDING[1]
EMPTY_CATALOG_MESSAGE = "No commands in catalog."


class OutputMode(Enum):
    """How a command is printed."""

    CLI = "cli"  # Plain aligned text
    MARKDOWN = "md"


def render(
    target: Command | Sequence[Command],
    mode: OutputMode = OutputMode.CLI,
    console: Console | None = None,
) -> None:
    """Print a single command, or a whole catalog listing, to stdout."""
    out = console or _default_console()

    if isinstance(target, Command):
        if mode is OutputMode.MARKDOWN:
            out.out(format_command_markdown(target), end="")
        else:
            _print_command(target, out)
        return

    if mode is OutputMode.MARKDOWN:
        out.out(format_catalog_markdown(target), end="")
    else:
        _print_catalog(target, out)


# ── Plain text ───────────────────────────────────────────────────────


def _print_command(command: Command, out: Console) -> None:
    out.out(command.description + "\n")
    if command.notes:
        out.out(command.notes + "\n")
    if command.url:
        out.out(command.url + "\n")

    if command.has_examples:
        table = _borderless_table()
        for example in command.examples:
            table.add_row(Text(example.command), Text(example.description))
        _print_table(table, out)


def _print_catalog(commands: Sequence[Command], out: Console) -> None:
    if not commands:
        out.out(EMPTY_CATALOG_MESSAGE)
        return

    table = _borderless_table()
    for command in commands:
        table.add_row(Text(command.name), Text(command.description))
    _print_table(table, out)


def _borderless_table() -> Table:
    table = Table(
        box=None,
        show_header=False,
        show_edge=False,
        pad_edge=False,
        expand=False,
        padding=COLUMN_PADDING,
    )
    table.add_column(justify="left", max_width=MAX_COLUMN_WIDTH, overflow="fold")
    table.add_column(justify="left", max_width=MAX_COLUMN_WIDTH, overflow="fold")
    return table


def _print_table(table: Table, out: Console) -> None:
    options = out.options.update_width(TABLE_WIDTH)
    for line in out.render_lines(table, options, pad=False):
        out.out("".join(segment.text for segment in line).rstrip())


# ── Markdown ─────────────────────────────────────────────────────────


def format_command_markdown(command: Command) -> str:
    """Return the Markdown section for a single command."""
    if command.url:
        heading = f"### [{command.name}]({command.url})"
    else:
        heading = f"### {command.name}"

    lines = [heading, "", command.description, ""]
    if command.notes:
        lines.extend([command.notes, ""])

    if command.has_examples:
        rows = [(_inline_code(ex.command), ex.description) for ex in command.examples]
        lines.extend(_markdown_table(("Example", "Description"), rows))
        lines.append("")

    return "\n".join(lines) + "\n"


def format_catalog_markdown(commands: Sequence[Command]) -> str:
    """Return a Markdown document listing every command in order."""
    parts = ["# Commands\n"]
    for command in commands:
        parts.append("\n" + format_command_markdown(command))
    return "".join(parts)


def _markdown_table(header: tuple[str, str], rows: list[tuple[str, str]]) -> list[str]:
    cells = [tuple(_escape_cell(c) for c in row) for row in [header, *rows]]
    widths = [max(3, *(len(row[i]) for row in cells)) for i in range(len(header))]

    def fmt(row: tuple[str, ...]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(row, widths)) + " |"

    separator = "|" + "|".join("-" * (w + 2) for w in widths) + "|"
    return [fmt(cells[0]), separator, *(fmt(row) for row in cells[1:])]


def _inline_code(text: str) -> str:
    """Wrap *text* in a backtick fence longer than any backtick run inside it."""
    longest = max((len(run) for run in re.findall(r"`+", text)), default=0)
    fence = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _default_console() -> Console:
    return console
