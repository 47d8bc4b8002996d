"""Command registry — one invocable entry per catalog record.

The registry is built once from the loaded catalog and never changes
afterwards. It can attach its entries to a click group as subcommands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import click
from rich.console import Console

from kex.models import Command
from kex.render import OutputMode, render

logger = logging.getLogger(__name__)

OUTPUT_CHOICES = [mode.value for mode in OutputMode]


def output_option(func):
    """The ``-o/--output`` option shared by every rendering subcommand."""
    return click.option(
        "--output",
        "-o",
        "output",
        default=OutputMode.CLI.value,
        show_default=True,
        type=click.Choice(OUTPUT_CHOICES),
        help="Output format: aligned text (cli) or Markdown (md)",
    )(func)


@dataclass(frozen=True)
class CatalogEntry:
    """A registered catalog command bound to its record."""

    name: str
    help: str
    command: Command

    def run(self, mode: OutputMode = OutputMode.CLI, console: Console | None = None) -> None:
        render(self.command, mode, console)


class CommandRegistry:
    """Name-keyed, insertion-ordered index of catalog entries."""

    def __init__(self, commands: Iterable[Command] = ()):
        self._entries: dict[str, CatalogEntry] = {}
        for command in commands:
            # The loader rejects duplicates; a later record still wins here.
            self._entries[command.name] = CatalogEntry(
                name=command.name,
                help=command.description,
                command=command,
            )

    def get(self, name: str) -> CatalogEntry | None:
        """Exact, case-sensitive lookup."""
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    @property
    def commands(self) -> list[Command]:
        return [entry.command for entry in self._entries.values()]

    def search(self, text: str) -> list[Command]:
        """Commands whose name or description contains *text* (case-insensitive)."""
        needle = text.lower()
        return [
            entry.command
            for entry in self._entries.values()
            if needle in f"{entry.name} {entry.help}".lower()
        ]

    def attach(self, group: click.Group) -> int:
        """Add one subcommand per entry to *group*.

        Names already taken by the group's own subcommands are skipped so the
        built-ins keep working; those entries remain reachable through ``view``.
        Returns the number of subcommands added.
        """
        reserved = set(group.commands)
        added = 0
        for entry in self._entries.values():
            if entry.name in reserved:
                logger.warning(
                    "Catalog command '%s' clashes with a built-in subcommand; "
                    "use 'view %s' instead",
                    entry.name,
                    entry.name,
                )
                continue
            group.add_command(_build_subcommand(entry))
            added += 1
        return added

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries


def _build_subcommand(entry: CatalogEntry) -> click.Command:
    @click.command(name=entry.name, help=entry.help, short_help=entry.help)
    @output_option
    def subcommand(output: str) -> None:
        entry.run(OutputMode(output))

    return subcommand
