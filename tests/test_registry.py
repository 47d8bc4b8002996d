"""Tests for the command registry."""

import io

import click
from rich.console import Console

from kex.models import Command, Example
from kex.registry import CatalogEntry, CommandRegistry
from kex.render import OutputMode


def _catalog(*names: str) -> list[Command]:
    return [Command(name=n, description=f"The {n} command") for n in names]


def test_one_entry_per_command():
    registry = CommandRegistry(_catalog("ls", "grep", "sed"))
    assert len(registry) == 3
    assert registry.names() == ["ls", "grep", "sed"]


def test_entry_help_is_description():
    registry = CommandRegistry(_catalog("ls"))
    entry = registry.get("ls")
    assert isinstance(entry, CatalogEntry)
    assert entry.help == "The ls command"
    assert entry.command.name == "ls"


def test_lookup_is_exact_and_case_sensitive():
    registry = CommandRegistry(_catalog("grep"))
    assert registry.get("grep") is not None
    assert registry.get("GREP") is None
    assert registry.get("gre") is None
    assert "grep" in registry
    assert "Grep" not in registry


def test_empty_registry():
    registry = CommandRegistry([])
    assert len(registry) == 0
    assert registry.names() == []
    assert registry.commands == []
    assert registry.search("anything") == []


def test_commands_keep_catalog_order():
    catalog = _catalog("zeta", "alpha", "mid")
    registry = CommandRegistry(catalog)
    assert registry.commands == catalog
    assert [e.name for e in registry] == ["zeta", "alpha", "mid"]


def test_search_matches_name_and_description():
    catalog = [
        Command(name="grep-lines", description="Search text"),
        Command(name="tar", description="Bundle files into an archive"),
        Command(name="ls", description="List files"),
    ]
    registry = CommandRegistry(catalog)
    assert [c.name for c in registry.search("GREP")] == ["grep-lines"]
    assert [c.name for c in registry.search("files")] == ["tar", "ls"]
    assert registry.search("docker") == []


def test_entry_run_renders_bound_command():
    command = Command(
        name="grep-lines",
        description="Search text",
        examples=(Example(command="grep foo file.txt", description="Find foo"),),
    )
    entry = CommandRegistry([command]).get("grep-lines")
    console = Console(file=io.StringIO(), width=200, color_system=None)

    entry.run(OutputMode.MARKDOWN, console)
    assert console.file.getvalue().startswith("### grep-lines\n")


def test_attach_adds_one_subcommand_per_entry():
    group = click.Group(name="kex")
    registry = CommandRegistry(_catalog("ls", "grep"))

    assert registry.attach(group) == 2
    assert set(group.commands) == {"ls", "grep"}
    assert group.commands["ls"].help == "The ls command"


def test_attach_empty_registry_adds_nothing():
    group = click.Group(name="kex")
    assert CommandRegistry([]).attach(group) == 0
    assert group.commands == {}


def test_attach_skips_names_taken_by_builtins():
    group = click.Group(name="kex")
    builtin = click.Command(name="list", callback=lambda: None)
    group.add_command(builtin)

    registry = CommandRegistry(_catalog("list", "ls"))
    assert registry.attach(group) == 1
    assert group.commands["list"] is builtin
    assert "ls" in group.commands
    # Still registered; reachable by name through the registry.
    assert registry.get("list") is not None
