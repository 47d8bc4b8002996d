"""kex CLI — the main entry point for browsing the command catalog."""

from __future__ import annotations

import logging
import sys

import click

from kex import __version__
from kex.catalog import load_catalog
from kex.config import load_config
from kex.errors import LoadError
from kex.log import configure_logging
from kex.registry import CommandRegistry, output_option
from kex.render import OutputMode, render

logger = logging.getLogger(__name__)


def create_cli(registry: CommandRegistry) -> click.Group:
    """Build the ``kex`` command group for an already-loaded catalog."""

    @click.group()
    @click.version_option(version=__version__, prog_name="kex")
    @click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
    def main(verbose: bool):
        """View command examples.

        Every command in the catalog (KEX_FILE, or ./commands.yaml) is also
        available directly as a subcommand.
        """
        if verbose:
            configure_logging(logging.DEBUG)

    # ── List ─────────────────────────────────────────────────────────

    @main.command(name="list")
    @output_option
    def list_commands(output: str):
        """List every command in the catalog."""
        render(registry.commands, OutputMode(output))

    # ── View ─────────────────────────────────────────────────────────

    @main.command()
    @click.argument("name")
    @output_option
    def view(name: str, output: str):
        """Show the description and examples for NAME."""
        entry = registry.get(name)
        if entry is None:
            raise click.BadParameter(
                f"no command named '{name}' in the catalog", param_hint="'NAME'"
            )
        entry.run(OutputMode(output))

    # ── Search ───────────────────────────────────────────────────────

    @main.command()
    @click.argument("query")
    @output_option
    def search(query: str, output: str):
        """Find commands whose name or description contains QUERY."""
        mode = OutputMode(output)
        matches = registry.search(query)
        if not matches and mode is OutputMode.CLI:
            click.echo("No matching commands found.")
            return
        render(matches, mode)

    attached = registry.attach(main)
    logger.debug("Registered %d catalog subcommand(s)", attached)
    return main


def main(argv: list[str] | None = None) -> None:
    """Load the catalog, then dispatch to the requested subcommand."""
    args = sys.argv[1:] if argv is None else list(argv)
    config = load_config()
    configure_logging(config.log_level)

    if _only_group_options(args) and "--version" in args:
        # --version does not depend on the catalog
        create_cli(CommandRegistry()).main(args=args, prog_name="kex")

    try:
        catalog = load_catalog(config.catalog_path)
    except LoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    cli = create_cli(CommandRegistry(catalog))
    cli.main(args=args, prog_name="kex")


def _only_group_options(args: list[str]) -> bool:
    return all(arg.startswith("-") for arg in args)


if __name__ == "__main__":
    main()
