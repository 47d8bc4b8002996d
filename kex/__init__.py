"""kex — a command-line catalog of command examples.

Loads a YAML catalog of commands and exposes each one as a subcommand that
prints its description, notes and an aligned table of example invocations.
"""

__version__ = "0.1.0"
