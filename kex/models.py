"""Catalog data models — commands and their example invocations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Example:
    """A single illustrative invocation of a command."""

    command: str
    description: str = ""


@dataclass(frozen=True)
class Command:
    """A named reference entry in the catalog."""

    name: str
    description: str = ""
    url: str = ""  # Omitted from output when empty
    notes: str = ""  # Omitted from output when empty
    examples: tuple[Example, ...] = field(default_factory=tuple)

    @property
    def has_examples(self) -> bool:
        return len(self.examples) > 0
