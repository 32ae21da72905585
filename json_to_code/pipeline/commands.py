"""
Command identifiers.

Hosts identify commands with reverse-domain identifiers such as
``io.github.json-to-code.PasteJSONAsCode``; only the last component selects
the command.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """Closed set of commands the extension provides."""

    PASTE_JSON_AS_CODE = "PasteJSONAsCode"


@dataclass(frozen=True)
class RecognizedCommand:
    kind: Command


@dataclass(frozen=True)
class UnrecognizedCommand:
    identifier: str


CommandLookup = RecognizedCommand | UnrecognizedCommand


def resolve_command(identifier: str) -> CommandLookup:
    """Map an identifier to a command, without raising."""
    component = identifier.rsplit(".", 1)[-1]
    try:
        return RecognizedCommand(Command(component))
    except ValueError:
        return UnrecognizedCommand(identifier)
