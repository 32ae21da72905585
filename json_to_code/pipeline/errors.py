"""
Exception types raised by the paste pipeline.

Every error carries a short user-facing ``message`` and a longer
diagnostic ``details`` string. The orchestrator reports exactly one of
them per failed invocation.
"""

from __future__ import annotations

# Marker put in front of JSON decoder diagnostics so that a malformed input
# can be told apart from any other failure by looking at the details alone.
PARSE_FAILURE_MARKER = "cannot parse input"

INVALID_JSON_MESSAGE = "Clipboard does not contain valid JSON"
INTERNAL_ERROR_MESSAGE = "json_to_code encountered an internal error"


class PasteError(Exception):
    """Base class for all paste pipeline errors."""

    default_message = "json_to_code failed"

    def __init__(self, message: str | None = None, details: str = "No details"):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details and self.details != "No details":
            return f"{self.message}: {self.details}"
        return self.message


class UnrecognizedCommandError(PasteError):
    """The command identifier does not map to a known command."""

    default_message = "Unrecognized command"


class ClipboardEmptyError(PasteError):
    """No text is available at the input source."""

    default_message = "Couldn't get JSON from clipboard"


class ParseError(PasteError):
    """The input text is not valid JSON."""

    default_message = INVALID_JSON_MESSAGE


class InvalidRootError(PasteError):
    """The JSON is valid but its root cannot produce an object schema."""

    default_message = "JSON must be an object or an array of objects"


class GenerationError(PasteError):
    """The backend failed to produce or resolve the generated files."""

    default_message = INTERNAL_ERROR_MESSAGE


def describe_failure(details: str) -> str:
    """Pick the user-facing message for a diagnostic string."""
    if PARSE_FAILURE_MARKER in details:
        return INVALID_JSON_MESSAGE
    return INTERNAL_ERROR_MESSAGE
