"""
Line-oriented text buffer with selections.

This is the host-side state that the paste command edits: a list of lines
(without terminators) plus the current selections. Only the context that
owns the buffer should touch it; ``lock`` lets that context make a series
of edits appear as a single mutation.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class TextPosition:
    """A zero-based (line, column) position."""

    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class TextRange:
    """A selection from ``start`` to ``end``; collapsed when both are equal."""

    start: TextPosition = field(default_factory=TextPosition)
    end: TextPosition = field(default_factory=TextPosition)

    @staticmethod
    def caret(line: int, column: int = 0) -> TextRange:
        position = TextPosition(line, column)
        return TextRange(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass
class SourceTextBuffer:
    """Mutable lines and selections of an editable document."""

    lines: list[str] = field(default_factory=list)
    selections: list[TextRange] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @staticmethod
    def from_text(text: str, selection: TextRange | None = None) -> SourceTextBuffer:
        """Build a buffer from text, splitting on line breaks."""
        lines = text.splitlines()
        return SourceTextBuffer(lines=lines, selections=[selection] if selection else [])

    def to_text(self) -> str:
        """Join the lines back into text, with a trailing newline when non-empty."""
        with self.lock:
            if not self.lines:
                return ""
            return "\n".join(self.lines) + "\n"

    def first_selection(self) -> TextRange | None:
        with self.lock:
            return self.selections[0] if self.selections else None
