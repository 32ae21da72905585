"""
Context-aware trimming of generated lines.

When generated code is pasted below existing code, its leading imports and
header comments would duplicate what the destination already has, so they
are dropped. Trailing blank lines and comments are always dropped.
"""

from __future__ import annotations

from collections.abc import Sequence

from .buffer import TextRange
from .lines import LineClassifier


class TrimPolicy:
    """Decides which generated lines survive insertion."""

    def __init__(self, classifier: LineClassifier | None = None):
        self.classifier = classifier or LineClassifier()

    def inserting_after_code(self, buffer_lines: Sequence[str], selection: TextRange) -> bool:
        """Whether any line above the selection is real code."""
        for line in buffer_lines[: selection.start.line]:
            if self.classifier.is_blank(line) or self.classifier.is_comment(line):
                continue
            return True
        return False

    def apply(self, lines: Sequence[str], buffer_lines: Sequence[str], selection: TextRange) -> list[str]:
        if self.inserting_after_code(buffer_lines, selection):
            return self.classifier.trim_end(self.classifier.trim_start(lines))
        return self.classifier.trim_end(lines)
