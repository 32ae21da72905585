"""
Line-level classification of source text.

The classifier only knows about blank lines, single-line comments and
import-like directives; it does not parse the destination language.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

DEFAULT_COMMENT_PREFIX = "//"
DEFAULT_IMPORT_PREFIXES = ("import ", "#include ", "#import ")


class LineClassifier:
    """Pure predicates over single lines of text."""

    def __init__(
        self,
        comment_prefix: str = DEFAULT_COMMENT_PREFIX,
        import_prefixes: Iterable[str] = DEFAULT_IMPORT_PREFIXES,
    ):
        self.comment_prefix = comment_prefix
        self.import_prefixes = tuple(import_prefixes)

    def is_blank(self, line: str) -> bool:
        return not line.strip()

    def is_comment(self, line: str) -> bool:
        return line.startswith(self.comment_prefix)

    def is_import(self, line: str) -> bool:
        return line.startswith(self.import_prefixes)

    def trim_start(self, lines: Sequence[str]) -> list[str]:
        """Drop leading comments, blank lines and imports."""
        for index, line in enumerate(lines):
            if not (self.is_comment(line) or self.is_blank(line) or self.is_import(line)):
                return list(lines[index:])
        return []

    def trim_end(self, lines: Sequence[str]) -> list[str]:
        """Drop trailing blank lines and comments. Imports are kept."""
        end = len(lines)
        while end > 0 and (self.is_blank(lines[end - 1]) or self.is_comment(lines[end - 1])):
            end -= 1
        return list(lines[:end])
