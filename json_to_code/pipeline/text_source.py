"""
Sources of raw JSON text (stand-ins for the system clipboard).
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path


class TextSource(ABC):
    """Something that can hand over a piece of text once per invocation."""

    @abstractmethod
    def read_text(self) -> str | None:
        """
        Return the available text, or None when there is none.
        """


class StaticTextSource(TextSource):
    """Text supplied up front, e.g. by a host that already read its pasteboard."""

    def __init__(self, text: str | None):
        self.text = text

    def read_text(self) -> str | None:
        return self.text


class FileTextSource(TextSource):
    """Text read from a file, or from standard input when the path is ``-``."""

    def __init__(self, path: str | Path):
        self.path = str(path)

    def read_text(self) -> str | None:
        if self.path == "-":
            text = sys.stdin.read()
        else:
            with open(self.path, encoding="utf-8") as f:
                text = f.read()
        return text or None
