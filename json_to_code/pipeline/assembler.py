"""
Assembly of generated files into insertable lines.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .analyzer.model_nodes import GeneratedFile


def assemble_lines(files: Sequence[GeneratedFile], render: Callable[[GeneratedFile, bool], str]) -> list[str]:
    """Render ``files`` in reverse discovery order and split them into lines.

    Files are discovered root first, so reversing them puts referenced
    types ahead of the types that use them. ``render`` is told which file
    leads the output.
    """
    lines: list[str] = []
    for index, file in enumerate(reversed(files)):
        lines.extend(render(file, index == 0).replace("\r\n", "\n").split("\n"))
    return lines
