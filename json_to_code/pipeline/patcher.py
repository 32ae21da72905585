"""
Selection replacement inside a SourceTextBuffer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .buffer import SourceTextBuffer, TextRange

LOG = logging.getLogger(__name__)


def selected_line_span(selection: TextRange, line_count: int) -> range:
    """Indices of the lines covered by a non-empty selection.

    A selection ending on ``line_count`` ends one past the last real line,
    so that sentinel line is not part of the span.
    """
    if selection.end.line == line_count:
        return range(selection.start.line, selection.end.line)
    return range(selection.start.line, selection.end.line + 1)


def patch_buffer(buffer: SourceTextBuffer, lines: Sequence[str], selection: TextRange | None = None) -> TextRange:
    """Replace ``selection`` (or insert at it) with ``lines``.

    Deletion happens first so the insertion index stays ``selection.start.line``.
    All selections are then replaced by a caret at the start of the inserted
    block, which is returned.

    Args:
        buffer: Buffer to edit
        lines: Lines to insert, without terminators
        selection: Range to replace; defaults to the buffer's first selection,
            or the very top of the buffer

    Returns:
        The caret set on the buffer
    """
    with buffer.lock:
        if selection is None:
            selection = buffer.first_selection() or TextRange()

        start = selection.start.line
        if not selection.is_empty:
            span = selected_line_span(selection, len(buffer.lines))
            LOG.debug("Deleting lines %d..%d", span.start, span.stop - 1)
            del buffer.lines[span.start : span.stop]

        buffer.lines[start:start] = list(lines)
        LOG.debug("Inserted %d lines at line %d", len(lines), start)

        caret = TextRange.caret(start, 0)
        buffer.selections.clear()
        buffer.selections.append(caret)
        return caret
