from json_to_code.pipeline.buffer import SourceTextBuffer, TextPosition, TextRange
from json_to_code.pipeline.patcher import patch_buffer, selected_line_span


def selection(start_line, end_line, start_column=0, end_column=0):
    return TextRange(TextPosition(start_line, start_column), TextPosition(end_line, end_column))


class TestSelectedLineSpan:
    """Test the lines covered by a selection"""

    def test_inclusive_end(self):
        """Test that the end line is part of the span"""
        assert selected_line_span(selection(1, 2, end_column=1), 4) == range(1, 3)

    def test_end_of_buffer_sentinel(self):
        """Test that an end one past the last line is exclusive"""
        assert selected_line_span(selection(2, 4), 4) == range(2, 4)


class TestPatchBuffer:
    """Test selection replacement"""

    def test_replace_selection(self):
        """Test replacing lines 1-2 of a four line buffer"""
        buffer = SourceTextBuffer(lines=["A", "B", "C", "D"])
        caret = patch_buffer(buffer, ["X", "Y"], selection(1, 2, end_column=1))
        assert buffer.lines == ["A", "X", "Y", "D"]
        assert caret == TextRange.caret(1, 0)
        assert buffer.selections == [TextRange.caret(1, 0)]

    def test_replace_to_end_of_buffer(self):
        """Test a selection ending on the line count deletes through the last line only"""
        buffer = SourceTextBuffer(lines=["A", "B", "C", "D"])
        patch_buffer(buffer, ["X"], selection(2, 4))
        assert buffer.lines == ["A", "B", "X"]

    def test_insert_at_caret(self):
        """Test that a collapsed selection deletes nothing"""
        buffer = SourceTextBuffer(lines=["A", "B"])
        patch_buffer(buffer, ["X", "Y"], TextRange.caret(1, 3))
        assert buffer.lines == ["A", "X", "Y", "B"]
        assert buffer.selections == [TextRange.caret(1, 0)]

    def test_insert_at_end(self):
        """Test inserting after the last line"""
        buffer = SourceTextBuffer(lines=["A"])
        patch_buffer(buffer, ["X"], TextRange.caret(1))
        assert buffer.lines == ["A", "X"]

    def test_defaults_to_first_selection(self):
        """Test that the buffer's first selection is used when none is given"""
        buffer = SourceTextBuffer(lines=["A", "B", "C"], selections=[selection(0, 0, end_column=1), TextRange.caret(2)])
        patch_buffer(buffer, ["X"])
        assert buffer.lines == ["X", "B", "C"]
        assert buffer.selections == [TextRange.caret(0, 0)]

    def test_defaults_to_top_of_buffer(self):
        """Test that a buffer without selections is patched at the top"""
        buffer = SourceTextBuffer(lines=["A"])
        patch_buffer(buffer, ["X"])
        assert buffer.lines == ["X", "A"]

    def test_empty_buffer(self):
        """Test patching into an empty buffer"""
        buffer = SourceTextBuffer()
        patch_buffer(buffer, ["X", "Y"], TextRange.caret(0))
        assert buffer.lines == ["X", "Y"]
