from json_to_code.pipeline.buffer import SourceTextBuffer, TextPosition, TextRange


class TestTextRange:
    """Test positions and ranges"""

    def test_caret_is_empty(self):
        """Test that a caret is a collapsed range"""
        caret = TextRange.caret(3, 2)
        assert caret.is_empty
        assert caret.start == TextPosition(3, 2)

    def test_same_line_different_column_is_not_empty(self):
        """Test that emptiness compares columns too"""
        assert not TextRange(TextPosition(1, 0), TextPosition(1, 4)).is_empty

    def test_positions_are_ordered(self):
        """Test ordering by line, then column"""
        assert TextPosition(1, 9) < TextPosition(2, 0)
        assert TextPosition(2, 1) > TextPosition(2, 0)


class TestSourceTextBuffer:
    """Test buffer construction and serialization"""

    def test_from_text(self):
        """Test splitting text into lines"""
        buffer = SourceTextBuffer.from_text("a\r\nb\nc\n", TextRange.caret(1))
        assert buffer.lines == ["a", "b", "c"]
        assert buffer.first_selection() == TextRange.caret(1)

    def test_from_text_without_selection(self):
        """Test a buffer with no selection"""
        buffer = SourceTextBuffer.from_text("")
        assert buffer.lines == []
        assert buffer.first_selection() is None

    def test_to_text(self):
        """Test joining lines with a trailing newline"""
        assert SourceTextBuffer(lines=["a", "b"]).to_text() == "a\nb\n"
        assert SourceTextBuffer().to_text() == ""
