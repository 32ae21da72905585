from json_to_code.pipeline.sanitizer import remove_control_characters


class TestSanitizer:
    """Test control character removal"""

    def test_removes_line_breaks_and_tabs(self):
        """Test that C0 controls, line breaks included, are removed"""
        assert remove_control_characters('{\n\t"a": 1\r\n}') == '{"a": 1}'

    def test_removes_format_characters(self):
        """Test that BOM and zero-width characters are removed"""
        assert remove_control_characters('\ufeff{"a":\u200b1}') == '{"a":1}'

    def test_removes_c1_controls(self):
        """Test that C1 controls such as NEL are removed"""
        assert remove_control_characters("a\x85b\x00c") == "abc"

    def test_keeps_everything_else(self):
        """Test that printable characters keep their order"""
        text = '{"name": "Zoë ☃ 東京", "n": 1}'
        assert remove_control_characters(text) == text

    def test_empty(self):
        """Test the empty string"""
        assert remove_control_characters("") == ""
