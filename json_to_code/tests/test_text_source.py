import io

import pytest

from json_to_code.pipeline.text_source import FileTextSource, StaticTextSource


class TestTextSources:
    """Test the clipboard stand-ins"""

    def test_static(self):
        """Test that static text is handed over as is"""
        assert StaticTextSource('{"a": 1}').read_text() == '{"a": 1}'
        assert StaticTextSource(None).read_text() is None

    def test_file(self, tmp_path):
        """Test reading a file"""
        path = tmp_path / "sample.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert FileTextSource(path).read_text() == '{"a": 1}'

    def test_empty_file(self, tmp_path):
        """Test that an empty file has no text"""
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        assert FileTextSource(path).read_text() is None

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises OSError"""
        with pytest.raises(OSError):
            FileTextSource(tmp_path / "missing.json").read_text()

    def test_stdin(self, monkeypatch):
        """Test that '-' reads standard input"""
        monkeypatch.setattr("sys.stdin", io.StringIO('[{"a": 1}]'))
        assert FileTextSource("-").read_text() == '[{"a": 1}]'
