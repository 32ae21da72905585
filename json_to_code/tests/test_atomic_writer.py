import pytest

from json_to_code.pipeline.atomic_writer import AtomicWriter


class TestAtomicWriter:
    """Test atomic writes of patched buffers"""

    def test_write_new_file(self, tmp_path):
        """Test writing a file that does not exist yet, creating parents"""
        path = tmp_path / "models" / "User.swift"
        AtomicWriter().write(path, "class User{}\n")
        assert path.read_text(encoding="utf-8") == "class User{}\n"

    def test_replace_existing_file(self, tmp_path):
        """Test that existing content is replaced and no temp file remains"""
        path = tmp_path / "User.swift"
        path.write_text("old\n")
        AtomicWriter().write(path, "new\n")
        assert path.read_text() == "new\n"
        assert [p.name for p in tmp_path.iterdir()] == ["User.swift"]

    def test_failed_write_keeps_original(self, tmp_path):
        """Test that an encoding failure leaves the original untouched"""
        path = tmp_path / "User.swift"
        path.write_text("old\n")
        with pytest.raises(UnicodeEncodeError):
            AtomicWriter(encoding="ascii").write(path, "café\n")
        assert path.read_text() == "old\n"
        assert [p.name for p in tmp_path.iterdir()] == ["User.swift"]
