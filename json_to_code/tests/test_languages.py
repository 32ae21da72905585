import json

import pytest

from json_to_code.pipeline.languages import TEMPLATES_DIR, LanguageLoader, LanguageModel


class TestLanguageLoader:
    """Test loading of language descriptions"""

    def test_bundled_languages(self):
        """Test that the bundled languages are discovered"""
        assert LanguageLoader().available() == ["cs", "python", "swift"]

    @pytest.mark.parametrize("key", ["cs", "python", "swift"])
    def test_bundled_language_is_complete(self, key):
        """Test that every bundled language maps every schema type"""
        language = LanguageLoader().load(key)
        assert language.key == key
        assert set(language.types) >= {"integer", "number", "string", "boolean", "any"}
        assert language.template_dir() == TEMPLATES_DIR / key
        assert (language.template_dir() / f"class.{language.extension}.jinja2").is_file()
        assert (language.template_dir() / f"prefix.{language.extension}.jinja2").is_file()

    def test_unknown_language(self):
        """Test that an unknown key raises ValueError"""
        with pytest.raises(ValueError, match="Language not supported: cobol"):
            LanguageLoader().load("cobol")

    def test_each_load_returns_a_fresh_description(self):
        """Test that descriptions are reloaded, not cached"""
        loader = LanguageLoader()
        assert loader.load("swift") is not loader.load("swift")

    def test_custom_templates_dir(self, tmp_path):
        """Test a language defined outside the package"""
        language_dir = tmp_path / "swiftish"
        language_dir.mkdir()
        (language_dir / "language.json").write_text(
            json.dumps({"name": "Swiftish", "backend": "swift", "extension": "swift", "types": {"any": "Any"}})
        )
        (tmp_path / "empty").mkdir()

        loader = LanguageLoader(tmp_path)
        assert loader.available() == ["swiftish"]
        language = loader.load("swiftish")
        assert language.backend == "swift"
        assert language.template_dir() == language_dir


class TestLanguageModel:
    """Test language descriptions"""

    def test_defaults(self):
        """Test defaults for a minimal description"""
        language = LanguageModel.from_dict("x", {"extension": "x"})
        assert language.name == "x"
        assert language.backend == "x"
        assert language.property_naming == "camel"
        assert language.comment_prefix == "//"
        assert language.template_dir() == TEMPLATES_DIR / "x"

    def test_line_classifier(self):
        """Test that the classifier follows the description"""
        classifier = LanguageLoader().load("python").line_classifier()
        assert classifier.is_comment("# x")
        assert classifier.is_import("from typing import Any")
        assert not classifier.is_comment("// x")
