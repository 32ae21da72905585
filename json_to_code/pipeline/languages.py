"""
Language descriptions.

Each target language is a directory under ``templates/`` holding a
``language.json`` description next to its Jinja2 templates. The
description is loaded fresh for every invocation and is treated as
read-only afterwards.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from .lines import DEFAULT_COMMENT_PREFIX, DEFAULT_IMPORT_PREFIXES, LineClassifier

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@dataclass(frozen=True)
class LanguageModel:
    """Target language description, as read from ``language.json``."""

    # Directory name of the language, e.g. "swift"
    key: str = ""

    # Display name, e.g. "Swift - ObjectMapper"
    name: str = ""

    # Backend rendering this language (see backends.BACKENDS); defaults to the key
    backend: str = ""

    # File extension without dot, used for templates and file headers
    extension: str = ""

    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    import_prefixes: tuple[str, ...] = DEFAULT_IMPORT_PREFIXES

    # Property naming convention: "camel", "snake", "pascal" or "original"
    property_naming: str = "camel"

    # Schema type name -> language type name
    types: dict[str, str] = field(default_factory=dict)

    # Format strings for composite types
    array_format: str = "[{item}]"
    optional_format: str = "{type}?"

    # Whether every property is declared optional regardless of the samples
    optional_by_default: bool = False

    reserved_words: frozenset[str] = frozenset()
    reserved_word_format: str = "{name}_"
    reserved_type_names: frozenset[str] = frozenset()

    # Base class used when the configuration names none
    default_parent_class: str = ""

    # Import lines emitted by every file
    imports: tuple[str, ...] = ()

    # Directory holding the templates; defaults to the bundled one
    directory: Path | None = None

    @staticmethod
    def from_dict(key: str, d: dict, directory: Path | None = None) -> LanguageModel:
        """Create a language model from a ``language.json`` dictionary."""
        return LanguageModel(
            key=key,
            name=d.get("name", key),
            backend=d.get("backend", key),
            extension=d["extension"],
            comment_prefix=d.get("comment_prefix", DEFAULT_COMMENT_PREFIX),
            import_prefixes=tuple(d.get("import_prefixes", DEFAULT_IMPORT_PREFIXES)),
            property_naming=d.get("property_naming", "camel"),
            types=dict(d.get("types", {})),
            array_format=d.get("array_format", "[{item}]"),
            optional_format=d.get("optional_format", "{type}?"),
            optional_by_default=d.get("optional_by_default", False),
            reserved_words=frozenset(d.get("reserved_words", [])),
            reserved_word_format=d.get("reserved_word_format", "{name}_"),
            reserved_type_names=frozenset(d.get("reserved_type_names", [])),
            default_parent_class=d.get("default_parent_class", ""),
            imports=tuple(d.get("imports", [])),
            directory=directory,
        )

    def line_classifier(self) -> LineClassifier:
        """Classifier matching this language's comments and imports."""
        return LineClassifier(self.comment_prefix, self.import_prefixes)

    def template_dir(self) -> Path:
        return self.directory or TEMPLATES_DIR / self.key


class LanguageLoader:
    """Loads language descriptions from a templates directory."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = Path(templates_dir)

    def available(self) -> list[str]:
        """Keys of all languages found in the templates directory."""
        return sorted(p.parent.name for p in self.templates_dir.glob("*/language.json"))

    def load(self, key: str) -> LanguageModel:
        """
        Load a language description by key.

        Raises:
            ValueError: If no such language is bundled
        """
        path = self.templates_dir / key / "language.json"
        if not path.is_file():
            raise ValueError(f"Language not supported: {key}")
        with open(path, encoding="utf-8") as f:
            return LanguageModel.from_dict(key, json.load(f), path.parent)
