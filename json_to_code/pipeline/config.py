"""
Configuration for the JSON to code pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Name requested for the type generated from the top-level object
    root_class_name: str = "RootClass"

    # Bundled language resource to generate (see LanguageLoader.available())
    language: str = "swift"

    # Prefix prepended to every generated type name
    class_prefix: str = ""

    # Base class for every generated type (empty = language default)
    parent_class_name: str = ""

    # Extra line emitted right after the header comment of each file
    first_line: str = ""

    # Whether to emit constructors from a dictionary
    include_constructors: bool = True

    # Whether to emit helpers such as to-dictionary conversion
    include_utilities: bool = True

    # Add the "generated by" comment at the top of each file
    add_generation_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "root_class_name": self.root_class_name,
            "language": self.language,
            "class_prefix": self.class_prefix,
            "parent_class_name": self.parent_class_name,
            "first_line": self.first_line,
            "include_constructors": self.include_constructors,
            "include_utilities": self.include_utilities,
            "add_generation_comment": self.add_generation_comment,
        }
