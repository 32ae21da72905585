"""
Base class for code generation backends.

Defines the interface that all language-specific backends implement and
the template plumbing they share.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

import jinja2

from ...utils import snake_to_pascal_case
from ..analyzer.model_nodes import GeneratedFile, PropertyDef, TypeKind, TypeRef
from ..config import CodeGeneratorConfig
from ..languages import LanguageModel


def string_literal(text: str) -> str:
    """Double quoted literal for a JSON key, valid in every bundled language."""
    return json.dumps(text, ensure_ascii=False)


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    def __init__(self, language: LanguageModel, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            language: Description of the target language
            config: Code generation configuration
        """
        self.language = language
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(self.language.template_dir())),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        # Add custom filters
        self.jinja_env.filters["snake_to_pascal"] = snake_to_pascal_case
        self.jinja_env.filters["string_literal"] = string_literal

        extension = self.language.extension
        self.prefix_template = self.jinja_env.get_template(f"prefix.{extension}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{extension}.jinja2")

    @abstractmethod
    def required_imports(self, file: GeneratedFile, leading: bool = False) -> list[str]:
        """
        Import lines needed by one generated file.

        Args:
            file: The file being rendered
            leading: Whether the file comes first in the assembled output

        Returns:
            Import lines in output order (empty strings separate groups)
        """

    def render(self, file: GeneratedFile, leading: bool = False) -> str:
        """
        Render one generated file to source text.

        Args:
            file: A file whose references have been resolved
            leading: Whether the file comes first in the assembled output

        Returns:
            The file's source, newline separated
        """
        prefix = self.prefix_template.render(
            FILE_NAME=f"{file.name}.{self.language.extension}",
            comment_prefix=self.language.comment_prefix,
            generation_comment=self.config.add_generation_comment,
            first_line=self.config.first_line,
            required_imports=self.required_imports(file, leading),
        )
        body = self.class_template.render(self._prepare_class_context(file))
        return prefix + body

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate a model type to a language type string, ignoring optionality."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            return self.language.types.get(type_ref.name, type_ref.name)

        if type_ref.kind == TypeKind.CLASS:
            return type_ref.name

        if type_ref.kind == TypeKind.ARRAY:
            element = type_ref.element
            item = self.translate_type(element) if element else self.language.types["any"]
            if element is not None and element.is_nullable:
                item = self.language.optional_format.format(type=item)
            return self.language.array_format.format(item=item)

        return self.language.types["any"]

    def property_type(self, prop: PropertyDef) -> str:
        """Declared type of a property, wrapped as optional when needed."""
        base = self.translate_type(prop.type_ref)
        if prop.is_optional or prop.type_ref.is_nullable:
            return self.language.optional_format.format(type=base)
        return base

    def parent_class(self) -> str:
        return self.config.parent_class_name or self.language.default_parent_class

    def _order_properties(self, properties: list[PropertyDef]) -> list[PropertyDef]:
        """Order properties for the class body. Keeps discovery order by default."""
        return list(properties)

    def _prepare_class_context(self, file: GeneratedFile) -> dict[str, Any]:
        """
        Prepare the template context for a generated type.

        Args:
            file: The generated file

        Returns:
            Dictionary of template variables
        """
        properties = [self._prepare_property_context(p) for p in self._order_properties(file.properties)]
        return {
            "CLASS_NAME": file.name,
            "EXTENDS": self.parent_class(),
            "properties": properties,
            "include_constructors": self.config.include_constructors,
            "include_utilities": self.config.include_utilities,
        }

    def _prepare_property_context(self, prop: PropertyDef) -> dict[str, Any]:
        """
        Prepare the template context for a property.

        Args:
            prop: The property definition

        Returns:
            Dictionary of template variables
        """
        type_ref = prop.type_ref
        element = type_ref.element if type_ref.kind == TypeKind.ARRAY else None
        return {
            "NAME": prop.name,
            "JSON_NAME": prop.json_name,
            "TYPE": self.property_type(prop),
            "BASE_TYPE": self.translate_type(type_ref),
            "IS_OPTIONAL": prop.is_optional or type_ref.is_nullable,
            "IS_CLASS": type_ref.kind == TypeKind.CLASS,
            "IS_ARRAY_OF_CLASS": element is not None and element.kind == TypeKind.CLASS,
            "ELEMENT_TYPE": self.translate_type(element) if element else "",
        }
