"""
C# code generation backend.

Generates Newtonsoft.Json annotated classes.
"""

from __future__ import annotations

from typing import Any

from ...utils import to_camel_case
from ..analyzer.model_nodes import GeneratedFile, PropertyDef, TypeKind
from .base import CodeBackend


class CSharpBackend(CodeBackend):
    """C# code generation backend."""

    def required_imports(self, file: GeneratedFile, leading: bool = False) -> list[str]:
        usings = {line.removeprefix("using ").rstrip(";") for line in self.language.imports}
        if any(t.kind == TypeKind.ARRAY for prop in file.properties for t in prop.type_ref.walk()):
            usings.add("System.Collections.Generic")
        return [f"using {name};" for name in sorted(usings)]

    def _prepare_property_context(self, prop: PropertyDef) -> dict[str, Any]:
        """Add the constructor argument name for the property."""
        result = super()._prepare_property_context(prop)
        arg_name = to_camel_case(prop.name) or "value"
        if arg_name in self.language.reserved_words:
            arg_name = self.language.reserved_word_format.format(name=arg_name)
        result["ARG_NAME"] = arg_name
        return result
