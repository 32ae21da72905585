"""
Python code generation backend.

Generates ``dataclasses`` with ``dataclasses_json`` (de)serialization.
"""

from __future__ import annotations

import collections
from typing import Any

from ..analyzer.model_nodes import GeneratedFile, PropertyDef, TypeKind
from .base import CodeBackend, string_literal

# Standard library modules that may appear in generated imports
STDLIB_MODULES = {"dataclasses", "typing"}


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    def required_imports(self, file: GeneratedFile, leading: bool = False) -> list[str]:
        """Assemble Python import statements for one file.

        Only the leading file gets the ``__future__`` import, which must open
        the assembled module.
        """
        python_imports: set[tuple[str, str]] = {("dataclasses", "dataclass")}
        if leading:
            python_imports.add(("__future__", "annotations"))

        if self.config.include_utilities:
            python_imports.add(("dataclasses_json", "dataclass_json"))

        for prop in file.properties:
            if any(t.kind == TypeKind.ANY for t in prop.type_ref.walk()):
                python_imports.add(("typing", "Any"))
            if self._is_renamed(prop):
                python_imports.add(("dataclasses", "field"))
                python_imports.add(("dataclasses_json", "config"))

        return self._assemble_imports(python_imports)

    def _assemble_imports(self, python_imports: set[tuple[str, str]]) -> list[str]:
        # Group imports by module
        import_groups: dict[str, set[str]] = collections.defaultdict(set)
        for module, name in python_imports:
            import_groups[module].add(name)

        stdlib_groups = {m: import_groups[m] for m in import_groups if m in STDLIB_MODULES}
        third_party_groups = {m: import_groups[m] for m in import_groups if m not in STDLIB_MODULES and m != "__future__"}

        assembled = []

        # __future__ imports first
        if "__future__" in import_groups:
            assembled.append(f"from __future__ import {', '.join(sorted(import_groups['__future__']))}")
            assembled.append("")

        for module in sorted(stdlib_groups):
            assembled.append(f"from {module} import {', '.join(sorted(stdlib_groups[module]))}")

        if stdlib_groups and third_party_groups:
            assembled.append("")

        for module in sorted(third_party_groups):
            assembled.append(f"from {module} import {', '.join(sorted(third_party_groups[module]))}")

        return assembled

    @staticmethod
    def _is_renamed(prop: PropertyDef) -> bool:
        return prop.name != prop.json_name

    def _order_properties(self, properties: list[PropertyDef]) -> list[PropertyDef]:
        """
        Order properties for dataclass compatibility.

        Required fields (without defaults) must come before optional fields,
        which default to None.
        """
        required = [p for p in properties if not (p.is_optional or p.type_ref.is_nullable)]
        optional = [p for p in properties if p.is_optional or p.type_ref.is_nullable]
        return required + optional

    def _prepare_property_context(self, prop: PropertyDef) -> dict[str, Any]:
        """Add the dataclass default for the field."""
        result = super()._prepare_property_context(prop)
        is_optional = result["IS_OPTIONAL"]

        if self._is_renamed(prop):
            metadata = f"metadata=config(field_name={string_literal(prop.json_name)})"
            result["INIT"] = f"field(default=None, {metadata})" if is_optional else f"field({metadata})"
        elif is_optional:
            result["INIT"] = "None"
        else:
            result["INIT"] = ""
        return result
