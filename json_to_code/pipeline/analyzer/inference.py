"""
Type inference from JSON samples.

Walks a canonical schema object and discovers one GeneratedFile per
object shape, in depth-first pre-order (root first). Property types are
inferred from every sample value seen for a key:

- bool, int, float and str map to the boolean, integer, number and string
  primitives; integer and number samples together widen to number;
- null marks the type nullable, a key with only null samples is ``any``;
- nested objects become new types named after their key;
- arrays get a single element type unified over all their items, arrays
  of objects produce one type from the union of the item keys;
- anything else that disagrees becomes ``any``.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from ...utils import apply_naming, singularize, snake_to_pascal_case
from ..config import CodeGeneratorConfig
from ..languages import LanguageModel
from ..normalizer import merge_object_into
from .model_nodes import GeneratedFile, GenerationRequest, GenerationResult, PropertyDef, TypeKind, TypeRef

LOG = logging.getLogger(__name__)


def primitive_name(value: Any) -> str:
    """Schema primitive name of a scalar JSON value."""
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    raise TypeError(f"Not a JSON scalar: {value!r}")


class SchemaInferrer:
    """Builds the file set for one generation request."""

    def __init__(self, language: LanguageModel, config: CodeGeneratorConfig):
        self.language = language
        self.config = config
        self._files: list[GeneratedFile] = []
        self._by_name: dict[str, GeneratedFile] = {}
        self._keys_by_name: dict[str, frozenset[str]] = {}
        self._next_id = 0

    def infer(self, request: GenerationRequest) -> GenerationResult:
        """
        Discover all types of ``request.schema``.

        Class references inside the result still carry discovery-time names;
        they must be passed through the reference resolver before rendering.
        """
        self._files = []
        self._by_name = {}
        self._keys_by_name = {}
        self._next_id = 0

        root_name = self.type_name(request.desired_root_name)
        self._add_file(root_name, [request.schema])

        if self.config.class_prefix:
            for file in self._files:
                file.name = self.config.class_prefix + file.name

        root = self._files[0]
        if root.name != request.desired_root_name:
            LOG.info("Root type %r renamed to %r", request.desired_root_name, root.name)
        LOG.debug("Discovered %d types", len(self._files))
        return GenerationResult(files=list(self._files), resolved_root_name=root.name)

    def type_name(self, raw: str) -> str:
        """PascalCase type name that does not clash with a reserved type."""
        name = snake_to_pascal_case(raw) or "Type"
        if name[0].isdigit():
            name = "Type" + name
        if name in self.language.reserved_type_names or name in self.language.reserved_words:
            name += "Class"
        return name

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def _unique_name(self, name: str) -> str:
        counter = 2
        while f"{name}{counter}" in self._by_name:
            counter += 1
        return f"{name}{counter}"

    def _add_file(self, name: str, samples: list[dict[str, Any]]) -> tuple[int, str]:
        """Register a type for ``samples`` and return its id and name.

        A type with the same name and the same keys as an already discovered
        one is folded into it; the returned id is then only known to the
        existing file through ``merged_ids``.
        """
        file_id = self._new_id()
        keys = frozenset(key for sample in samples for key in sample)

        existing = self._by_name.get(name)
        if existing is not None:
            if self._keys_by_name[name] == keys:
                existing.merged_ids.add(file_id)
                LOG.debug("Folded duplicate type %s into existing definition", name)
                return file_id, existing.name
            name = self._unique_name(name)

        file = GeneratedFile(id=file_id, name=name, original_name=name)
        self._files.append(file)
        self._by_name[name] = file
        self._keys_by_name[name] = keys
        file.properties = self._infer_properties(samples)
        return file_id, name

    def _infer_properties(self, samples: list[dict[str, Any]]) -> list[PropertyDef]:
        merged: dict[str, Any] = {}
        present: Counter[str] = Counter()
        for sample in samples:
            merge_object_into(merged, sample)
            present.update(key for key, value in sample.items() if value is not None)

        properties = []
        used_names: set[str] = set()
        for key in merged:
            values = [sample[key] for sample in samples if key in sample]
            type_ref = self._infer_type(self.type_name(key), values)
            is_optional = self.language.optional_by_default or present[key] < len(samples)
            properties.append(
                PropertyDef(
                    name=self._property_name(key, used_names),
                    json_name=key,
                    type_ref=type_ref,
                    is_optional=is_optional,
                )
            )
        return properties

    def _property_name(self, key: str, used_names: set[str]) -> str:
        name = apply_naming(key, self.language.property_naming)
        if name in self.language.reserved_words:
            name = self.language.reserved_word_format.format(name=name)
        if name in used_names:
            counter = 2
            while f"{name}{counter}" in used_names:
                counter += 1
            name = f"{name}{counter}"
        used_names.add(name)
        return name

    def _infer_type(self, type_name: str, values: list[Any]) -> TypeRef:
        """Unify the types of all ``values`` seen for one key or array."""
        non_null = [v for v in values if v is not None]
        is_nullable = len(non_null) < len(values)

        if not non_null:
            return TypeRef(kind=TypeKind.ANY, name="any", is_nullable=True)

        if all(isinstance(v, dict) for v in non_null):
            target_id, target_name = self._add_file(type_name, non_null)
            return TypeRef(kind=TypeKind.CLASS, name=target_name, target_id=target_id, is_nullable=is_nullable)

        if all(isinstance(v, list) for v in non_null):
            items = [item for v in non_null for item in v]
            if items:
                element = self._infer_type(self.type_name(singularize(type_name)), items)
            else:
                element = TypeRef(kind=TypeKind.ANY, name="any")
            return TypeRef(kind=TypeKind.ARRAY, name="array", type_args=[element], is_nullable=is_nullable)

        if any(isinstance(v, (dict, list)) for v in non_null):
            return TypeRef(kind=TypeKind.ANY, name="any", is_nullable=is_nullable)

        names = {primitive_name(v) for v in non_null}
        if len(names) == 1:
            return TypeRef(kind=TypeKind.PRIMITIVE, name=names.pop(), is_nullable=is_nullable)
        if names == {"integer", "number"}:
            return TypeRef(kind=TypeKind.PRIMITIVE, name="number", is_nullable=is_nullable)
        return TypeRef(kind=TypeKind.ANY, name="any", is_nullable=is_nullable)
