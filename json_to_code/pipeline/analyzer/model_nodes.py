"""
Model node definitions.

These nodes describe the types inferred from a JSON sample, ready to be
rendered by a language backend. Class-typed references point at their
target file by id so that renames can be applied after discovery.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(Enum):
    """Kind of type in the model."""

    PRIMITIVE = "primitive"  # integer, number, string, boolean
    CLASS = "class"  # A generated type
    ARRAY = "array"  # list of T
    ANY = "any"  # No usable sample


@dataclass
class TypeRef:
    """A type inferred from one or more sample values."""

    kind: TypeKind = TypeKind.ANY
    name: str = ""  # Schema primitive name, or the target class name

    # Element type for arrays
    type_args: list[TypeRef] = field(default_factory=list)

    # Id of the referenced GeneratedFile for CLASS types
    target_id: int | None = None

    # Whether null was seen among the samples
    is_nullable: bool = False

    @property
    def element(self) -> TypeRef | None:
        return self.type_args[0] if self.type_args else None

    def walk(self):
        """Yield this type and every nested type argument."""
        yield self
        for arg in self.type_args:
            yield from arg.walk()


@dataclass
class PropertyDef:
    """A property of a generated type."""

    name: str = ""  # Language-side name
    json_name: str = ""  # Original JSON key
    type_ref: TypeRef = field(default_factory=TypeRef)

    # Missing or null in at least one sample
    is_optional: bool = False


@dataclass
class GeneratedFile:
    """One generated type definition."""

    id: int = 0
    name: str = ""
    original_name: str = ""  # Name before prefixing and collision handling

    properties: list[PropertyDef] = field(default_factory=list)

    # Ids of the files this one refers to
    references: set[int] = field(default_factory=set)

    # Ids of discovered types that were folded into this one
    merged_ids: set[int] = field(default_factory=set)


FileSet = list[GeneratedFile]


@dataclass
class GenerationRequest:
    """Input of a generation run."""

    schema: dict[str, Any] = field(default_factory=dict)
    desired_root_name: str = "RootClass"


@dataclass
class GenerationResult:
    """Output of a generation run, files in discovery order (root first)."""

    files: FileSet = field(default_factory=list)
    resolved_root_name: str = ""

    @property
    def root(self) -> GeneratedFile | None:
        return self.files[0] if self.files else None
