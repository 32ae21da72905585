"""
Analyzer - infers generated types from JSON samples.

Contains:
- model_nodes: Generated type definitions
- inference: Type inference over a canonical schema
- reference_resolver: Post-pass fixing references between generated types
"""

from __future__ import annotations

from .inference import SchemaInferrer
from .model_nodes import (
    FileSet,
    GeneratedFile,
    GenerationRequest,
    GenerationResult,
    PropertyDef,
    TypeKind,
    TypeRef,
)
from .reference_resolver import ReferenceResolver, UnresolvedReferenceError

__all__ = [
    "SchemaInferrer",
    "ReferenceResolver",
    "UnresolvedReferenceError",
    "FileSet",
    "GeneratedFile",
    "GenerationRequest",
    "GenerationResult",
    "PropertyDef",
    "TypeKind",
    "TypeRef",
]
