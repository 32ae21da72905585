"""
Swift code generation backend.

Generates ObjectMapper ``Mappable`` classes with dictionary based
constructors and serialization helpers.
"""

from __future__ import annotations

from ..analyzer.model_nodes import GeneratedFile
from .base import CodeBackend


class SwiftBackend(CodeBackend):
    """Swift code generation backend."""

    def required_imports(self, file: GeneratedFile, leading: bool = False) -> list[str]:
        return list(self.language.imports)
