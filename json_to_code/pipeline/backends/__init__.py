"""
Code generation backends.

Contains language-specific renderers for generated types.
"""

from __future__ import annotations

from ..config import CodeGeneratorConfig
from ..languages import LanguageModel
from .base import CodeBackend
from .csharp_backend import CSharpBackend
from .python_backend import PythonBackend
from .swift_backend import SwiftBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    "swift": SwiftBackend,
    "python": PythonBackend,
    "cs": CSharpBackend,
}


def backend_for(language: LanguageModel, config: CodeGeneratorConfig) -> CodeBackend:
    """Instantiate the backend a language description asks for."""
    backend_class = BACKENDS.get(language.backend or language.key)
    if backend_class is None:
        raise ValueError(f"No backend for language: {language.key}")
    return backend_class(language, config)


__all__ = [
    "BACKENDS",
    "CodeBackend",
    "SwiftBackend",
    "PythonBackend",
    "CSharpBackend",
    "backend_for",
]
