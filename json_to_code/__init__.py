"""JSON to Code

Infers types from a JSON sample and generates model classes (Swift,
Python, C#), then pastes them into an existing text buffer at the cursor
or over the selection.
"""

__version__ = "1.0.0"

from .pipeline import (
    CodeGeneratorConfig,
    Invocation,
    LanguageLoader,
    ModelGenerator,
    PasteError,
    PasteJsonAsCode,
    SourceTextBuffer,
    TextRange,
)

__all__ = [
    "PasteJsonAsCode",
    "Invocation",
    "ModelGenerator",
    "CodeGeneratorConfig",
    "LanguageLoader",
    "PasteError",
    "SourceTextBuffer",
    "TextRange",
]
