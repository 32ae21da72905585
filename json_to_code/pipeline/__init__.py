"""
Pipeline - JSON sample to code, pasted into a text buffer.

1. Sanitizer: strip control characters from the raw text
2. Normalizer: parse JSON and reduce it to one object schema
3. Generator: infer types, resolve references, render with templates
4. Assembler: order the generated files and split them into lines
5. Trim policy: drop imports/comments that the destination already has
6. Patcher: replace the selection of the buffer with the lines

The orchestrator runs steps 1-4 in the background and 5-6 on the context
that owns the buffer.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .buffer import SourceTextBuffer, TextPosition, TextRange
from .commands import Command, RecognizedCommand, UnrecognizedCommand, resolve_command
from .config import CodeGeneratorConfig
from .errors import (
    ClipboardEmptyError,
    GenerationError,
    InvalidRootError,
    ParseError,
    PasteError,
    UnrecognizedCommandError,
)
from .generator import ModelGenerator
from .languages import LanguageLoader, LanguageModel
from .orchestrator import ImmediateExecutor, Invocation, PasteJsonAsCode, PipelineState
from .text_source import FileTextSource, StaticTextSource, TextSource

__all__ = [
    "AtomicWriter",
    "SourceTextBuffer",
    "TextPosition",
    "TextRange",
    "Command",
    "RecognizedCommand",
    "UnrecognizedCommand",
    "resolve_command",
    "CodeGeneratorConfig",
    "PasteError",
    "UnrecognizedCommandError",
    "ClipboardEmptyError",
    "ParseError",
    "InvalidRootError",
    "GenerationError",
    "ModelGenerator",
    "LanguageLoader",
    "LanguageModel",
    "ImmediateExecutor",
    "Invocation",
    "PasteJsonAsCode",
    "PipelineState",
    "FileTextSource",
    "StaticTextSource",
    "TextSource",
]
