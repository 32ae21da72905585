"""
Generation backend adapter.

``ModelGenerator`` is the only entry point the paste pipeline uses to turn
a canonical schema into source text: it infers the generated types,
resolves references between them and renders each of them. Any failure
in these steps is reported as a GenerationError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from .analyzer import GeneratedFile, GenerationRequest, GenerationResult, ReferenceResolver, SchemaInferrer
from .assembler import assemble_lines
from .backends import CodeBackend, backend_for
from .config import CodeGeneratorConfig
from .errors import GenerationError
from .languages import LanguageModel

LOG = logging.getLogger(__name__)


@contextmanager
def _backend_step(step: str) -> Iterator[None]:
    try:
        yield
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(details=f"{step} failed: {e}") from e


class ModelGenerator:
    """Generates source code for one target language."""

    def __init__(self, language: LanguageModel, config: CodeGeneratorConfig | None = None):
        self.language = language
        self.config = config or CodeGeneratorConfig()
        with _backend_step("Backend setup"):
            self.backend: CodeBackend = backend_for(language, self.config)

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Infer every type of ``request.schema``, root first."""
        with _backend_step("Type generation"):
            result = SchemaInferrer(self.language, self.config).infer(request)
        LOG.info("Generated %d %s types for %s", len(result.files), self.language.key, result.resolved_root_name)
        return result

    def fix_references(self, files: list[GeneratedFile]) -> None:
        """Point every class reference at its final type. Idempotent."""
        with _backend_step("Reference resolution"):
            ReferenceResolver(files).fix_references()

    def render(self, file: GeneratedFile, leading: bool = False) -> str:
        with _backend_step(f"Rendering {file.name}"):
            return self.backend.render(file, leading)

    def generate_lines(self, request: GenerationRequest) -> list[str]:
        """Run the whole backend and return the assembled lines."""
        result = self.generate(request)
        self.fix_references(result.files)
        return assemble_lines(result.files, self.render)

    def generate_code(self, request: GenerationRequest) -> str:
        return "\n".join(self.generate_lines(request))
