"""
The "paste JSON as code" command.

One ``PasteJsonAsCode`` instance serves one invocation and moves through

    IDLE -> SANITIZING -> PARSING -> GENERATING -> PATCHING -> DONE
                                                            \\-> FAILED

Sanitizing, parsing and generating are pure and run on the ``background``
executor. The resulting lines cross over to the ``foreground`` executor,
the only context allowed to touch the buffer, where they are trimmed and
patched in. The completion handler is called exactly once, with ``None``
on success or the PasteError that ended the invocation.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from enum import Enum

from .analyzer import GenerationRequest
from .assembler import assemble_lines
from .buffer import SourceTextBuffer, TextRange
from .commands import UnrecognizedCommand, resolve_command
from .config import CodeGeneratorConfig
from .errors import (
    PARSE_FAILURE_MARKER,
    ClipboardEmptyError,
    GenerationError,
    ParseError,
    PasteError,
    UnrecognizedCommandError,
    describe_failure,
)
from .generator import ModelGenerator
from .languages import LanguageLoader
from .lines import LineClassifier
from .normalizer import canonical_schema
from .patcher import patch_buffer
from .sanitizer import remove_control_characters
from .text_source import TextSource
from .trim import TrimPolicy

LOG = logging.getLogger(__name__)

CompletionHandler = Callable[[PasteError | None], None]


class PipelineState(Enum):
    IDLE = "idle"
    SANITIZING = "sanitizing"
    PARSING = "parsing"
    GENERATING = "generating"
    PATCHING = "patching"
    DONE = "done"
    FAILED = "failed"


class ImmediateExecutor(Executor):
    """Executor running each call inline, for hosts with a single context."""

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        try:
            result = fn(*args, **kwargs)
        except BaseException as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future


@dataclass
class Invocation:
    """A request from the host to run a command against a buffer."""

    command_identifier: str
    buffer: SourceTextBuffer


@dataclass
class PreparedPaste:
    """Everything the foreground stage needs, computed in the background."""

    lines: list[str]
    classifier: LineClassifier
    root_name: str


class PasteJsonAsCode:
    """Reads JSON from a text source and pastes generated code into a buffer."""

    def __init__(
        self,
        text_source: TextSource,
        language_loader: LanguageLoader | None = None,
        config: CodeGeneratorConfig | None = None,
        background: Executor | None = None,
        foreground: Executor | None = None,
    ):
        """
        Args:
            text_source: Where the JSON text comes from
            language_loader: Loads the target language description
            config: Generation options, including the target language
            background: Executor for parsing and generation
            foreground: Executor owning the buffer
        """
        self.text_source = text_source
        self.language_loader = language_loader or LanguageLoader()
        self.config = config or CodeGeneratorConfig()
        self.background = background or ImmediateExecutor()
        self.foreground = foreground or ImmediateExecutor()

        self.state = PipelineState.IDLE
        self._completion: Future = Future()
        self._handler: CompletionHandler | None = None
        self._finished = False
        self._finish_lock = threading.Lock()

    def perform(self, invocation: Invocation, completion_handler: CompletionHandler | None = None) -> Future:
        """
        Run the command.

        Returns:
            A future resolved with the same value passed to the handler

        Raises:
            RuntimeError: If this instance already served an invocation
        """
        if self.state is not PipelineState.IDLE or self._handler is not None:
            raise RuntimeError("PasteJsonAsCode serves a single invocation")
        self._handler = completion_handler or (lambda error: None)

        lookup = resolve_command(invocation.command_identifier)
        if isinstance(lookup, UnrecognizedCommand):
            self._fail(UnrecognizedCommandError(details=f"Unknown command identifier: {lookup.identifier}"))
            return self._completion

        try:
            text = self.text_source.read_text()
        except OSError as e:
            self._fail(ClipboardEmptyError(details=str(e)))
            return self._completion
        except UnicodeDecodeError as e:
            self._fail(ParseError(details=f"{PARSE_FAILURE_MARKER}: {e}"))
            return self._completion
        if not text:
            self._fail(ClipboardEmptyError())
            return self._completion

        prepared = self.background.submit(self._prepare, text)
        prepared.add_done_callback(lambda future: self._hand_over(future, invocation))
        return self._completion

    def _transition(self, state: PipelineState) -> None:
        LOG.debug("%s -> %s", self.state.value, state.value)
        self.state = state

    def _prepare(self, text: str) -> PreparedPaste:
        """Background stage: sanitize, parse and generate."""
        self._transition(PipelineState.SANITIZING)
        text = remove_control_characters(text)

        self._transition(PipelineState.PARSING)
        schema = canonical_schema(text)

        self._transition(PipelineState.GENERATING)
        try:
            language = self.language_loader.load(self.config.language)
        except (OSError, ValueError) as e:
            raise GenerationError(details=str(e)) from e

        generator = ModelGenerator(language, self.config)
        result = generator.generate(GenerationRequest(schema=schema, desired_root_name=self.config.root_class_name))
        generator.fix_references(result.files)
        lines = assemble_lines(result.files, generator.render)
        return PreparedPaste(lines=lines, classifier=language.line_classifier(), root_name=result.resolved_root_name)

    def _hand_over(self, prepared: Future, invocation: Invocation) -> None:
        error = prepared.exception()
        if error is not None:
            if not isinstance(error, PasteError):
                error = GenerationError(describe_failure(str(error)), details=repr(error))
            self._fail(error)
            return

        try:
            self.foreground.submit(self._patch, invocation, prepared.result())
        except RuntimeError as e:
            self._fail(GenerationError(details=f"Could not schedule buffer update: {e}"))

    def _patch(self, invocation: Invocation, prepared: PreparedPaste) -> None:
        """Foreground stage: trim the generated lines and patch the buffer."""
        self._transition(PipelineState.PATCHING)
        buffer = invocation.buffer
        try:
            with buffer.lock:
                selection = buffer.first_selection() or TextRange()
                lines = TrimPolicy(prepared.classifier).apply(prepared.lines, buffer.lines, selection)
                patch_buffer(buffer, lines, selection)
        except Exception as e:
            self._fail(GenerationError(details=f"Buffer update failed: {e!r}"))
            return

        LOG.info("Pasted %s (%d lines) at line %d", prepared.root_name, len(lines), selection.start.line)
        self._transition(PipelineState.DONE)
        self._finish(None)

    def _fail(self, error: PasteError) -> None:
        LOG.error("json_to_code encountered an error: %s", error.details)
        self._transition(PipelineState.FAILED)
        self._finish(error)

    def _finish(self, error: PasteError | None) -> None:
        with self._finish_lock:
            if self._finished:
                return
            self._finished = True
        try:
            self._handler(error)
        finally:
            self._completion.set_result(error)
