import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click

from .logging_utils import configure_logging
from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    FileTextSource,
    Invocation,
    LanguageLoader,
    ModelGenerator,
    PasteError,
    PasteJsonAsCode,
    SourceTextBuffer,
    TextPosition,
    TextRange,
)
from .pipeline.analyzer import GenerationRequest
from .pipeline.errors import ClipboardEmptyError
from .pipeline.normalizer import canonical_schema
from .pipeline.sanitizer import remove_control_characters

PASTE_COMMAND_IDENTIFIER = "io.github.json-to-code.PasteJSONAsCode"


def load_config(config_path, language, name) -> CodeGeneratorConfig:
    """Build the generation config from an optional file and CLI overrides."""
    if config_path is not None:
        with open(config_path) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file when given
    if language is not None:
        config.language = language
    if name is not None:
        config.root_class_name = name
    return config


def fail(error: PasteError):
    raise click.ClickException(f"{error.message} ({error.details})")


language_option = click.option("--language", "-l", default=None, type=click.Choice(LanguageLoader().available()))
name_option = click.option("--name", "-n", default=None, type=str, help="Name of the root type")
config_option = click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv)")
def json_to_code(verbose):
    configure_logging(verbose)


@json_to_code.command()
@language_option
@name_option
@config_option
@click.argument("input_path", metavar="INPUT", default="-", type=click.Path(exists=True, allow_dash=True))
def generate(language, name, config, input_path):
    """Print the code generated from the JSON in INPUT (default: stdin)."""
    config = load_config(config, language, name)
    try:
        text = FileTextSource(input_path).read_text()
        if not text:
            raise ClipboardEmptyError()
        schema = canonical_schema(remove_control_characters(text))
        generator = ModelGenerator(LanguageLoader().load(config.language), config)
        code = generator.generate_code(GenerationRequest(schema=schema, desired_root_name=config.root_class_name))
    except PasteError as e:
        fail(e)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(code.rstrip("\n"))


@json_to_code.command()
@language_option
@name_option
@config_option
@click.option("--input", "-i", "input_path", default="-", type=click.Path(exists=True, allow_dash=True), help="JSON source (default: stdin)")
@click.option("--line", default=0, type=click.IntRange(min=0), help="Selection start line (0-based)")
@click.option("--column", default=0, type=click.IntRange(min=0), help="Selection start column")
@click.option("--end-line", default=None, type=click.IntRange(min=0), help="Selection end line (default: start line)")
@click.option("--end-column", default=None, type=click.IntRange(min=0), help="Selection end column (default: start column)")
@click.argument("dest", type=click.Path(dir_okay=False, resolve_path=True))
def paste(language, name, config, input_path, line, column, end_line, end_column, dest):
    """Paste the code generated from the JSON input into DEST."""
    config = load_config(config, language, name)
    dest_path = Path(dest)
    existing = dest_path.read_text(encoding="utf-8") if dest_path.exists() else ""

    start = TextPosition(line, column)
    end = TextPosition(line if end_line is None else end_line, column if end_column is None else end_column)
    buffer = SourceTextBuffer.from_text(existing, TextRange(start, end))

    # The single "buffer" thread is the only one touching the buffer
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="json_to_code") as background, ThreadPoolExecutor(
        max_workers=1, thread_name_prefix="buffer"
    ) as foreground:
        command = PasteJsonAsCode(FileTextSource(input_path), LanguageLoader(), config, background, foreground)
        error = command.perform(Invocation(PASTE_COMMAND_IDENTIFIER, buffer)).result()

    if error is not None:
        fail(error)

    AtomicWriter().write(dest_path, buffer.to_text())
    click.echo(f"Pasted {config.root_class_name} into {dest_path.name} at line {start.line}")


@json_to_code.command()
def languages():
    """List the bundled target languages."""
    loader = LanguageLoader()
    for key in loader.available():
        click.echo(f"{key}\t{loader.load(key).name}")
