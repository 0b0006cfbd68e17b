"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml

from mongo_json_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from mongo_json_schema.conversion import (
    OUTPUT_FORMATS,
    TargetLoadError,
    build_collection_command,
    build_validator_document,
    load_schema_target,
    render_document,
    sanitize_json_schema,
    to_mongo_schema,
)
from mongo_json_schema.schema_generation import SchemaConversionError

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="json",
    show_default=True,
    help="Output document format",
)
_indent_option = click.option(
    "--indent",
    type=click.IntRange(min=1),
    default=2,
    show_default=True,
    help="Indentation width of the rendered document",
)
_validator_option = click.option(
    "--validator",
    "wrap_validator",
    is_flag=True,
    default=False,
    help="Wrap the schema in a {\"$jsonSchema\": ...} validator document.",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mongo-json-schema")
@click.option("--verbose", is_flag=True, default=False, help="Log conversion details to stderr.")
def cli(verbose: bool) -> None:
    """Convert pydantic schemas into MongoDB $jsonSchema validators."""
    if verbose:
        _configure_logging()


@cli.command(name="convert")
@click.argument("target")
@_format_option
@_indent_option
@_validator_option
@click.option(
    "--mode",
    type=click.Choice(("validation", "serialization")),
    default="validation",
    show_default=True,
    help="pydantic JSON Schema mode",
)
def convert(target: str, output_format: str, indent: int, wrap_validator: bool, mode: str) -> None:
    """Convert the pydantic model or type at TARGET (package.module:Name)."""
    try:
        schema = to_mongo_schema(load_schema_target(target), mode=mode)  # type: ignore[arg-type]
    except (TargetLoadError, SchemaConversionError) as exc:
        raise CliError(str(exc)) from exc
    document: Any = build_validator_document(schema) if wrap_validator else schema
    click.echo(render_document(document, output_format, indent))


@cli.command(name="sanitize")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a Draft-4 JSON Schema document (JSON or YAML)",
)
@_format_option
@_indent_option
@_validator_option
def sanitize(schema_path: str, output_format: str, indent: int, wrap_validator: bool) -> None:
    """Sanitize an existing JSON Schema document for MongoDB."""
    try:
        raw_schema = _read_schema_file(Path(schema_path))
        schema = sanitize_json_schema(raw_schema)
    except (OSError, SchemaConversionError) as exc:
        raise CliError(str(exc)) from exc
    document: Any = build_validator_document(schema) if wrap_validator else schema
    click.echo(render_document(document, output_format, indent))


@cli.command(name="export")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON export configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory receiving one collMod document per collection",
)
def export(config_path: str, output_dir: str | None) -> None:
    """Export collMod commands for every model listed in the configuration."""
    try:
        configuration = load_configuration(config_path)
        output = configuration.output
        commands = [
            build_collection_command(
                model.collection,
                to_mongo_schema(load_schema_target(model.target), mode=output.mode),  # type: ignore[arg-type]
                validation_level=model.validation_level,
                validation_action=model.validation_action,
            )
            for model in configuration.models
        ]
    except (ConfigurationError, TargetLoadError, SchemaConversionError, ValueError) as exc:
        raise CliError(str(exc)) from exc

    if output_dir is None:
        click.echo(render_document(commands, output.output_format, output.indent))
        return

    destination = Path(output_dir)
    try:
        destination.mkdir(parents=True, exist_ok=True)
        for command in commands:
            path = destination / f"{command['collMod']}.{output.output_format}"
            path.write_text(
                render_document(command, output.output_format, output.indent), encoding="utf-8"
            )
            click.echo(str(path.resolve()))
    except OSError as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML export configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML export configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _read_schema_file(path: Path) -> Any:
    if not path.exists():
        raise CliError(f"Schema file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CliError(f"Invalid schema file {path}: {exc}") from exc


def _configure_logging() -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger = logging.getLogger("mongo_json_schema")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
