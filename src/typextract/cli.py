"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from typextract.configuration import (
    DEFAULT_CONFIG_FILENAME,
    OUTPUT_FORMATS,
    ConfigurationError,
    OutputSettings,
    SchemaConfig,
    load_configuration,
    load_schema_file,
    write_placeholder_configuration,
)
from typextract.results_writing import render_type_model, write_type_model
from typextract.schema_management import SchemaError, extract_types, load_schema_node
from typextract.type_extraction import extract_record_types

logger = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="typextract")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Derive record type models from JSON schema documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="extract")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON extraction configuration file",
)
@click.option(
    "--schema",
    "schema_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a JSON schema file (instead of --config)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the type model to this file instead of stdout",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (defaults to the configured format, else json)",
)
@click.option(
    "--allow-partial",
    is_flag=True,
    default=False,
    help="Emit the partial type model even when some types failed to resolve.",
)
def extract(
    config_path: str | None,
    schema_path: str | None,
    output_path: str | None,
    output_format: str | None,
    allow_partial: bool,
) -> None:
    """Extract record types from a JSON schema."""
    schema_config, settings = _resolve_inputs(config_path, schema_path)
    output_format = output_format or settings.format
    allow_partial = allow_partial or settings.allow_partial

    try:
        types = extract_types(load_schema_node(schema_config))
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    logger.debug("Flattened schema into %d object nodes", len(types))
    result = extract_record_types(types)

    if result.error is not None and not allow_partial:
        raise CliError(f"Type extraction failed: {result.error}")

    if output_path:
        try:
            destination = write_type_model(result, output_path, output_format)
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(destination))
    else:
        click.echo(render_type_model(result, output_format), nl=False)

    if result.error is not None:
        raise CliError(f"Type extraction incomplete: {result.error}")


def _resolve_inputs(
    config_path: str | None, schema_path: str | None
) -> tuple[SchemaConfig, OutputSettings]:
    if bool(config_path) == bool(schema_path):
        raise CliError("Provide exactly one of --config or --schema.")
    try:
        if config_path:
            configuration = load_configuration(config_path)
            return configuration.schema, configuration.output
        return load_schema_file(str(schema_path)), OutputSettings()
    except (ConfigurationError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="typextract", standalone_mode=False)
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
