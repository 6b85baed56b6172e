"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from descriptor_embedder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from descriptor_embedder.generation_run import (
    GenerationRequest,
    GenerationRunError,
    describe_outcome,
    execute_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="java-descriptor-embedder")
def cli() -> None:
    """Embed compiled schema descriptors into generated Java holder classes."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration holding the default options."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--descriptor-set",
    "descriptor_set_path",
    required=True,
    type=click.Path(path_type=str),
    help="FileDescriptorSet written by protoc --include_imports --descriptor_set_out",
)
@click.option(
    "--file",
    "file_names",
    multiple=True,
    help="Schema file to generate a holder for (repeatable; default: files nothing imports)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to a YAML/JSON generator configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Directory receiving the generated Java sources",
)
@click.option("--verbose", is_flag=True, default=False, help="Log every generated file.")
def generate(
    descriptor_set_path: str,
    file_names: tuple[str, ...],
    config_path: str | None,
    output_dir: str,
    verbose: bool,
) -> None:
    """Generate descriptor holder classes for schema files of a descriptor set."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        outcome = execute_generation_run(
            GenerationRequest(
                descriptor_set_path=descriptor_set_path,
                output_dir=output_dir,
                file_names=tuple(file_names),
                config_path=config_path,
            )
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    for path in describe_outcome(outcome):
        click.echo(str(path))


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
