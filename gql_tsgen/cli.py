"""Command-line interface for gql-tsgen."""

import logging
import tarfile
import tempfile
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click
from graphql import GraphQLError

from .core.config import PluginConfig, load_config
from .core.errors import CodegenError
from .core.generator import CodeGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.parser import SchemaParser

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


@contextmanager
def schema_directory(schema_path: Path) -> Iterator[Path]:
    """Yield a path to parse, extracting archives to a temporary directory."""
    if not (schema_path.is_file() and schema_path.name.lower().endswith(ARCHIVE_SUFFIXES)):
        yield schema_path
        return

    with tempfile.TemporaryDirectory() as temp_dir:
        if schema_path.name.lower().endswith(".zip"):
            with zipfile.ZipFile(schema_path, "r") as archive:
                archive.extractall(temp_dir)
        else:
            with tarfile.open(schema_path, "r:gz") as archive:
                archive.extractall(temp_dir)
        yield Path(temp_dir)


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL schema to TypeScript type generator.

    Generate TypeScript declarations that mirror a GraphQL schema.
    """


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated declarations (e.g., types.ts).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file with plugin options (camelCase or snake_case keys).",
)
@click.option(
    "--header",
    help="Text to put at the top of the generated file.",
)
@click.option(
    "--exclude-prefix",
    help="Skip type definitions whose name starts with this prefix.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in module.ts.j2.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    config_path: str | None,
    header: str | None,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate TypeScript types from a GraphQL schema.

    Examples:

        gql-tsgen generate --schema ./schema --output ./src/types.ts

        gql-tsgen generate -s ./schema.graphql -o ./types.ts -c codegen.json

        gql-tsgen generate -s ./schema.tgz -o ./types.ts --header "/* eslint-disable */"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    try:
        config = load_config(config_path) if config_path else PluginConfig()

        hooks = HookRunner()
        if exclude_prefix:
            hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
        if header:
            hooks.add_post_hook(AddHeaderHook(header))

        with schema_directory(schema_path) as actual_schema_path:
            if actual_schema_path != schema_path:
                click.echo(f"Extracted archive {schema_path.name}")
            if verbose:
                click.echo(f"Schema: {actual_schema_path}")
                click.echo(f"Output: {output_path}")

            click.echo("Parsing schema...")
            loaded = SchemaParser(str(actual_schema_path)).parse_all()

        if verbose:
            click.echo(f"  Types: {len(loaded.ast.definitions)}")

        click.echo("Generating types...")
        generator = CodeGenerator(
            loaded, config, str(output_path), template_dir=template_dir, hooks=hooks
        )
        content = generator.generate()
    except (CodegenError, GraphQLError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Lines: {len(content.splitlines())}")
    click.echo(f"Done! Generated types in {output_path}")


if __name__ == "__main__":
    main()
