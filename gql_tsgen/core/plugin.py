"""TypeScript types plugin: schema in, declarations out.

Ties the pieces together for one run: builds the symbol tables, folds the
schema document, and assembles the output unit with the shared helper types
and the import statements external mappings need.

Example:
    loaded = load_schema_from_source(sdl)
    output = plugin(loaded.schema, {"scalars": {"DateTime": "Date"}}, document=loaded.ast)
    print("\\n".join(output.prepend))
    print(output.content)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from graphql import DocumentNode, GraphQLSchema

from .config import PluginConfig
from .declaration import DeclarationBlock, indent, transform_comment
from .naming import Converter, convert_factory
from .parser import transform_schema_ast
from .resolver import TypeReferenceResolver
from .scalars import get_scalars_imports
from .symbols import SymbolTables, get_directive_imports, get_enum_imports
from .visitor import DIRECTIVE_MAPPINGS_TYPE, SchemaFolder

logger = logging.getLogger(__name__)

SCALARS_COMMENT = "All built-in and custom scalars, mapped to their actual values"

EXACT_SIGNATURE = "type Exact<T extends { [key: string]: unknown }> = { [K in keyof T]: T[K] };"
MAKE_OPTIONAL_SIGNATURE = (
    "type MakeOptional<T, K extends keyof T> = Omit<T, K> & { [SubKey in K]?: Maybe<T[SubKey]> };"
)
MAKE_MAYBE_SIGNATURE = (
    "type MakeMaybe<T, K extends keyof T> = Omit<T, K> & { [SubKey in K]: Maybe<T[SubKey]> };"
)


@dataclass
class PluginOutput:
    """Statements to put at the top of the module, and the module body."""
    prepend: list[str] = field(default_factory=list)
    content: str = ""


def get_wrapper_definitions(config: PluginConfig) -> list[str]:
    """Helper types every generated module relies on."""
    if config.only_enums:
        return []
    export = "" if config.no_export else "export "

    definitions = [
        f"{export}type Maybe<T> = {config.maybe_value};",
        f"{export}type InputMaybe<T> = {config.input_maybe_value};",
        f"{export}{EXACT_SIGNATURE}",
        f"{export}{MAKE_OPTIONAL_SIGNATURE}",
        f"{export}{MAKE_MAYBE_SIGNATURE}",
    ]
    if config.wrap_field_definitions:
        definitions.append(f"{export}type FieldWrapper<T> = {config.field_wrapper_value};")
    if config.wrap_entire_field_definitions:
        definitions.append(
            f"{export}type EntireFieldWrapper<T> = {config.entire_field_wrapper_value};"
        )
    return definitions


def build_scalars_declaration(
    schema: GraphQLSchema, symbols: SymbolTables, config: PluginConfig
) -> str:
    """The ``Scalars`` container every scalar reference points into."""
    entries = []
    for name, mapper in symbols.scalars.items():
        scalar_type = schema.get_type(name)
        comment = ""
        if scalar_type is not None and scalar_type.ast_node and scalar_type.description:
            comment = transform_comment(scalar_type.description, 1)
        entries.append(comment + indent(f"{name}: {mapper.type};"))

    return (
        DeclarationBlock(ignore_export=config.no_export)
        .export()
        .as_kind("type")
        .with_name("Scalars")
        .with_comment(SCALARS_COMMENT)
        .with_block("\n".join(entries))
        .string
    )


def build_directives_declaration(schema: GraphQLSchema, symbols: SymbolTables) -> str:
    """Container of directive override types, or an empty string without mappings."""
    if not symbols.directive_mappings:
        return ""

    entries = []
    for name, mapper in symbols.directive_mappings.items():
        directive = schema.get_directive(name)
        comment = ""
        if directive is not None and directive.ast_node and directive.description:
            comment = transform_comment(directive.description, 1)
        entries.append(comment + indent(f"{name}: {mapper.type};"))

    block = DeclarationBlock().as_kind("type").with_name(DIRECTIVE_MAPPINGS_TYPE)
    return "// Type overrides using directives\n" + block.with_block("\n".join(entries)).string


def plugin(
    schema: GraphQLSchema,
    config: PluginConfig | Mapping[str, Any] | None = None,
    *,
    document: DocumentNode | None = None,
    convert: Converter | None = None,
    introspection_definitions: Sequence[str] = (),
) -> PluginOutput:
    """Generate TypeScript declarations for a schema.

    Args:
        schema: The validated schema
        config: Plugin options, as a PluginConfig or a plain mapping
        document: The transformed schema document to fold (see
                  transform_schema_ast); built from the schema when omitted
        convert: Naming function; defaults to the configured naming convention
        introspection_definitions: Already rendered declarations appended
                                   to the content unchanged

    Raises:
        SchemaConstructionError: if the schema cannot be rendered
        ConfigError: if the configuration does not fit the schema
    """
    config = PluginConfig.coerce(config)
    ast = document if document is not None else transform_schema_ast(schema)
    convert = convert or convert_factory(config.naming_convention)
    symbols = SymbolTables.build(schema, config, convert)
    resolver = TypeReferenceResolver(schema, symbols.scalars, convert, config)

    definitions = SchemaFolder(schema, config, symbols, resolver).fold(ast)
    logger.debug(
        "Generated %d declarations (%d scalars, %d enum mappings, %d directive mappings)",
        len(definitions),
        len(symbols.scalars),
        len(symbols.enum_values),
        len(symbols.directive_mappings),
    )

    prepend = [
        *get_enum_imports(symbols.enum_values, config.use_type_imports),
        *get_directive_imports(symbols.directive_mappings, config.use_type_imports),
        *get_scalars_imports(symbols.scalars, config.use_type_imports),
        *get_wrapper_definitions(config),
    ]
    content = [
        build_scalars_declaration(schema, symbols, config),
        build_directives_declaration(schema, symbols),
        *definitions,
        *introspection_definitions,
    ]
    return PluginOutput(
        prepend=[statement for statement in prepend if statement],
        content="\n".join(part for part in content if part),
    )
