"""Symbol tables shared by every step of one generation run.

The tables are built once from the configuration and the schema, then only
read. They are passed explicitly to the resolver, the fold engine and the
assembly step.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from graphql import GraphQLEnumType, GraphQLSchema, is_enum_type

from .config import PluginConfig
from .errors import ConfigError
from .mappers import ParsedMapper, build_type_import, parse_mapper
from .naming import Converter, convert_factory
from .scalars import build_scalars_map


@dataclass(frozen=True)
class EnumValueMapping:
    """How one schema enum maps to TypeScript."""
    type_identifier: str
    source_file: str | None = None
    source_identifier: str | None = None
    import_identifier: str | None = None
    is_default: bool = False
    mapped_values: Mapping[str, str | int] | None = None

    @property
    def is_external(self) -> bool:
        return self.source_file is not None

    @property
    def needs_namespace_import(self) -> bool:
        """True when the enum lives inside a namespace of the source module."""
        return self.import_identifier != self.source_identifier


@dataclass(frozen=True)
class SymbolTables:
    """Read-only lookups from schema names to TypeScript identifiers."""
    scalars: Mapping[str, ParsedMapper] = field(default_factory=dict)
    enum_values: Mapping[str, EnumValueMapping] = field(default_factory=dict)
    directive_mappings: Mapping[str, ParsedMapper] = field(default_factory=dict)

    @classmethod
    def build(
        cls, schema: GraphQLSchema, config: PluginConfig, convert: Converter | None = None
    ) -> "SymbolTables":
        return cls(
            scalars=MappingProxyType(build_scalars_map(schema, config)),
            enum_values=MappingProxyType(parse_enum_values(schema, config, convert)),
            directive_mappings=MappingProxyType(
                parse_directive_mappings(
                    config.directive_argument_and_input_field_mappings,
                    config.directive_argument_and_input_field_mapping_type_suffix,
                )
            ),
        )


def _schema_enums(schema: GraphQLSchema) -> dict[str, GraphQLEnumType]:
    return {
        name: named_type
        for name, named_type in schema.type_map.items()
        if is_enum_type(named_type) and not name.startswith("__")
    }


def enum_identifier(name: str, config: PluginConfig, convert: Converter) -> str:
    """The identifier an enum is declared and referenced under."""
    return convert(
        name,
        prefix=config.types_prefix if config.enum_prefix else "",
        suffix=config.types_suffix if config.enum_suffix else "",
    )


def parse_enum_values(
    schema: GraphQLSchema, config: PluginConfig, convert: Converter | None = None
) -> dict[str, EnumValueMapping]:
    """Build the enum value map from the ``enumValues`` option.

    ``enumValues`` is either a module path that every enum is imported from,
    or a mapping from enum name to an external pointer or to a value map.
    Internal enum values declared on the schema are merged into value maps
    unless ``ignoreEnumValuesFromSchema`` is set.
    """
    enums = _schema_enums(schema)
    option = config.enum_values
    convert = convert or convert_factory(config.naming_convention)

    if isinstance(option, str):
        return {
            name: EnumValueMapping(
                type_identifier=enum_identifier(name, config, convert),
                source_file=option,
                source_identifier=name,
                import_identifier=name,
            )
            for name in enums
        }

    pointers: dict[str, str | dict[str, str | int]] = {
        name: (dict(value) if isinstance(value, dict) else value)
        for name, value in (option or {}).items()
    }

    invalid = [name for name in pointers if name not in enums]
    if invalid:
        raise ConfigError(
            "Invalid 'enumValues' mapping! The following types do not exist in "
            f"your GraphQL schema: {', '.join(invalid)}"
        )

    if not config.ignore_enum_values_from_schema:
        for enum_name, enum_type in enums.items():
            for value_name, enum_value in enum_type.values.items():
                value = enum_value.value
                if value is None or value == value_name:
                    continue
                pointer = pointers.setdefault(enum_name, {})
                if isinstance(pointer, dict):
                    pointer.setdefault(value_name, value)

    result = {}
    for enum_name, pointer in pointers.items():
        if isinstance(pointer, str):
            mapper = parse_mapper(pointer, enum_name)
            source_identifier = mapper.type
            import_identifier = mapper.import_name if mapper.is_external else None
            if import_identifier and " as " in import_identifier:
                # Imported under the generated identifier instead of the alias
                source_identifier = import_identifier = import_identifier.split(" as ")[0].strip()
            result[enum_name] = EnumValueMapping(
                type_identifier=enum_identifier(enum_name, config, convert),
                source_file=mapper.source if mapper.is_external else None,
                source_identifier=source_identifier,
                import_identifier=import_identifier,
                is_default=mapper.is_external and mapper.default,
            )
        else:
            result[enum_name] = EnumValueMapping(
                type_identifier=enum_identifier(enum_name, config, convert),
                mapped_values=MappingProxyType(pointer),
            )
    return result


def parse_directive_mappings(
    mappings: Mapping[str, str], type_suffix: str | None = None
) -> dict[str, ParsedMapper]:
    """Parse ``directiveArgumentAndInputFieldMappings`` into mappers."""
    return {
        directive: parse_mapper(mapper, directive, type_suffix)
        for directive, mapper in mappings.items()
    }


def get_enum_imports(enum_values: Mapping[str, EnumValueMapping], use_type_imports: bool = False) -> list[str]:
    """Return import statements for enums mapped to external modules."""
    type_keyword = "type " if use_type_imports else ""
    statements = []
    for mapping in enum_values.values():
        if not mapping.is_external:
            continue
        if mapping.is_default:
            statements.append(
                build_type_import(mapping.type_identifier, mapping.source_file, True, use_type_imports)
            )
        elif mapping.needs_namespace_import:
            namespace = mapping.import_identifier or mapping.source_identifier
            statements.append(f"import {type_keyword}{namespace} from '{mapping.source_file}';")
            statements.append(f"import {mapping.type_identifier} = {mapping.source_identifier};")
        elif mapping.source_identifier != mapping.type_identifier:
            statements.append(
                f"import {type_keyword}{{ {mapping.source_identifier} as {mapping.type_identifier} }} "
                f"from '{mapping.source_file}';"
            )
        else:
            statements.append(
                build_type_import(mapping.type_identifier, mapping.source_file, False, use_type_imports)
            )
    return statements


def get_directive_imports(
    directive_mappings: Mapping[str, ParsedMapper], use_type_imports: bool = False
) -> list[str]:
    """Return import statements for externally sourced directive override types."""
    return [
        build_type_import(mapper.import_name, mapper.source, mapper.default, use_type_imports)
        for mapper in directive_mappings.values()
        if mapper.is_external
    ]
