"""Scalar mapping for TypeScript code generation.

Every scalar known to the schema is mapped to a TypeScript type expression.
The five built-in GraphQL scalars have fixed defaults; custom scalars use the
``scalars`` option and fall back to ``defaultScalarType``.

Example:
    config = PluginConfig(scalars={"DateTime": "Date", "Money": "./money#Money"})
    scalars = build_scalars_map(schema, config)
    scalars["DateTime"].type      # "Date"
    scalars["Money"].is_external  # True
"""

import logging

from graphql import GraphQLSchema, is_scalar_type

from .config import PluginConfig
from .errors import ConfigError
from .mappers import ParsedMapper, build_type_import, parse_mapper

logger = logging.getLogger(__name__)

DEFAULT_SCALARS: dict[str, str] = {
    "ID": "string",
    "String": "string",
    "Boolean": "boolean",
    "Int": "number",
    "Float": "number",
}


def build_scalars_map(schema: GraphQLSchema | None, config: PluginConfig) -> dict[str, ParsedMapper]:
    """Map every scalar name to the TypeScript type it renders as.

    Built-in scalars come first, followed by the schema's custom scalars in
    schema order. Without a schema, only the configured scalars are added.
    """
    result = {}
    for name, value in DEFAULT_SCALARS.items():
        mapper = config.scalars.get(name)
        result[name] = parse_mapper(mapper, name) if mapper else ParsedMapper(type=value)

    if schema is None:
        for name, mapper in config.scalars.items():
            result.setdefault(name, parse_mapper(mapper, name))
        return result

    for name, named_type in schema.type_map.items():
        if not is_scalar_type(named_type) or name in DEFAULT_SCALARS:
            continue
        if name in config.scalars:
            result[name] = parse_mapper(config.scalars[name], name)
        elif config.strict_scalars:
            raise ConfigError(
                f"Unknown scalar type {name}. Please override it using the \"scalars\" "
                f"configuration field!"
            )
        else:
            logger.debug("Scalar %s has no mapping, using %s", name, config.default_scalar_type)
            result[name] = ParsedMapper(type=config.default_scalar_type)

    return result


def get_scalars_imports(scalars: dict[str, ParsedMapper], use_type_imports: bool = False) -> list[str]:
    """Return import statements for externally sourced scalars."""
    return [
        build_type_import(mapper.import_name, mapper.source, mapper.default, use_type_imports)
        for mapper in scalars.values()
        if mapper.is_external
    ]
