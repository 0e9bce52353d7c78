"""Parsing of type mapper strings.

A mapper is either an inline TypeScript type expression (``"Date"``,
``"string | number"``) or a pointer to an external module in the form
``"path#Identifier"``. External pointers support a few variants:

    ./scalars#DateTime          named import
    ./scalars#default           default import, named after the schema type
    ./scalars#DateTime as Dt    renamed import
    ./enums#Namespace.Nested    namespace import of a nested identifier
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedMapper:
    """A mapper string resolved into the type to emit and how to import it."""
    type: str
    is_external: bool = False
    source: str | None = None
    import_name: str | None = None
    default: bool = False


def is_external_mapper(value: str) -> bool:
    return "#" in value


def parse_mapper(mapper: str, gql_name: str, suffix: str | None = None) -> ParsedMapper:
    """Parse a mapper string configured for the schema name ``gql_name``.

    Args:
        mapper: The configured value, e.g. ``"./types#Money"``
        gql_name: The schema name the mapper is configured for
        suffix: Optional suffix appended to imported identifiers to avoid
                clashes with generated names

    Returns:
        The parsed mapper
    """
    if not is_external_mapper(mapper):
        return ParsedMapper(type=mapper)

    source, _, identifier = mapper.partition("#")
    identifier = identifier.strip()

    if identifier == "default":
        type_name = f"{gql_name}{suffix or ''}"
        return ParsedMapper(
            type=type_name, is_external=True, source=source, import_name=type_name, default=True
        )

    if " as " in identifier:
        imported, _, alias = identifier.partition(" as ")
        alias = alias.strip()
        return ParsedMapper(
            type=alias,
            is_external=True,
            source=source,
            import_name=f"{imported.strip()} as {alias}",
        )

    if "." in identifier:
        return ParsedMapper(
            type=identifier,
            is_external=True,
            source=source,
            import_name=identifier.split(".")[0],
        )

    if suffix:
        return ParsedMapper(
            type=f"{identifier}{suffix}",
            is_external=True,
            source=source,
            import_name=f"{identifier} as {identifier}{suffix}",
        )

    return ParsedMapper(type=identifier, is_external=True, source=source, import_name=identifier)


def build_type_import(
    identifier: str, source: str, as_default: bool = False, use_type_imports: bool = False
) -> str:
    """Render a TypeScript import statement for one identifier."""
    if as_default:
        if use_type_imports:
            return f"import type {{ default as {identifier} }} from '{source}';"
        return f"import {identifier} from '{source}';"
    type_keyword = " type" if use_type_imports else ""
    return f"import{type_keyword} {{ {identifier} }} from '{source}';"
