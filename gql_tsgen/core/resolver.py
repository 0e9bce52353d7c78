"""Resolution of named type references to TypeScript identifiers."""

from typing import Mapping, Protocol

from graphql import GraphQLNamedType, Node, is_enum_type

from .config import PluginConfig
from .mappers import ParsedMapper
from .naming import Converter, node_name


class TypeRegistry(Protocol):
    """Anything that can look a schema type up by name, e.g. GraphQLSchema."""

    def get_type(self, name: str) -> GraphQLNamedType | None:
        ...


def scalar_reference(name: str) -> str:
    return f"Scalars['{name}']"


class TypeReferenceResolver:
    """Turns schema type names into identifiers.

    Scalars always resolve into the generated ``Scalars`` container, so the
    scalar's real type is declared in exactly one place. Names that cannot be
    found anywhere still resolve to a converted identifier.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        scalars: Mapping[str, ParsedMapper],
        convert: Converter,
        config: PluginConfig,
    ):
        self.registry = registry
        self.scalars = scalars
        self.convert = convert
        self.config = config

    def convert_name(
        self,
        node: Node | str,
        use_types_prefix: bool = True,
        use_types_suffix: bool = True,
    ) -> str:
        """Apply the naming convention and the configured types prefix/suffix."""
        return self.convert(
            node,
            prefix=self.config.types_prefix if use_types_prefix else "",
            suffix=self.config.types_suffix if use_types_suffix else "",
        )

    def resolve(self, node: Node | str) -> str:
        name = node_name(node)
        if name in self.scalars:
            return scalar_reference(name)

        schema_type = self.registry.get_type(name)
        if schema_type is not None and is_enum_type(schema_type):
            return self.enum_name(name)

        return self.convert_name(name)

    def enum_name(self, node: Node | str) -> str:
        return self.convert_name(
            node,
            use_types_prefix=self.config.enum_prefix,
            use_types_suffix=self.config.enum_suffix,
        )

    def resolve_union_member(self, node: Node | str) -> str:
        name = node_name(node)
        if name in self.scalars:
            return scalar_reference(name)
        return self.convert_name(name)
