"""Standalone argument types for fields that declare arguments.

    type Query { user(id: ID!): User }

    export type QueryuserArgs = {
      id: Scalars['ID'];
    };
"""

from typing import Sequence

from .config import PluginConfig
from .declaration import DeclarationBlock, indent
from .fragments import MemberFragment
from .resolver import TypeReferenceResolver


def arguments_type_name(
    type_name: str, field_name: str, resolver: TypeReferenceResolver, config: PluginConfig
) -> str:
    infix = "_" if config.add_underscore_to_args_type else ""
    field_part = resolver.convert_name(field_name, use_types_prefix=False, use_types_suffix=False)
    return resolver.convert_name(f"{type_name}{infix}{field_part}Args")


def build_arguments_blocks(
    type_name: str,
    fields: Sequence[MemberFragment],
    resolver: TypeReferenceResolver,
    config: PluginConfig,
) -> list[str]:
    """One ``<Type><field>Args`` declaration per field with arguments."""
    if config.only_enums:
        return []

    blocks = []
    for field in fields:
        if not field.arguments:
            continue
        lines = [
            argument.comment + indent(argument.signature(config.immutable_types))
            for argument in field.arguments
        ]
        block = (
            DeclarationBlock(ignore_export=config.no_export)
            .export()
            .as_kind("type")
            .with_name(arguments_type_name(type_name, field.name, resolver, config))
            .with_block("\n".join(lines))
        )
        blocks.append(block.string)
    return blocks
