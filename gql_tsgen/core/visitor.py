"""Fold of a schema document into TypeScript declarations.

The document is walked once, depth first. Every node is rendered from its
already folded children, the facts of its own original node (for example
whether its type was non-null) and the ancestor chain. Nothing is visited
twice, so reference cycles between object types are harmless.
"""

import logging

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    GraphQLSchema,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
)

from .ancestors import AncestorChain, Scope
from .arguments import build_arguments_blocks
from .config import PluginConfig
from .declaration import DeclarationBlock, get_node_comment, indent
from .fragments import MemberFragment
from .nullability import TypeFragment, list_of, non_null, nullable
from .oneof import check_one_of_member, expand_one_of, is_one_of_input_object
from .resolver import TypeReferenceResolver
from .symbols import SymbolTables

logger = logging.getLogger(__name__)

DIRECTIVE_MAPPINGS_TYPE = "DirectiveArgumentAndInputFieldMappings"


def _description(node: TypeDefinitionNode) -> str | None:
    return node.description.value if node.description else None


def _quote(value: str | int) -> str:
    if isinstance(value, int):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class SchemaFolder:
    """Folds the definitions of one schema document.

    A folder holds the state of a single run and is not shared between runs.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        config: PluginConfig,
        symbols: SymbolTables,
        resolver: TypeReferenceResolver,
    ):
        self.schema = schema
        self.config = config
        self.symbols = symbols
        self.resolver = resolver
        self.ancestors = AncestorChain()

    def fold(self, document: DocumentNode) -> list[str]:
        """Render every definition; definitions without output are dropped."""
        definitions = [self.fold_definition(node) for node in document.definitions]
        rendered = [definition for definition in definitions if definition]
        logger.debug("Folded %d of %d definitions", len(rendered), len(definitions))
        return rendered

    def fold_definition(self, node) -> str:
        if isinstance(node, ObjectTypeDefinitionNode):
            return self.leave_object(node)
        if isinstance(node, InterfaceTypeDefinitionNode):
            return self.leave_interface(node)
        if isinstance(node, UnionTypeDefinitionNode):
            return self.leave_union(node)
        if isinstance(node, EnumTypeDefinitionNode):
            return self.leave_enum(node)
        if isinstance(node, InputObjectTypeDefinitionNode):
            return self.leave_input_object(node)
        if isinstance(node, (ScalarTypeDefinitionNode, DirectiveDefinitionNode, SchemaDefinitionNode)):
            return ""
        logger.debug("Skipping %s", type(node).__name__)
        return ""

    @property
    def _readonly(self) -> bool:
        return self.config.immutable_types

    @property
    def _suppress_output_types(self) -> bool:
        return self.config.only_operation_types or self.config.only_enums

    def _block(self) -> DeclarationBlock:
        return DeclarationBlock(ignore_export=self.config.no_export).export()

    # Types

    def fold_type(self, node: TypeNode) -> TypeFragment:
        input_context = self.ancestors.in_input_context()
        if isinstance(node, NonNullTypeNode):
            return non_null(self.fold_type(node.type))
        if isinstance(node, ListTypeNode):
            return list_of(self.fold_type(node.type), input_context)
        if isinstance(node, NamedTypeNode):
            return nullable(self._named_type(node), input_context)
        raise TypeError(f"Unexpected type node {type(node).__name__}")

    def _named_type(self, node: NamedTypeNode) -> str:
        type_name = self.resolver.resolve(node)
        if (
            self.config.wrap_field_definitions
            and not self.ancestors.in_input_context()
            and not self.ancestors.has(Scope.INPUT_VALUE)
        ):
            return f"FieldWrapper<{type_name}>"
        return type_name

    # Members

    def fold_field(self, node: FieldDefinitionNode) -> MemberFragment:
        name = node.name.value
        with self.ancestors.enter(Scope.FIELD, name):
            arguments = tuple(self.fold_input_value(argument) for argument in node.arguments or ())
            type_fragment = self.fold_type(node.type)

        is_non_null = isinstance(node.type, NonNullTypeNode)
        type_override = None
        if self.config.wrap_entire_field_definitions:
            type_override = f"EntireFieldWrapper<{type_fragment.render()}>"

        return MemberFragment(
            name=name,
            type=type_fragment,
            optional=not self.config.avoid_optionals.field and not is_non_null,
            non_null=is_non_null,
            comment=get_node_comment(node),
            type_override=type_override,
            arguments=arguments,
        )

    def fold_input_value(self, node: InputValueDefinitionNode) -> MemberFragment:
        name = node.name.value
        with self.ancestors.enter(Scope.INPUT_VALUE, name):
            type_fragment = self.fold_type(node.type)

        avoid = self.config.avoid_optionals
        is_non_null = isinstance(node.type, NonNullTypeNode)
        has_default = node.default_value is not None
        member = MemberFragment(
            name=name,
            type=type_fragment,
            optional=not avoid.input_value
            and (not is_non_null or (not avoid.default_value and has_default)),
            non_null=is_non_null,
            comment=get_node_comment(node),
            type_override=self._directive_override(node),
        )

        definition = self.ancestors.nearest_definition()
        if (
            definition is not None
            and definition.scope is Scope.INPUT_OBJECT
            and is_one_of_input_object(self.schema.get_type(definition.name))
        ):
            check_one_of_member(definition.name, member)
        return member

    def _directive_override(self, node: InputValueDefinitionNode) -> str | None:
        """The last directive with a configured mapping overrides the type."""
        mappings = self.symbols.directive_mappings
        if not mappings:
            return None
        for directive in reversed(node.directives or ()):
            directive_name = directive.name.value
            if directive_name in mappings:
                return f"{DIRECTIVE_MAPPINGS_TYPE}['{directive_name}']"
        return None

    def _member_line(self, member: MemberFragment) -> str:
        return member.comment + indent(member.signature(self._readonly))

    # Definitions

    def leave_object(self, node: ObjectTypeDefinitionNode) -> str:
        type_name = node.name.value
        with self.ancestors.enter(Scope.OBJECT, type_name):
            fields = [self.fold_field(field) for field in node.fields or ()]
        if self._suppress_output_types:
            return ""

        lines = []
        if not self.config.skip_typename:
            typename = "__typename" if self.config.non_optional_typename else "__typename?"
            readonly = "readonly " if self._readonly else ""
            lines.append(indent(f"{readonly}{typename}: '{type_name}';"))
        lines.extend(self._member_line(field) for field in fields)

        interfaces = [self.resolver.convert_name(i) for i in node.interfaces or ()]
        block = (
            self._block()
            .as_kind("type")
            .with_name(self.resolver.convert_name(node))
            .with_comment(_description(node))
            .with_interfaces_and_fields(interfaces, lines)
        )
        arguments = build_arguments_blocks(type_name, fields, self.resolver, self.config)
        return "\n".join([block.string, *arguments])

    def leave_interface(self, node: InterfaceTypeDefinitionNode) -> str:
        type_name = node.name.value
        with self.ancestors.enter(Scope.INTERFACE, type_name):
            fields = [self.fold_field(field) for field in node.fields or ()]
        if self._suppress_output_types:
            return ""

        lines = [self._member_line(field) for field in fields]
        interfaces = [self.resolver.convert_name(i) for i in node.interfaces or ()]
        block = (
            self._block()
            .with_name(self.resolver.convert_name(node))
            .with_comment(_description(node))
        )
        if interfaces:
            # An interface cannot be an intersection, so inherited ones render as an alias
            block.as_kind("type").with_interfaces_and_fields(interfaces, lines)
        else:
            block.as_kind("interface").with_block("\n".join(lines))

        arguments = build_arguments_blocks(type_name, fields, self.resolver, self.config)
        return "\n".join([block.string, *arguments])

    def leave_union(self, node: UnionTypeDefinitionNode) -> str:
        with self.ancestors.enter(Scope.UNION, node.name.value):
            members = [self.resolver.resolve_union_member(member) for member in node.types or ()]
        if self._suppress_output_types:
            return ""

        if self.config.future_proof_unions:
            readonly = "readonly " if self._readonly else ""
            members.append(f'{{ {readonly}__typename?: "%other" }}')

        return (
            self._block()
            .as_kind("type")
            .with_name(self.resolver.convert_name(node))
            .with_comment(_description(node))
            .with_content(" | ".join(members))
            .string
        )

    def leave_input_object(self, node: InputObjectTypeDefinitionNode) -> str:
        type_name = node.name.value
        with self.ancestors.enter(Scope.INPUT_OBJECT, type_name):
            fields = [self.fold_input_value(field) for field in node.fields or ()]
        if self.config.only_enums:
            return ""

        block = (
            self._block()
            .as_kind("type")
            .with_name(self.resolver.convert_name(node))
            .with_comment(_description(node))
        )
        if is_one_of_input_object(self.schema.get_type(type_name), node):
            block.with_content(expand_one_of(type_name, fields, self._readonly))
        else:
            block.with_block("\n".join(self._member_line(field) for field in fields))
        return block.string

    def leave_enum(self, node: EnumTypeDefinitionNode) -> str:
        enum_name = node.name.value
        with self.ancestors.enter(Scope.ENUM, enum_name):
            values = [
                (value.name.value, get_node_comment(value)) for value in node.values or ()
            ]

        identifier = self.resolver.enum_name(node)
        mapping = self.symbols.enum_values.get(enum_name)
        if mapping is not None and mapping.is_external:
            if self.config.no_export:
                return ""
            type_keyword = "type " if self.config.use_type_imports else ""
            return f"export {type_keyword}{{ {mapping.type_identifier} }};\n"

        mapped_values = mapping.mapped_values if mapping is not None else None

        def enum_value(value_name: str) -> str | int:
            if mapped_values and value_name in mapped_values:
                return mapped_values[value_name]
            return value_name

        block = self._block().with_name(identifier).with_comment(_description(node))
        if self.config.enums_as_types:
            arms = [comment + indent(f"| {_quote(enum_value(name))}") for name, comment in values]
            return block.as_kind("type").with_content("\n" + "\n".join(arms)).string

        members = [
            comment + indent(f"{self.resolver.convert(name)} = {_quote(enum_value(name))},")
            for name, comment in values
        ]
        return block.as_kind("enum").with_block("\n".join(members)).string
