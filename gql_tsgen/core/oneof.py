"""Expansion of oneOf input objects.

An input object marked ``@oneOf`` accepts exactly one of its fields. It is
rendered as a union with one arm per field: the chosen field is required and
every other field is typed ``never``.

    input Pet @oneOf { cat: CatInput, dog: DogInput }

    export type Pet =
      | { cat: CatInput; dog?: never }
      | { dog: DogInput; cat?: never };
"""

from typing import Sequence

from graphql import GraphQLNamedType, InputObjectTypeDefinitionNode, is_input_object_type

from .declaration import indent
from .errors import SchemaConstructionError
from .fragments import MemberFragment


def is_one_of_input_object(
    schema_type: GraphQLNamedType | None,
    node: InputObjectTypeDefinitionNode | None = None,
) -> bool:
    """Check whether an input object is flagged oneOf.

    Newer graphql-core releases expose ``is_one_of`` on the type; otherwise
    the ``@oneOf`` directive on the definition node decides.
    """
    if schema_type is not None:
        if not is_input_object_type(schema_type):
            return False
        if getattr(schema_type, "is_one_of", False):
            return True
        node = node or schema_type.ast_node
    if node is None:
        return False
    return any(directive.name.value == "oneOf" for directive in node.directives or ())


def check_one_of_member(type_name: str, member: MemberFragment) -> None:
    if member.non_null:
        raise SchemaConstructionError(
            f"Field '{member.name}' on the oneOf input object type '{type_name}' "
            "can not be non-nullable. It seems like the schema was not validated."
        )


def expand_variant(member: MemberFragment, members: Sequence[MemberFragment], readonly: bool) -> str:
    """Render the arm of the union in which ``member`` is the one field set."""
    prefix = "readonly " if readonly else ""
    parts = [member.signature(readonly, exact=True).rstrip(";")]
    parts.extend(f"{prefix}{other.name}?: never" for other in members if other.name != member.name)
    return "{ " + "; ".join(parts) + " }"


def expand_one_of(type_name: str, members: Sequence[MemberFragment], readonly: bool = False) -> str:
    """Render the union body of a oneOf input object, one arm per field.

    Raises:
        SchemaConstructionError: if any field is non-null
    """
    for member in members:
        check_one_of_member(type_name, member)
    if not members:
        return "never"
    arms = [
        member.comment + indent(f"| {expand_variant(member, members, readonly)}")
        for member in members
    ]
    return "\n" + "\n".join(arms)
