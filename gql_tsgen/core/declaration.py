"""Rendering of top-level TypeScript declarations and their comments."""

from typing import Sequence

from graphql import (
    DirectiveNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    InputValueDefinitionNode,
    StringValueNode,
)

DEFAULT_DEPRECATION_REASON = "Field no longer supported"

# Declaration kinds that are closed by a brace only, without a semicolon
_BLOCK_KINDS = {"interface", "enum", "namespace", "function"}


def indent(text: str, count: int = 1) -> str:
    return "  " * count + text


def transform_comment(comment: str | None, indent_level: int = 0) -> str:
    """Render text as a JSDoc comment, including the trailing newline."""
    if not comment:
        return ""
    comment = comment.replace("*/", "*\\/")
    lines = comment.split("\n")
    if len(lines) == 1:
        return indent(f"/** {lines[0]} */\n", indent_level)
    block = ["/**", *(f" * {line}" for line in lines), " */\n"]
    return "\n".join(indent(line, indent_level).rstrip(" ") for line in block)


def get_deprecation_reason(directive: DirectiveNode) -> str | None:
    """Return the reason of a ``@deprecated`` directive, or None for other directives."""
    if directive.name.value != "deprecated":
        return None
    for argument in directive.arguments or ():
        if argument.name.value == "reason" and isinstance(argument.value, StringValueNode):
            return argument.value.value
    return DEFAULT_DEPRECATION_REASON


def get_node_comment(
    node: FieldDefinitionNode | InputValueDefinitionNode | EnumValueDefinitionNode,
    indent_level: int = 1,
) -> str:
    """Comment for a member: its description plus a ``@deprecated`` line."""
    text = node.description.value if node.description else ""
    for directive in node.directives or ():
        reason = get_deprecation_reason(directive)
        if reason is not None:
            text = f"{text}\n@deprecated {reason}" if text else f"@deprecated {reason}"
            break
    return transform_comment(text, indent_level)


def merge_interfaces(interfaces: Sequence[str], has_other_fields: bool) -> str:
    """Intersect interface names, leaving a trailing ``&`` only when a block follows."""
    merged = " & ".join(interfaces)
    if interfaces and has_other_fields:
        merged += " & "
    return merged


class DeclarationBlock:
    """Builder for one top-level declaration.

    Example:
        DeclarationBlock().export().as_kind("type").with_name("User") \\
            .with_block("  id: string;").string
        # export type User = {
        #   id: string;
        # };
    """

    def __init__(self, ignore_export: bool = False):
        self.ignore_export = ignore_export
        self._export = False
        self._kind: str | None = None
        self._name: str | None = None
        self._comment = ""
        self._content = ""
        self._block = ""

    def export(self, export: bool = True) -> "DeclarationBlock":
        if not self.ignore_export:
            self._export = export
        return self

    def as_kind(self, kind: str) -> "DeclarationBlock":
        self._kind = kind
        return self

    def with_name(self, name: str) -> "DeclarationBlock":
        self._name = name
        return self

    def with_comment(self, comment: str | None) -> "DeclarationBlock":
        self._comment = transform_comment(comment, 0)
        return self

    def with_content(self, content: str) -> "DeclarationBlock":
        self._content = content
        return self

    def with_block(self, block: str) -> "DeclarationBlock":
        self._block = block
        return self

    def with_interfaces_and_fields(
        self, interfaces: Sequence[str], fields: Sequence[str]
    ) -> "DeclarationBlock":
        """Body of ``A & B & { fields }``; the block is omitted when there are no fields."""
        return self.with_content(merge_interfaces(interfaces, bool(fields))).with_block(
            "\n".join(fields)
        )

    @property
    def string(self) -> str:
        result = "export " if self._export else ""
        if self._kind:
            name = f"{self._name} " if self._name else ""
            assignment = "= " if self._kind == "type" else ""
            result += f"{self._kind} {name}{assignment}"

        if self._content.startswith("\n"):
            result = result.rstrip(" ")

        if self._block:
            result += self._content + "\n".join(["{", self._block, "}"])
        elif self._content:
            result += self._content
        elif self._kind:
            result += "{}"

        terminator = "" if self._kind in _BLOCK_KINDS else ";"
        return f"{self._comment}{result}{terminator}\n"

    def __str__(self) -> str:
        return self.string
