"""Naming conventions for generated identifiers.

The generator never decides casing on its own: every identifier goes through
a converter built by :func:`convert_factory`. A converter takes a name (or a
graphql-core node carrying one) plus an optional prefix and suffix.
"""

import re
from typing import Callable, Protocol

from graphql import Node

from .errors import ConfigError


class Converter(Protocol):
    """Callable turning a schema name into a target identifier."""

    def __call__(self, node: "Node | str", prefix: str = "", suffix: str = "") -> str:
        ...


def snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    return "".join(word[:1].upper() + word[1:] for word in snake_case(name).split("_"))


def camel_case(name: str) -> str:
    """Convert to camelCase."""
    pascal = pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def constant_case(name: str) -> str:
    """Convert to CONSTANT_CASE."""
    return snake_case(name).upper()


def keep(name: str) -> str:
    return name


NAMING_CONVENTIONS: dict[str, Callable[[str], str]] = {
    "keep": keep,
    "pascalCase": pascal_case,
    "camelCase": camel_case,
    "snakeCase": snake_case,
    "constantCase": constant_case,
    "upperCase": str.upper,
    "lowerCase": str.lower,
}


def node_name(node: "Node | str") -> str:
    """Return the plain name of a node, or the string itself."""
    if isinstance(node, str):
        return node
    name = getattr(node, "name", None)
    if name is None:
        raise TypeError(f"Cannot derive a name from {type(node).__name__}")
    return name if isinstance(name, str) else name.value


def convert_factory(naming_convention: str | Callable[[str], str] = "keep") -> Converter:
    """Build a converter for a naming convention.

    Conventions may be given by name (``"pascalCase"``), in the
    graphql-codegen ``"change-case-all#pascalCase"`` spelling, or as a
    plain ``str -> str`` callable.
    """
    if callable(naming_convention):
        transform = naming_convention
    else:
        convention = naming_convention.rpartition("#")[2]
        if convention not in NAMING_CONVENTIONS:
            raise ConfigError(
                f"Unknown naming convention {naming_convention!r}; "
                f"expected one of {', '.join(NAMING_CONVENTIONS)}"
            )
        transform = NAMING_CONVENTIONS[convention]

    def convert(node: "Node | str", prefix: str = "", suffix: str = "") -> str:
        return f"{prefix}{transform(node_name(node))}{suffix}"

    return convert
