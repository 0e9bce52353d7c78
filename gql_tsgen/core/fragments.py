"""Folded members of object, interface and input object definitions."""

from dataclasses import dataclass

from .nullability import TypeFragment


@dataclass(frozen=True)
class MemberFragment:
    """A folded field, argument or input field.

    Keeps the facts that the parent definition still needs after folding:
    whether the original type was non-null and the already folded arguments.
    """
    name: str
    type: TypeFragment
    optional: bool
    non_null: bool
    comment: str = ""
    # Replaces the folded type entirely (directive overrides, field wrappers)
    type_override: str | None = None
    arguments: tuple["MemberFragment", ...] = ()

    def type_text(self, exact: bool = False) -> str:
        """Rendered type; ``exact`` drops the nullability wrapper."""
        if self.type_override is not None:
            return self.type_override
        if exact:
            return self.type.unwrapped().render()
        return self.type.render()

    def signature(self, readonly: bool = False, exact: bool = False) -> str:
        """Render ``name?: Type;``. Exact members never carry the optional sign."""
        prefix = "readonly " if readonly else ""
        sign = "?" if self.optional and not exact else ""
        return f"{prefix}{self.name}{sign}: {self.type_text(exact)};"
