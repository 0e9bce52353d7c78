"""Nullability wrapping of rendered types.

GraphQL types are nullable unless marked with ``!``. Nullable positions are
rendered inside a wrapper type: ``Maybe<T>`` where values are read (output
positions) and ``InputMaybe<T>`` where values are constructed (anywhere
inside an input object definition).

The wrapper is carried as a tag on :class:`TypeFragment` while the tree is
folded and only turned into text by :meth:`TypeFragment.render`, so a
non-null marker strips it without looking at the rendered string.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Wrapper(Enum):
    """Nullability wrapper types, valued by their TypeScript name."""
    MAYBE = "Maybe"
    INPUT_MAYBE = "InputMaybe"


def wrapper_for(input_context: bool) -> Wrapper:
    """Return the wrapper used for nullable types in the given context."""
    return Wrapper.INPUT_MAYBE if input_context else Wrapper.MAYBE


@dataclass(frozen=True)
class TypeFragment:
    """A folded type position: inner text plus an optional wrapper."""
    text: str
    wrapper: Wrapper | None = None

    @property
    def is_wrapped(self) -> bool:
        return self.wrapper is not None

    def render(self) -> str:
        if self.wrapper is None:
            return self.text
        return f"{self.wrapper.value}<{self.text}>"

    def wrapped(self, wrapper: Wrapper) -> "TypeFragment":
        """Wrap this fragment; an already wrapped fragment is nested."""
        if self.wrapper is None:
            return replace(self, wrapper=wrapper)
        return TypeFragment(self.render(), wrapper)

    def unwrapped(self) -> "TypeFragment":
        """Drop the outermost wrapper, as a non-null marker does."""
        return replace(self, wrapper=None)

    def __str__(self) -> str:
        return self.render()


def nullable(text: str, input_context: bool) -> TypeFragment:
    """Wrap a rendered type for a nullable position."""
    return TypeFragment(text, wrapper_for(input_context))


def list_of(element: TypeFragment, input_context: bool) -> TypeFragment:
    """Render a list type; the list itself is nullable until a ``!`` says otherwise."""
    return nullable(f"Array<{element.render()}>", input_context)


def non_null(fragment: TypeFragment) -> TypeFragment:
    return fragment.unwrapped()
