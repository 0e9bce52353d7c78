"""Ancestor tracking for the schema fold.

Only two questions are ever asked of the ancestors of a node: whether it
sits inside an input object definition, and which named type definition
encloses it. The chain is a stack of small tagged frames pushed and popped
by the traversal.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Scope(Enum):
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    ENUM = "enum"
    INPUT_OBJECT = "input_object"
    FIELD = "field"
    INPUT_VALUE = "input_value"


DEFINITION_SCOPES = frozenset(
    {Scope.OBJECT, Scope.INTERFACE, Scope.UNION, Scope.ENUM, Scope.INPUT_OBJECT}
)


@dataclass(frozen=True)
class Frame:
    scope: Scope
    name: str


class AncestorChain:
    """Stack of enclosing nodes, innermost last."""

    def __init__(self):
        self._frames: list[Frame] = []

    @contextmanager
    def enter(self, scope: Scope, name: str) -> Iterator[Frame]:
        frame = Frame(scope, name)
        self._frames.append(frame)
        try:
            yield frame
        finally:
            self._frames.pop()

    def has(self, scope: Scope) -> bool:
        return any(frame.scope is scope for frame in self._frames)

    def in_input_context(self) -> bool:
        """True anywhere inside an input object definition."""
        return self.has(Scope.INPUT_OBJECT)

    def nearest_definition(self) -> Frame | None:
        """The innermost enclosing named type definition."""
        for frame in reversed(self._frames):
            if frame.scope in DEFINITION_SCOPES:
                return frame
        return None

    def __len__(self) -> int:
        return len(self._frames)
