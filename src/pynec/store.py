"""
Ordered storage of named elements.

Provides the bundle model tying an element to its name, and the list-backed
store that owns the bundles and defines iteration order and positions.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, RootModel

from pynec.exceptions import (
    CollectionModifiedError,
    PositionOutOfRangeError,
    custom_error_msg,
)

E = TypeVar("E")

ElementName = Annotated[
    str,
    custom_error_msg({"string_type": "Element names must be strings, got {input}"}),
]


class ElementBundle(BaseModel, Generic[E]):
    """
    An element stored together with the name it was pushed under.

    Parameters:
        element: The stored object. Any type is accepted and kept as-is.
        name: The name the element was pushed under.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    element: E
    name: ElementName


class OrderedStore(RootModel[list[ElementBundle[E]]]):
    """
    Dense, 0-indexed sequence of element bundles.

    The store is the single source of truth for the size of a collection and
    for iteration order. Removing a bundle shifts every later bundle down by
    one position.

    Positions follow list conventions: negative values count from the end.
    """

    root: list[ElementBundle[E]] = Field(default_factory=list)
    _version: int = PrivateAttr(default=0)

    def normalize(self, position: int) -> int:
        """Resolve a possibly negative position to ``0 <= position < len``.

        Raises:
            PositionOutOfRangeError: If the position does not address a bundle.
        """
        length = len(self.root)
        resolved = position + length if position < 0 else position
        if not 0 <= resolved < length:
            raise PositionOutOfRangeError(position, length)
        return resolved

    def append(self, bundle: ElementBundle[E]) -> int:
        """Add a bundle at the end and return its position."""
        self.root.append(bundle)
        self._version += 1
        return len(self.root) - 1

    def get(self, position: int) -> ElementBundle[E] | None:
        """Get the bundle at ``position``, returning None if out of range."""
        try:
            return self.root[self.normalize(position)]
        except PositionOutOfRangeError:
            return None

    def replace(self, position: int, bundle: ElementBundle[E]) -> None:
        """Overwrite the bundle at ``position`` without changing the length."""
        self.root[self.normalize(position)] = bundle

    def remove(self, position: int) -> ElementBundle[E]:
        """Remove and return the bundle at ``position``.

        Every bundle after ``position`` moves down by one.

        Raises:
            PositionOutOfRangeError: If the position does not address a bundle.
        """
        bundle = self.root.pop(self.normalize(position))
        self._version += 1
        return bundle

    def clear(self) -> None:
        self.root.clear()
        self._version += 1

    def __getitem__(self, position: int) -> ElementBundle[E]:
        return self.root[self.normalize(position)]

    def __iter__(self) -> Iterator[ElementBundle[E]]:  # type: ignore[override]  # https://github.com/pydantic/pydantic/issues/8872
        version = self._version
        for bundle in self.root:
            yield bundle
            if self._version != version:
                msg = "collection was modified during iteration"
                raise CollectionModifiedError(msg)

    def __len__(self) -> int:
        return len(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[bundle.name for bundle in self.root]})"

    def __rich_repr__(self) -> Iterator[Any]:
        for bundle in self.root:
            yield bundle.name, bundle.element
