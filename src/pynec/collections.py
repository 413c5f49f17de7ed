"""Generic collection classes for named elements.

A named elements collection behaves like a list whose elements also carry a
name. Elements are retrieved by position in O(1) and by name in amortized
O(1). Two variants are provided:

- :class:`UniqueNamedCollection` (``UNEC``): names are unique, pushing a known
  name overwrites the element in place.
- :class:`MultiNamedCollection` (``DNEC``): names may repeat, pushing a known
  name appends and lookup by name returns every match in push order.

Example::

    from pynec import DNEC, UNEC

    water = DNEC()
    water.push_with_name("Hydrogen", {"protons": 1})
    water.push_with_name("Hydrogen", {"protons": 1})
    water.push_with_name("Oxygen", {"protons": 8})
    len(water.get_by_name("Hydrogen"))  # 2

    molecule = UNEC()
    molecule.push_with_name("Hydrogen", {"protons": 1, "neutrons": 0})
    molecule.push_with_name("Hydrogen", {"protons": 1, "neutrons": 1})
    len(molecule)  # 1
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

from pynec.exceptions import IndexDesyncError, NameNotFoundError
from pynec.index import MultiNameIndex, NameIndex, UniqueNameIndex
from pynec.nameable import name_of
from pynec.store import ElementBundle, OrderedStore

log = logging.getLogger(__name__)

E = TypeVar("E")
C = TypeVar("C", bound="NamedElementsCollection[Any]")


class NamedElementsCollection(Generic[E]):
    """
    Ordered collection of elements retrievable by position or by name.

    Owns an :class:`~pynec.store.OrderedStore` and a
    :class:`~pynec.index.NameIndex` and only exposes operations that update
    both. Subclasses choose the index strategy through ``_index_type``.

    Positions follow list conventions: negative positions count from the end.
    Subscripting (``collection[i]``) fails fast with an exception while the
    checked accessors (:meth:`get`, :meth:`get_name`, :meth:`get_by_name`)
    return an absent value instead.

    Not safe for concurrent mutation. Guard the whole collection with a single
    lock when sharing it between threads.
    """

    _index_type: ClassVar[type[NameIndex]]

    def __init__(self) -> None:
        self._store: OrderedStore[E] = OrderedStore()
        self._index: NameIndex = self._index_type()

    @classmethod
    def from_elements(cls: type[C], elements: Iterable[Any]) -> C:
        """Build a collection by pushing self-naming elements one at a time."""
        collection = cls()
        for element in elements:
            collection.push(element)
        return collection

    @classmethod
    def from_pairs(cls: type[C], pairs: Iterable[tuple[str, Any]]) -> C:
        """Build a collection by pushing ``(name, element)`` pairs one at a time."""
        collection = cls()
        for name, element in pairs:
            collection.push_with_name(name, element)
        return collection

    def push(self, element: E) -> None:
        """Add a self-naming element.

        The name is taken from ``element.get_name()``.

        Raises:
            NotNameableError: If the element does not implement ``get_name()``.
        """
        self.push_with_name(name_of(element), element)

    def push_with_name(self, name: str, element: E) -> None:
        """Add an element under ``name``.

        Whether a known name overwrites or appends depends on the variant.
        """
        bundle = ElementBundle(element=element, name=name)
        slot = self._index.slot_for(name)
        if slot is None:
            position = self._store.append(bundle)
            self._index.add(name, position)
        else:
            self._store.replace(slot, bundle)
            self._index.replace(name, slot)

    def remove(self, position: int) -> ElementBundle[E]:
        """Remove and return the bundle at ``position``.

        Every later element moves down by one position.

        Raises:
            PositionOutOfRangeError: If the position does not address an element.
        """
        position = self._store.normalize(position)
        bundle = self._store.remove(position)
        self._index.remove(bundle.name, position)
        log.debug("removed %r at position %s", bundle.name, position)
        return bundle

    def clear(self) -> None:
        self._store.clear()
        self._index.clear()

    def get(self, position: int) -> E | None:
        """Get the element at ``position``, returning None if out of range."""
        bundle = self._store.get(position)
        return None if bundle is None else bundle.element

    def get_name(self, position: int) -> str | None:
        """Get the name of the element at ``position``, or None if out of range."""
        bundle = self._store.get(position)
        return None if bundle is None else bundle.name

    def contains_name(self, name: str) -> bool:
        return name in self._index

    def names(self) -> list[str]:
        """Distinct names, in order of first insertion."""
        return list(self._index)

    def is_empty(self) -> bool:
        return len(self._store) == 0

    def items(self) -> Iterator[tuple[str, E]]:
        """Iterate over ``(name, element)`` pairs in position order."""
        for bundle in self._store:
            yield bundle.name, bundle.element

    def drain(self) -> Iterator[E]:
        """Consume the collection, yielding its elements in position order.

        The collection is empty once the iterator is created.
        """
        bundles = list(self._store.root)
        self.clear()
        return (bundle.element for bundle in bundles)

    def clone(self: C) -> C:
        """Deep copy the collection by re-pushing copies of every element."""
        return self.__deepcopy__({})

    def check(self) -> None:
        """Verify that the name index agrees with the ordered store.

        Raises:
            IndexDesyncError: If any name maps to a position holding another
                name, or the indexed positions do not cover the store exactly.
        """
        seen: list[int] = []
        for name in self._index:
            for position in self._index.positions(name):
                bundle = self._store.get(position)
                if position < 0 or bundle is None:
                    msg = f"{name!r} points past the end of the store at {position}"
                    raise IndexDesyncError(msg)
                if bundle.name != name:
                    msg = (
                        f"{name!r} points at position {position} "
                        f"holding {bundle.name!r}"
                    )
                    raise IndexDesyncError(msg)
                seen.append(position)

        if sorted(seen) != list(range(len(self._store))):
            msg = (
                f"indexed positions {sorted(seen)} do not cover "
                f"the {len(self._store)} stored elements"
            )
            raise IndexDesyncError(msg)

    def __getitem__(self, position: int) -> E:
        return self._store[position].element

    def __setitem__(self, position: int, element: E) -> None:
        """Replace the element at ``position``, keeping its name."""
        name = self._store[position].name
        self._store.replace(position, ElementBundle(element=element, name=name))

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[E]:
        for bundle in self._store:
            yield bundle.element

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedElementsCollection):
            return NotImplemented
        return type(self) is type(other) and list(self.items()) == list(
            other.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self: C) -> C:
        return type(self).from_pairs(self.items())

    def __deepcopy__(self: C, memo: dict[int, Any]) -> C:
        return type(self).from_pairs(
            (name, copy.deepcopy(element, memo)) for name, element in self.items()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[bundle.name for bundle in self._store]})"

    def __rich_repr__(self) -> Iterator[Any]:
        yield "names", [bundle.name for bundle in self._store]
        yield "index", self._index.as_dict()


class UniqueNamedCollection(NamedElementsCollection[E]):
    """
    Named elements collection where every name is unique.

    Pushing a name that is already present replaces the element in place,
    leaving the length and the position of that name unchanged. Elements can
    be subscripted by name as well as by position.
    """

    _index_type = UniqueNameIndex

    def get_by_name(self, name: str) -> E | None:
        """Get the element named ``name``, returning None if unknown."""
        position = self._index.slot_for(name)
        return None if position is None else self._store[position].element

    def __getitem__(self, item: int | str) -> E:  # type: ignore[override]
        if isinstance(item, str):
            position = self._index.slot_for(item)
            if position is None:
                raise NameNotFoundError(item)
            return self._store[position].element
        return super().__getitem__(item)


class MultiNamedCollection(NamedElementsCollection[E]):
    """
    Named elements collection allowing several elements per name.

    Pushing a name that is already present appends another element. Lookup by
    name returns every element carrying that name, in push order. Name
    subscripts are not supported; use :meth:`get_by_name`.
    """

    _index_type = MultiNameIndex

    def get_by_name(self, name: str) -> list[E]:
        """Get every element named ``name`` in push order, empty if unknown."""
        return [
            self._store[position].element for position in self._index.positions(name)
        ]

    def __getitem__(self, position: int) -> E:
        if isinstance(position, str):
            msg = (
                f"{type(self).__name__} cannot be subscripted by name; "
                "use get_by_name() instead"
            )
            raise TypeError(msg)
        return super().__getitem__(position)


UNEC = UniqueNamedCollection
DNEC = MultiNamedCollection

__all__ = (
    "DNEC",
    "UNEC",
    "MultiNamedCollection",
    "NamedElementsCollection",
    "UniqueNamedCollection",
)
