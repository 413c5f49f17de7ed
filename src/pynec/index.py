"""
Name to position indexes.

A name index maps each known name to the position (or positions) it occupies
in an :class:`~pynec.store.OrderedStore`. Two strategies are provided:

- :class:`UniqueNameIndex`: one position per name, a push of a known name
  overwrites the element in place.
- :class:`MultiNameIndex`: an ordered list of positions per name, a push of a
  known name always appends.

Both strategies renumber the stored positions on removal so they keep
pointing at the same bundles after the store shifts.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

log = logging.getLogger(__name__)


class NameIndex(ABC):
    """Capability interface every name index strategy implements."""

    @abstractmethod
    def add(self, name: str, position: int) -> None:
        """Record that ``name`` occupies the freshly appended ``position``."""

    @abstractmethod
    def remove(self, name: str, position: int) -> None:
        """Forget ``position`` for ``name`` and renumber every later position.

        Args:
            name: Name of the removed bundle.
            position: Position the bundle occupied before the store shifted.
        """

    @abstractmethod
    def replace(self, name: str, position: int) -> None:
        """Refresh the entry for ``name`` after an in-place overwrite."""

    @abstractmethod
    def slot_for(self, name: str) -> int | None:
        """Position a push of ``name`` should overwrite, or None to append."""

    @abstractmethod
    def positions(self, name: str) -> list[int]:
        """Positions currently held by ``name``, in push order."""

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def as_dict(self) -> dict[str, Any]:
        """Copy of the raw mapping, for debugging and invariant checks."""

    @abstractmethod
    def __contains__(self, name: object) -> bool: ...

    @abstractmethod
    def __iter__(self) -> Iterator[str]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_dict()})"


class UniqueNameIndex(NameIndex):
    """
    Index binding each name to a single position.

    Example::

        index = UniqueNameIndex()
        index.add("H", 0)
        index.add("He", 1)
        index.add("Li", 2)
        index.remove("H", 0)
        index.as_dict()  # {'He': 0, 'Li': 1}
    """

    def __init__(self) -> None:
        self._map: dict[str, int] = {}

    def add(self, name: str, position: int) -> None:
        self._map[name] = position

    def remove(self, name: str, position: int) -> None:
        del self._map[name]
        for other, held in self._map.items():
            if held > position:
                self._map[other] = held - 1
        log.debug("unbound %r from position %s", name, position)

    def replace(self, name: str, position: int) -> None:
        self._map[name] = position

    def slot_for(self, name: str) -> int | None:
        return self._map.get(name)

    def positions(self, name: str) -> list[int]:
        if name in self._map:
            return [self._map[name]]
        return []

    def clear(self) -> None:
        self._map.clear()

    def as_dict(self) -> dict[str, int]:
        return dict(self._map)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)


class MultiNameIndex(NameIndex):
    """
    Index binding each name to the ordered list of positions it occupies.

    Removing a position strikes it from its own name's list, drops the name
    once its list is empty, then decrements every remaining position above
    the removed one, across all names. The threshold is the position the
    bundle held before the store shifted.

    Example::

        # 0 1 2 3 4 5
        # A B A A B A
        index = MultiNameIndex()
        for position, name in enumerate("ABAABA"):
            index.add(name, position)

        index.remove("A", 0)
        index.as_dict()  # {'A': [1, 2, 4], 'B': [0, 3]}
    """

    def __init__(self) -> None:
        self._map: dict[str, list[int]] = {}

    def add(self, name: str, position: int) -> None:
        self._map.setdefault(name, []).append(position)

    def remove(self, name: str, position: int) -> None:
        held = self._map[name]
        held.remove(position)
        if not held:
            del self._map[name]

        for others in self._map.values():
            for i, value in enumerate(others):
                if value > position:
                    others[i] = value - 1
        log.debug("struck position %s from %r and renumbered", position, name)

    def replace(self, name: str, position: int) -> None:
        msg = f"{type(self).__name__} never overwrites: pushing {name!r} appends"
        raise NotImplementedError(msg)

    def slot_for(self, name: str) -> int | None:  # noqa: ARG002
        return None

    def positions(self, name: str) -> list[int]:
        return list(self._map.get(name, []))

    def clear(self) -> None:
        self._map.clear()

    def as_dict(self) -> dict[str, list[int]]:
        return {name: list(held) for name, held in self._map.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)
