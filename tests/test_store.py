"""Tests for element bundles and the ordered store."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pynec.exceptions import CollectionModifiedError, PositionOutOfRangeError
from pynec.store import ElementBundle, OrderedStore


@pytest.fixture
def store() -> OrderedStore:
    """Store holding three bundles."""
    store = OrderedStore()
    for name, value in [("a", 1), ("b", 2), ("c", 3)]:
        store.append(ElementBundle(element=value, name=name))
    return store


class TestElementBundle:
    """Test the ElementBundle model."""

    def test_fields(self) -> None:
        bundle = ElementBundle(element={"protons": 1}, name="Hydrogen")
        assert bundle.element == {"protons": 1}
        assert bundle.name == "Hydrogen"

    def test_arbitrary_element_type(self) -> None:
        """Elements of any type are stored unchanged."""

        class Opaque:
            pass

        opaque = Opaque()
        bundle = ElementBundle(element=opaque, name="x")
        assert bundle.element is opaque

    def test_name_must_be_string(self) -> None:
        """Non-string names are rejected with a readable message."""
        with pytest.raises(ValidationError, match="Element names must be strings"):
            ElementBundle(element=1, name=42)


class TestOrderedStore:
    """Test the OrderedStore positional container."""

    def test_empty(self) -> None:
        store = OrderedStore()
        assert len(store) == 0
        assert list(store) == []
        assert store.get(0) is None

    def test_append_returns_position(self) -> None:
        store = OrderedStore()
        assert store.append(ElementBundle(element=1, name="a")) == 0
        assert store.append(ElementBundle(element=2, name="b")) == 1
        assert len(store) == 2

    def test_get(self, store: OrderedStore) -> None:
        bundle = store.get(1)
        assert bundle is not None
        assert bundle.name == "b"
        assert store.get(3) is None
        assert store.get(-4) is None

    def test_getitem(self, store: OrderedStore) -> None:
        assert store[0].element == 1
        assert store[-1].element == 3

    def test_getitem_out_of_range(self, store: OrderedStore) -> None:
        """Subscripting fails fast with an IndexError subclass."""
        with pytest.raises(PositionOutOfRangeError):
            store[3]
        with pytest.raises(IndexError):
            store[10]

    def test_remove_shifts_later_bundles(self, store: OrderedStore) -> None:
        removed = store.remove(0)
        assert removed.name == "a"
        assert [bundle.name for bundle in store] == ["b", "c"]
        assert store[0].name == "b"

    def test_remove_out_of_range(self, store: OrderedStore) -> None:
        with pytest.raises(PositionOutOfRangeError, match="out of range"):
            store.remove(3)
        assert len(store) == 3

    def test_remove_from_empty(self) -> None:
        with pytest.raises(PositionOutOfRangeError):
            OrderedStore().remove(0)

    def test_replace_keeps_length(self, store: OrderedStore) -> None:
        store.replace(1, ElementBundle(element=20, name="b"))
        assert len(store) == 3
        assert store[1].element == 20

    def test_normalize(self, store: OrderedStore) -> None:
        assert store.normalize(-1) == 2
        assert store.normalize(0) == 0
        with pytest.raises(PositionOutOfRangeError):
            store.normalize(-4)

    def test_clear(self, store: OrderedStore) -> None:
        store.clear()
        assert len(store) == 0

    def test_iteration_is_restartable(self, store: OrderedStore) -> None:
        assert [bundle.element for bundle in store] == [1, 2, 3]
        assert [bundle.element for bundle in store] == [1, 2, 3]

    def test_mutation_during_iteration(self, store: OrderedStore) -> None:
        """Structural changes while iterating raise instead of misbehaving."""
        with pytest.raises(CollectionModifiedError):
            for bundle in store:
                if bundle.name == "a":
                    store.remove(0)

    def test_replace_during_iteration_is_allowed(self, store: OrderedStore) -> None:
        for position, bundle in enumerate(store):
            negated = ElementBundle(element=-bundle.element, name=bundle.name)
            store.replace(position, negated)
        assert [bundle.element for bundle in store] == [-1, -2, -3]

    def test_repr(self, store: OrderedStore) -> None:
        assert repr(store) == "OrderedStore(['a', 'b', 'c'])"
