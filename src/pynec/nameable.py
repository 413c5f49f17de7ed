"""Self-naming capability for collection elements."""

from __future__ import annotations

from abc import ABC
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from pynec.exceptions import NotNameableError


@runtime_checkable
class Nameable(Protocol):
    """Protocol for elements able to report their own name."""

    def get_name(self) -> str: ...


class NamedModel(BaseModel, ABC):
    """ABC for pydantic elements that carry a name attribute.

    Subclasses satisfy :class:`Nameable` through the ``name`` field, so they can
    be pushed into a collection without an explicit name.
    """

    name: str

    def get_name(self) -> str:
        return self.name


def name_of(element: Any) -> str:
    """Derive the name of a self-naming element.

    Args:
        element: Any object implementing ``get_name()``.

    Returns:
        The name reported by the element.

    Raises:
        NotNameableError: If the element does not implement ``get_name()``.
    """
    if not isinstance(element, Nameable):
        msg = (
            f"{type(element).__name__} does not implement get_name(); "
            "use push_with_name() to provide a name explicitly"
        )
        raise NotNameableError(msg)
    return element.get_name()
