"""
Copyright (c) 2025 Giordon Stark. All rights reserved.

pynec: ordered collections with lookup by position and by name
"""

from __future__ import annotations

from pynec._version import version as __version__
from pynec.collections import (
    DNEC,
    UNEC,
    MultiNamedCollection,
    NamedElementsCollection,
    UniqueNamedCollection,
)
from pynec.nameable import Nameable, NamedModel
from pynec.store import ElementBundle

__all__ = [
    "DNEC",
    "UNEC",
    "ElementBundle",
    "MultiNamedCollection",
    "Nameable",
    "NamedElementsCollection",
    "NamedModel",
    "UniqueNamedCollection",
    "__version__",
]
