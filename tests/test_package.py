from __future__ import annotations

import importlib.metadata

import pynec as m


def test_version():
    assert importlib.metadata.version("pynec") == m.__version__


def test_aliases():
    assert m.UNEC is m.UniqueNamedCollection
    assert m.DNEC is m.MultiNamedCollection
