#!/usr/bin/env python3
"""
Example usage of pynec collections.

This script demonstrates:
1. Unique collections overwriting elements pushed under a known name
2. Multi collections grouping elements that share a name
3. Removal and the renumbering of the name index
4. Debug logging and rich pretty printing
"""

import time
from contextlib import contextmanager

from rich.pretty import pprint

import pynec
import pynec.logging


class Atom(pynec.NamedModel):
    protons: int
    neutrons: int


@contextmanager
def time_block(label):
    start = time.perf_counter()
    yield
    end = time.perf_counter()
    print(f"{label}: {end - start:.4f} seconds")


def main():
    """Main example function demonstrating pynec features."""
    print("=== pynec Example: named elements collections ===\n")
    pynec.logging.setup("DEBUG")

    print("1. Unique collection")
    molecule = pynec.UNEC()
    molecule.push_with_name("Hydrogen", Atom(name="H", protons=1, neutrons=0))
    molecule.push_with_name("Hydrogen", Atom(name="H", protons=1, neutrons=1))
    molecule.push_with_name("Oxygen", Atom(name="O", protons=8, neutrons=8))
    print(f"   {molecule!r} has {len(molecule)} elements")
    print(f"   molecule['Hydrogen'] = {molecule['Hydrogen']!r}\n")

    print("2. Multi collection")
    water = pynec.DNEC.from_elements(
        [
            Atom(name="Hydrogen", protons=1, neutrons=0),
            Atom(name="Oxygen", protons=8, neutrons=8),
            Atom(name="Hydrogen", protons=1, neutrons=0),
        ]
    )
    print(f"   {len(water.get_by_name('Hydrogen'))} hydrogen atoms in {water!r}\n")

    print("3. Removal")
    water.remove(0)
    pprint(water)
    water.check()

    print("\n4. Bulk construction")
    with time_block("Pushing 100000 elements"):
        big = pynec.DNEC.from_pairs((f"atom{i % 100}", i) for i in range(100_000))
    print(f"   {len(big.names())} distinct names, {len(big)} elements")


if __name__ == "__main__":
    main()
