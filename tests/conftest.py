"""Shared pytest fixtures."""

import json

import pytest


def make_input(symbols, geometry, fragment_charges, fragid, nfrag=None):
    """Builds an input document in the converter's schema."""
    return {
        "molecule": {
            "symbols": symbols,
            "geometry": geometry,
            "fragments": {
                "nfrag": len(fragment_charges) if nfrag is None else nfrag,
                "fragment_charges": fragment_charges,
                "fragid": fragid,
            },
        }
    }


@pytest.fixture
def water_input():
    """Single-fragment O-H document."""
    return make_input(["O", "H"], [0, 0, 0, 0, 0, 1], [0], [1, 1])


@pytest.fixture
def interleaved_input():
    """Three atoms whose fragment ids are out of input order."""
    return make_input(
        ["A", "B", "C"],
        [0, 0, 0, 1, 0, 0, 2, 0, 0],
        [0, -1],
        [2, 1, 1],
    )


@pytest.fixture
def water_trimer_input():
    """Three water molecules with their atoms shuffled across the input."""
    symbols = ["O", "O", "H", "H", "O", "H", "H", "H", "H"]
    geometry = [float(v) for i in range(len(symbols)) for v in (i, 0.5 * i, -i)]
    return make_input(symbols, geometry, [0, 1, -1], [1, 2, 1, 2, 3, 1, 3, 2, 3])


@pytest.fixture
def write_input(tmp_path):
    """Writes a document to a JSON file in tmp_path and returns its path."""
    def _write(document, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path
    return _write
