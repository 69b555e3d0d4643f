"""
Molecule Input Parser Module.

This module is responsible for reading the JSON input document and turning
its flat symbol/coordinate arrays into an ordered list of atoms.

Key functionalities:
- Loads the input document, reporting unreadable or invalid files.
- Looks up required fields, naming the full path of anything missing.
- Checks that the geometry holds exactly one numeric (x, y, z) triple per
  string symbol.
- Builds immutable Atom records in input order.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Tuple

from errors import InputFileError, InvalidFieldTypeError, MalformedGeometryError, MissingFieldError


class Atom(NamedTuple):
    """A single atom: element symbol and Cartesian coordinate."""
    symbol: str
    coordinate: Tuple[float, float, float]


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_field(section: Dict[str, Any], key: str, path: str) -> Any:
    """Returns section[key], raising MissingFieldError with the dotted path if absent."""
    if not isinstance(section, dict):
        raise InvalidFieldTypeError(path or "<document>", "an object", section)
    if key not in section:
        raise MissingFieldError(f"{path}.{key}" if path else key)
    return section[key]


def load_input(input_file) -> Dict[str, Any]:
    """
    Reads the JSON input document.

    Args:
        input_file: Path to the input JSON file.

    Returns:
        The decoded document. It is guaranteed to contain a 'molecule' object.
    """
    path = Path(input_file)
    if not path.is_file():
        raise InputFileError(path, "file not found")

    try:
        with open(path, 'r') as f:
            document = json.load(f)
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputFileError(path, f"invalid JSON ({e})") from e

    require_field(document, 'molecule', '')
    return document


def parse_atoms(molecule: Dict[str, Any]) -> List[Atom]:
    """
    Extracts the ordered atom list from a molecule section.

    Args:
        molecule: The 'molecule' object of the input document.

    Returns:
        One Atom per entry of 'symbols', in the same order.
    """
    symbols = require_field(molecule, 'symbols', 'molecule')
    geometry = require_field(molecule, 'geometry', 'molecule')

    for field, value in (('molecule.symbols', symbols), ('molecule.geometry', geometry)):
        if not isinstance(value, list):
            raise MalformedGeometryError(
                None, None, message=f"'{field}' must be a list, got {type(value).__name__}."
            )

    if len(symbols) * 3 != len(geometry):
        raise MalformedGeometryError(len(symbols), len(geometry))

    atoms = []
    for i, symbol in enumerate(symbols):
        if not isinstance(symbol, str):
            raise MalformedGeometryError(
                len(symbols), len(geometry),
                message=f"Atom {i}: symbol must be a string, got {symbol!r}."
            )
        triple = geometry[3 * i:3 * i + 3]
        if not all(_is_number(x) for x in triple):
            raise MalformedGeometryError(
                len(symbols), len(geometry),
                message=f"Atom {i}: coordinates {triple!r} in 'molecule.geometry' are not all numbers."
            )
        x, y, z = triple
        atoms.append(Atom(symbol, (float(x), float(y), float(z))))
    return atoms
