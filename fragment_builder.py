"""
Fragment Builder Module.

This module takes the parsed input document and partitions its atoms into
the fragments declared in 'molecule.fragments'.

Key functionalities:
- Validates nfrag, fragment_charges and fragid against the atom count.
- Creates every fragment with its charge before any atom is placed.
- Assigns atoms by their 1-based fragid, keeping the input order within
  each fragment (a stable partition).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from errors import FragmentIndexOutOfRangeError, SchemaLengthMismatchError
from molecule_parser import Atom, parse_atoms, require_field


@dataclass
class Fragment:
    """A charged group of atoms, in order of appearance in the input."""
    charge: int
    atoms: List[Atom] = field(default_factory=list)


def _is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid count or id
    return isinstance(value, int) and not isinstance(value, bool)


def parse_fragments(input_data: Dict[str, Any]) -> List[Fragment]:
    """
    Builds the fragment list for an input document.

    Atoms are parsed first, so a malformed geometry is reported before any
    fragment field is looked at.

    Args:
        input_data: The full input document (must contain 'molecule').

    Returns:
        A list of nfrag fragments; fragment k holds every atom whose fragid
        is k + 1.
    """
    molecule = require_field(input_data, 'molecule', '')
    atoms = parse_atoms(molecule)

    fragment_json = require_field(molecule, 'fragments', 'molecule')
    nfrag = require_field(fragment_json, 'nfrag', 'molecule.fragments')
    charges = require_field(fragment_json, 'fragment_charges', 'molecule.fragments')
    fragids = require_field(fragment_json, 'fragid', 'molecule.fragments')

    if not _is_integer(nfrag) or nfrag < 0:
        raise SchemaLengthMismatchError(
            'molecule.fragments.nfrag', 'a non-negative integer', nfrag,
            message=f"'molecule.fragments.nfrag' must be a non-negative integer, got {nfrag!r}."
        )
    for field, value in (('molecule.fragments.fragment_charges', charges),
                         ('molecule.fragments.fragid', fragids)):
        if not isinstance(value, list):
            raise SchemaLengthMismatchError(
                field, 'a list', value,
                message=f"'{field}' must be a list, got {type(value).__name__}."
            )
    if len(charges) != nfrag:
        raise SchemaLengthMismatchError('molecule.fragments.fragment_charges', nfrag, len(charges))
    if len(fragids) != len(atoms):
        raise SchemaLengthMismatchError('molecule.fragments.fragid', len(atoms), len(fragids))

    for k, charge in enumerate(charges):
        if not _is_integer(charge):
            raise SchemaLengthMismatchError(
                'molecule.fragments.fragment_charges', 'integers', charge,
                message=f"Fragment {k + 1} has charge {charge!r}; "
                        f"'molecule.fragments.fragment_charges' must hold integers."
            )

    fragments = [Fragment(charge=charge) for charge in charges]

    for i, (atom, fragid) in enumerate(zip(atoms, fragids)):
        if not _is_integer(fragid) or not 1 <= fragid <= nfrag:
            raise FragmentIndexOutOfRangeError(i, fragid, nfrag)
        fragments[fragid - 1].atoms.append(atom)

    return fragments
