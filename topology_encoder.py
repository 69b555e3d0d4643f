"""
Topology Encoder Module.

This module re-emits a list of fragments as a topology document whose atom
ordering is fragment-major: all atoms of fragment 0 first, then fragment 1,
and so on.

Key functionalities:
- Assigns new 0-based global atom indices in fragment order.
- Writes symbols and flat (x, y, z) geometry in the new ordering.
- Records, per fragment, the index array into the new ordering and its charge.
- Emits 'connectivity' as an empty list; bonds are never inferred.
"""
from typing import Any, Dict, List, Tuple

from fragment_builder import Fragment


def _place_fragment(fragment: Fragment, atom_offset: int,
                    topology: Dict[str, List]) -> Tuple[List[int], int]:
    """
    Appends one fragment's atoms to the topology arrays.

    Args:
        fragment: The fragment to place.
        atom_offset: Global index given to the fragment's first atom.
        topology: The topology document being filled.

    Returns:
        The fragment's index array and the offset for the next fragment.
    """
    atom_ids = []
    for atom in fragment.atoms:
        atom_ids.append(atom_offset)
        topology['symbols'].append(atom.symbol)
        topology['geometry'].extend(atom.coordinate)
        atom_offset += 1
    return atom_ids, atom_offset


def encode_topology(fragments: List[Fragment]) -> Dict[str, Any]:
    """
    Builds the topology document for an ordered fragment list.

    Returns:
        A dictionary with 'geometry', 'symbols', 'fragments',
        'fragment_charges' and 'connectivity'.
    """
    topology: Dict[str, Any] = {
        'geometry': [],
        'symbols': [],
        'fragments': [],
        'fragment_charges': [],
        'connectivity': [],
    }

    atom_offset = 0
    for fragment in fragments:
        atom_ids, atom_offset = _place_fragment(fragment, atom_offset, topology)
        topology['fragments'].append(atom_ids)
        topology['fragment_charges'].append(fragment.charge)

    return topology
