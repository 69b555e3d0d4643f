"""
Job File Writer Module.

This module is responsible for merging the default job configuration with the
encoded topology and writing the result to disk.

Key functionalities:
- Splices the topology under the 'topology' key of the job configuration.
- Writes the job document as JSON with 4-space indentation and sorted keys,
  so repeated runs on the same input give identical files.
- Optionally writes the re-ordered geometry as an XYZ file (one residue per
  fragment) through MDAnalysis, converting bohr to Angstrom.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict

import MDAnalysis as mda
import numpy as np

from errors import OutputFileError

# Unit conversion constants
A_PER_BOHR = 0.529177210903


def _ensure_parent_dir(out_path):
    parent = Path(out_path).parent
    os.makedirs(parent, exist_ok=True)


class JobWriter:
    """Writes the job configuration document (and optional XYZ) for a topology."""

    def __init__(self, template: Dict[str, Any], topology: Dict[str, Any], indent: int = 4):
        self.template = template
        self.topology = topology
        self.indent = indent

    def build_document(self) -> Dict[str, Any]:
        """Returns the final document: the template plus the 'topology' key."""
        document = dict(self.template)
        document['topology'] = self.topology
        return document

    def dumps(self) -> str:
        return json.dumps(self.build_document(), indent=self.indent, sort_keys=True) + "\n"

    def write_job_json(self, out_path):
        """Writes the job document to out_path."""
        # Serialize fully before opening the file so nothing partial is left behind
        text = self.dumps()
        print(f"  -> Writing job configuration to: {out_path}")
        try:
            _ensure_parent_dir(out_path)
            with open(out_path, 'w') as f:
                f.write(text)
        except OSError as e:
            raise OutputFileError(out_path, e.strerror or str(e)) from e

    def write_xyz(self, out_path) -> bool:
        """
        Writes the fragment-major geometry as an XYZ file.

        Returns:
            True if the file was written, False if there were no atoms to write.
        """
        symbols = self.topology['symbols']
        n_atoms = len(symbols)
        if n_atoms == 0:
            print("  -> WARNING: topology has no atoms, skipping XYZ output.")
            return False

        # Residue k holds the atoms of fragment k
        atom_resindex = np.empty(n_atoms, dtype=int)
        for resindex, atom_ids in enumerate(self.topology['fragments']):
            atom_resindex[atom_ids] = resindex
        n_residues = len(self.topology['fragments'])

        universe = mda.Universe.empty(
            n_atoms,
            n_residues=n_residues,
            atom_resindex=atom_resindex,
            trajectory=True,
        )
        universe.add_TopologyAttr('names', symbols)
        universe.add_TopologyAttr('elements', symbols)
        universe.add_TopologyAttr('resids', np.arange(1, n_residues + 1))
        positions = np.asarray(self.topology['geometry'], dtype=np.float64).reshape(n_atoms, 3)
        universe.atoms.positions = positions * A_PER_BOHR

        print(f"  -> Writing fragment-ordered XYZ file to: {out_path}")
        try:
            _ensure_parent_dir(out_path)
            universe.atoms.write(str(out_path))
        except OSError as e:
            raise OutputFileError(out_path, e.strerror or str(e)) from e
        return True
