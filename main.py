"""
Main executable script for the fragment topology to job configuration converter.

This script orchestrates the conversion process by:
1. Parsing command-line arguments for the input/output files.
2. Reading the input JSON document.
3. Partitioning the atoms into fragments and encoding the fragment-major topology.
4. Merging the topology into the default job configuration and writing it out.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from errors import ConversionError, UsageError
from fragment_builder import parse_fragments
from job_template import TEMPLATE_NAME, TEMPLATE_VERSION, default_job_config
from job_writer import JobWriter
from molecule_parser import load_input
from topology_encoder import encode_topology


def default_output_path(input_file) -> Path:
    """Returns 'output-<name>' next to the input file."""
    input_path = Path(input_file)
    return input_path.with_name(f"output-{input_path.name}")


def run(input_file: str, output_file: Optional[str] = None, xyz: bool = False) -> Path:
    """Main function to run the conversion."""
    print("=====================================================")
    print("=== Fragment Topology to Job Configuration        ===")
    print("=====================================================\n")

    # --- 1. Reading ---
    print("\n--- [Step 1/4] Reading input document ---")
    print(f"Opening file {input_file}")
    input_data = load_input(input_file)

    # --- 2. Fragments ---
    print("\n--- [Step 2/4] Assigning atoms to fragments ---")
    fragments = parse_fragments(input_data)
    n_atoms = sum(len(fragment.atoms) for fragment in fragments)
    print(f"  -> {n_atoms} atoms in {len(fragments)} fragments")
    for k, fragment in enumerate(fragments):
        if not fragment.atoms:
            print(f"  -> WARNING: fragment {k + 1} has no atoms.")

    # --- 3. Topology ---
    print("\n--- [Step 3/4] Encoding fragment-major topology ---")
    topology = encode_topology(fragments)
    print(f"  -> Using job template '{TEMPLATE_NAME}' (version {TEMPLATE_VERSION})")
    writer = JobWriter(default_job_config(), topology)

    # --- 4. Writing Output ---
    print("\n--- [Step 4/4] Writing output files ---")
    out_path = Path(output_file) if output_file else default_output_path(input_file)
    print(f"Writing to file {out_path}")
    writer.write_job_json(out_path)
    if xyz:
        writer.write_xyz(out_path.with_suffix('.xyz'))

    print("\nConversion complete!")
    print("=====================================================")
    return out_path


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    cli_parser = _ArgumentParser(
        prog="frag2json",
        description="Convert a fragmented molecule JSON document into a fragment-based RI-MP2 job configuration.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    cli_parser.add_argument(
        "input",
        help="Path to the input JSON document (molecule symbols, geometry and fragments)."
    )
    cli_parser.add_argument(
        "-o", "--output",
        default=None,
        help="Path for the output JSON file. Defaults to 'output-<input name>' next to the input."
    )
    cli_parser.add_argument(
        "--xyz",
        action="store_true",
        help="Also write the fragment-ordered geometry (Angstrom) next to the output, with a .xyz extension."
    )
    return cli_parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point. Returns the process exit status."""
    try:
        args = build_parser().parse_args(argv)
        run(input_file=args.input, output_file=args.output, xyz=args.xyz)
    except UsageError as e:
        build_parser().print_usage(sys.stderr)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except ConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
