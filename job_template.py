"""
Job Template Module.

Default job configuration for distributed RI-MP2 runs with trimer-level
fragmentation. The values do not depend on the molecule; the converter only
adds a 'topology' key on top of them.
"""
import copy
from typing import Any, Dict

TEMPLATE_NAME = "rimp2-trimer"
TEMPLATE_VERSION = 1

_DEFAULT_JOB_CONFIG: Dict[str, Any] = {
    "model": {
        "method": "rimp2",
        "spin_configuration": "restricted",
        "fragmentation": True,
        "basis": "cc-pVDZ",
        "aux_basis": "cc-pVDZ-RIFIT",
    },
    "system": {
        "max_gpu_memory_mb": 30000,
    },
    "keywords": {
        "scf": {
            "niter": 50,
            "ndiis": 8,
            "scf_conv": 1e-08,
            "convergence_metric": "energy",
        },
        "frag": {
            "fragmentation_level": "trimer",
            "fragmented_energy_type": "total_energy",
            "ngpus_per_node": 4,
            "cutoffs": {
                "dimer": 40,
                "trimer": 30,
            },
        },
        "guess": {
            "superposition_monomer_densities": False,
        },
    },
    "driver": "energy",
}


def default_job_config() -> Dict[str, Any]:
    """Returns a fresh copy of the default job configuration."""
    return copy.deepcopy(_DEFAULT_JOB_CONFIG)
