# tests/test_job_template.py
"""Tests for the default job configuration."""

from job_template import TEMPLATE_NAME, TEMPLATE_VERSION, default_job_config


class TestDefaultJobConfig:
    def test_top_level_keys(self):
        assert set(default_job_config()) == {"model", "system", "keywords", "driver"}

    def test_model(self):
        model = default_job_config()["model"]
        assert model == {
            "method": "rimp2",
            "spin_configuration": "restricted",
            "fragmentation": True,
            "basis": "cc-pVDZ",
            "aux_basis": "cc-pVDZ-RIFIT",
        }

    def test_keywords(self):
        keywords = default_job_config()["keywords"]
        assert keywords["scf"]["scf_conv"] == 1e-08
        assert keywords["scf"]["niter"] == 50
        assert keywords["frag"]["fragmentation_level"] == "trimer"
        assert keywords["frag"]["cutoffs"] == {"dimer": 40, "trimer": 30}
        assert keywords["guess"]["superposition_monomer_densities"] is False

    def test_system_and_driver(self):
        config = default_job_config()
        assert config["system"]["max_gpu_memory_mb"] == 30000
        assert config["driver"] == "energy"

    def test_returns_independent_copies(self):
        first = default_job_config()
        first["keywords"]["frag"]["cutoffs"]["dimer"] = 1
        first["topology"] = {}
        second = default_job_config()
        assert second["keywords"]["frag"]["cutoffs"]["dimer"] == 40
        assert "topology" not in second

    def test_version(self):
        assert TEMPLATE_NAME == "rimp2-trimer"
        assert isinstance(TEMPLATE_VERSION, int)
