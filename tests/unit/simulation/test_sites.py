"""Tests for fleet_sim.simulation.sites."""
import pytest

from fleet_sim.core.config import SitePolicyConfig
from fleet_sim.core.exceptions import FleetSimError, UnknownSiteError
from fleet_sim.simulation.sites import SitePolicy, SiteRegistry


class TestPolicyOf:
    def test_known_site(self, registry):
        policy = registry.policy_of("T5")
        assert policy == SitePolicy(vlan=200, subnet_prefix="10.51.200.")

    def test_unknown_site_raises(self, registry):
        with pytest.raises(UnknownSiteError) as exc_info:
            registry.policy_of("NOPE")
        assert exc_info.value.site == "NOPE"
        assert isinstance(exc_info.value, FleetSimError)

    def test_lookup_is_case_sensitive(self, registry):
        with pytest.raises(UnknownSiteError):
            registry.policy_of("t4")


class TestRegistryViews:
    def test_site_names_keep_registration_order(self, registry):
        assert registry.site_names == ("T4", "T5", "TBIT")

    def test_vlans_one_per_site(self, registry):
        assert registry.vlans == (100, 200, 300)

    def test_container_protocol(self, registry):
        assert "T4" in registry
        assert "X" not in registry
        assert len(registry) == 3
        assert list(registry) == ["T4", "T5", "TBIT"]

    def test_policy_is_frozen(self, registry):
        with pytest.raises(AttributeError):
            registry.policy_of("T4").vlan = 999  # type: ignore[misc]

    def test_source_mapping_changes_do_not_leak(self):
        source = {"A": SitePolicy(vlan=1, subnet_prefix="10.0.1.")}
        reg = SiteRegistry(source)
        source["B"] = SitePolicy(vlan=2, subnet_prefix="10.0.2.")
        assert "B" not in reg


class TestConstruction:
    def test_empty_registry_rejected(self):
        with pytest.raises(ValueError):
            SiteRegistry({})

    def test_from_config(self):
        reg = SiteRegistry.from_config({
            "LAB": SitePolicyConfig(vlan=42, subnet_prefix="192.168.42."),
        })
        assert reg.policy_of("LAB") == SitePolicy(vlan=42, subnet_prefix="192.168.42.")
