"""Root conftest — shared fixtures for all tests."""
from __future__ import annotations

import os
import random

import pytest

# Keep the import-time app from starting a background tick in tests
os.environ.setdefault("SCHEDULER_ENABLED", "false")

from fleet_sim.core.config import Settings  # noqa: E402
from fleet_sim.services.fleet_store import FleetStore  # noqa: E402
from fleet_sim.simulation.sites import SitePolicy, SiteRegistry  # noqa: E402

APPROVED_FIRMWARE = ("10.12.221", "9.80.5")
SEED = 20240615


@pytest.fixture
def registry() -> SiteRegistry:
    """The reference three-site registry."""
    return SiteRegistry({
        "T4": SitePolicy(vlan=100, subnet_prefix="10.51.100."),
        "T5": SitePolicy(vlan=200, subnet_prefix="10.51.200."),
        "TBIT": SitePolicy(vlan=300, subnet_prefix="10.51.300."),
    })


@pytest.fixture
def approved_firmware() -> tuple[str, ...]:
    return APPROVED_FIRMWARE


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(SEED)


@pytest.fixture
def store(registry, approved_firmware, rng) -> FleetStore:
    """Fleet store with 30 cameras."""
    return FleetStore(registry, approved_firmware, rng=rng, initial_size=30)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings with the background tick off and no YAML file."""
    return Settings(
        fleet_size=12,
        max_fleet_size=500,
        scheduler_enabled=False,
        random_seed=SEED,
        fleet_config_path=str(tmp_path / "missing.yaml"),
    )
