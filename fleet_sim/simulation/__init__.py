"""
Fleet simulation core.

- sites: site registry (name -> VLAN / subnet policy)
- generator: builds a fresh fleet
- engine: one randomized tick with fault injection
- metrics: fleet health counters
"""
from fleet_sim.simulation.engine import link_local_ip, tick
from fleet_sim.simulation.generator import generate_fleet
from fleet_sim.simulation.metrics import summarize
from fleet_sim.simulation.sites import SitePolicy, SiteRegistry

__all__ = [
    "SitePolicy",
    "SiteRegistry",
    "generate_fleet",
    "link_local_ip",
    "summarize",
    "tick",
]
