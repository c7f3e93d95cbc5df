"""
Services package.

Provides the fleet store and the background simulation scheduler.
"""
from fleet_sim.services.fleet_store import FleetStore
from fleet_sim.services.scheduler import SimulationScheduler

__all__ = [
    "FleetStore",
    "SimulationScheduler",
]
