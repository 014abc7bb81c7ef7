"""Application simulation – random event source and bus wiring."""
from vendbus.application.simulation.generator import RandomEventGenerator
from vendbus.application.simulation.runner import (
    Simulation,
    SimulationReport,
    Wiring,
    build_registry,
    wire,
)

__all__ = [
    "RandomEventGenerator",
    "Simulation",
    "SimulationReport",
    "Wiring",
    "build_registry",
    "wire",
]
