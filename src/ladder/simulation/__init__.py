"""Ladder progression simulation."""

from ladder.simulation.progression import (
    ProgressionSimulator,
    SimulationResult,
    SimulationStep,
    simulate_progression,
)

__all__ = [
    "ProgressionSimulator",
    "SimulationResult",
    "SimulationStep",
    "simulate_progression",
]
