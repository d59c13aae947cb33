"""Projectile simulation driven by the Tuple kernel."""

from .config import EnvironmentConfig, ProjectileConfig, SimulationConfig
from .projectile import (
    Environment,
    Projectile,
    SimulationError,
    load_trajectory,
    save_trajectory,
    simulate,
    tick,
)

__all__ = [
    "EnvironmentConfig",
    "ProjectileConfig",
    "SimulationConfig",
    "Environment",
    "Projectile",
    "SimulationError",
    "load_trajectory",
    "save_trajectory",
    "simulate",
    "tick",
]
