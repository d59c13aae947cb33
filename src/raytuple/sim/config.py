"""
Configuration module for the projectile simulation.

Loads configuration from a YAML file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

Triple = tuple[float, float, float]


class ProjectileConfig(BaseModel):
    start: Triple = (0.0, 1.1, 0.0)
    velocity: Triple = (1.0, 1.0, 0.0)  # direction only, normalized before use
    speed: float = Field(default=1.0, gt=0.0)


class EnvironmentConfig(BaseModel):
    gravity: Triple = (0.0, -0.1, 0.0)
    wind: Triple = (-0.01, 0.0, 0.0)


class SimulationConfig(BaseModel):
    projectile: ProjectileConfig = ProjectileConfig()
    environment: EnvironmentConfig = EnvironmentConfig()
    max_ticks: int = Field(default=10_000, gt=0)
    debug: bool = False

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "SimulationConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
