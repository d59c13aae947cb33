"""Projectile under gravity and wind, stepped with Tuple arithmetic."""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import cast

import msgpack
from pydantic import BaseModel, ConfigDict

from ..core.tuples import Tuple, point, vector
from .config import EnvironmentConfig, ProjectileConfig

logger = logging.getLogger(__name__)


class SimulationError(RuntimeError):
    """Raised when a projectile does not land within the tick budget."""

    pass


class Projectile(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: Tuple  # point
    velocity: Tuple  # vector

    @classmethod
    def from_config(cls, config: ProjectileConfig) -> "Projectile":
        return cls(
            position=point(*config.start),
            velocity=vector(*config.velocity).normalize() * config.speed,
        )


class Environment(BaseModel):
    model_config = ConfigDict(frozen=True)

    gravity: Tuple  # vector
    wind: Tuple  # vector

    @classmethod
    def from_config(cls, config: EnvironmentConfig) -> "Environment":
        return cls(gravity=vector(*config.gravity), wind=vector(*config.wind))


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one step."""
    position = proj.position + proj.velocity
    velocity = proj.velocity + env.gravity + env.wind
    return Projectile(position=position, velocity=velocity)


def simulate(
    env: Environment, proj: Projectile, max_ticks: int = 10_000
) -> Iterator[tuple[int, Projectile]]:
    """
    Step the projectile until it reaches the ground.

    Yields ``(tick_number, projectile)`` after every step, numbered from 1.
    The last state yielded is the first one with ``position.y <= 0``.

    Raises:
        SimulationError: If the projectile is still airborne after max_ticks steps.
    """
    for ticks in range(1, max_ticks + 1):
        proj = tick(env, proj)
        logger.debug(f"Tick {ticks}: position={proj.position.to_array()}")
        yield ticks, proj
        if proj.position.y <= 0.0:
            logger.info(f"Projectile landed after {ticks} ticks at x={proj.position.x}")
            return

    raise SimulationError(f"Projectile did not land within {max_ticks} ticks")


def save_trajectory(path: Path | str, states: Sequence[Projectile]) -> None:
    """Write projectile states to ``path`` as a single msgpack document."""
    path = Path(path)
    path.write_bytes(cast(bytes, msgpack.packb([state.model_dump() for state in states])))
    logger.info(f"Wrote {len(states)} states to {path}")


def load_trajectory(path: Path | str) -> list[Projectile]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trajectory file not found: {path}")

    data = msgpack.unpackb(path.read_bytes())
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of states, got {type(data).__name__}")
    return [Projectile.model_validate(state) for state in data]
