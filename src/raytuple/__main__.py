"""Command line driver: fire a projectile and report its height every tick."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from .sim.config import SimulationConfig
from .sim.projectile import (
    Environment,
    Projectile,
    SimulationError,
    save_trajectory,
    simulate,
)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    formatter = logging.Formatter("[%(levelname)s] [%(name)s]: %(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Projectile simulation on homogeneous tuples")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument("--dump", type=str, help="Write the trajectory to this msgpack file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    load_dotenv()

    config_path = args.config or os.getenv("RAYTUPLE_CONFIG")
    try:
        config = SimulationConfig.from_yaml(config_path)
    except (FileNotFoundError, ValidationError) as e:
        configure_logging(args.debug)
        logger.error(f"Failed to load configuration: {e}")
        return 1

    configure_logging(args.debug or config.debug)

    projectile = Projectile.from_config(config.projectile)
    environment = Environment.from_config(config.environment)
    logger.info(
        f"Starting at {projectile.position.to_array()} "
        f"with velocity {projectile.velocity.to_array()}"
    )

    exit_code = 0
    trajectory = [projectile]
    try:
        for ticks, projectile in simulate(environment, projectile, config.max_ticks):
            trajectory.append(projectile)
            print(f"Ticks: {ticks}, Projectile Y position: {projectile.position.y}")
    except SimulationError as e:
        logger.error(str(e))
        exit_code = 1

    if args.dump:
        try:
            save_trajectory(args.dump, trajectory)
        except OSError as e:
            logger.error(f"Failed to write trajectory to {args.dump}: {e}")
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
