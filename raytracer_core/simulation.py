#
# PROJECT: raytracer-core
# MODULE: raytracer_core/simulation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import dataclass

from .canvas import Canvas
from .color import Color
from .config import SimulationConfig
from .math_utils import Tuple4

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Projectile:
    position: Tuple4  # point
    velocity: Tuple4  # vector


@dataclass(frozen=True)
class Environment:
    gravity: Tuple4
    wind: Tuple4


def tick(env: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + env.gravity + env.wind,
    )


def simulate(env: Environment, projectile: Projectile, max_ticks: int = 10000):
    """Yield the starting projectile, then each tick while it stays above ground.

    The first state at or below y = 0 is yielded as well, so the landing
    point is part of the trajectory. Stops after max_ticks steps in any case.
    """
    yield projectile
    ticks = 0
    while projectile.position.y > 0 and ticks < max_ticks:
        projectile = tick(env, projectile)
        ticks += 1
        yield projectile


def plot_trajectory(canvas: Canvas, positions, color: Color) -> int:
    """
    Mark each world position on the canvas.

    World y grows upwards while canvas rows grow downwards, so y is
    flipped. Positions that fall outside the canvas are skipped.
    Returns the number of pixels written.
    """
    plotted = 0
    for pos in positions:
        px = round(pos.x)
        py = canvas.height - round(pos.y)
        if 0 <= px < canvas.width and 0 <= py < canvas.height:
            canvas.write_pixel(px, py, color)
            plotted += 1
    return plotted


def run_simulation(config: SimulationConfig) -> Canvas:
    """Simulate a launch with the given settings and plot it on a new canvas."""
    projectile = Projectile(
        position=Tuple4.point(*config.start),
        velocity=Tuple4.vector(*config.direction).normalize() * config.speed,
    )
    env = Environment(
        gravity=Tuple4.vector(*config.gravity),
        wind=Tuple4.vector(*config.wind),
    )

    positions = [p.position for p in simulate(env, projectile, config.max_ticks)]
    logger.debug("Trajectory has %d positions", len(positions))

    canvas = Canvas(config.width, config.height)
    plotted = plot_trajectory(canvas, positions, config.color)
    if plotted < len(positions):
        logger.info("%d of %d positions fell outside the %dx%d canvas",
                    len(positions) - plotted, len(positions),
                    config.width, config.height)
    return canvas
