#
# PROJECT: raytracer-core
# MODULE: raytracer_core/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .color import Color, parse_hex_color


@dataclass(frozen=True)
class PpmConfig:
    """Constants of the plain-text PPM ("P3") encoding."""
    max_line_width: int = 70
    max_color_value: int = 255
    separator: str = ' '

    def __post_init__(self):
        if self.max_color_value <= 0:
            raise ValueError("max_color_value must be positive")
        if len(self.separator) != 1 or self.separator == '\n':
            raise ValueError("separator must be a single non-newline character")
        # Widest token is the max value's digits plus one separator.
        if self.max_line_width < len(str(self.max_color_value)) + 1:
            raise ValueError("max_line_width cannot hold a single channel value")


@dataclass
class SimulationConfig:
    """Settings for the projectile trajectory demo."""
    width: int = 900
    height: int = 550
    start: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    direction: Tuple[float, float, float] = (1.0, 1.8, 0.0)
    speed: float = 11.25
    gravity: Tuple[float, float, float] = (0.0, -0.1, 0.0)
    wind: Tuple[float, float, float] = (-0.01, 0.0, 0.0)
    max_ticks: int = 10000
    color: Color = field(default_factory=lambda: Color(1.0, 0.8, 0.6))
    output: str = 'projectile.ppm'
    ppm: Optional[PpmConfig] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.max_ticks < 0:
            raise ValueError("max_ticks must not be negative")
        if self.ppm is None:
            self.ppm = PpmConfig()

    @classmethod
    def from_args(cls, args) -> 'SimulationConfig':
        """Build a config from parsed CLI arguments (see projectile_demo.py)."""
        color = parse_hex_color(args.color)
        if color is None:
            raise ValueError(f"invalid color {args.color!r}, expected #RRGGBB")
        return cls(
            width=args.width,
            height=args.height,
            speed=args.speed,
            gravity=(0.0, -args.gravity, 0.0),
            wind=(args.wind, 0.0, 0.0),
            max_ticks=args.max_ticks,
            color=color,
            output=args.output,
        )
