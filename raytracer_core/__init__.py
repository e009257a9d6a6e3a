#
# PROJECT: raytracer-core
# MODULE: raytracer_core/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import FLOAT_EQ_EPS, float_eq, Tuple4
from .matrix import SquareMatrix, Matrix2, Matrix3, Matrix4
from .color import Color, parse_hex_color, channel_to_byte
from .canvas import Canvas
from .config import PpmConfig, SimulationConfig
from .logging_config import setup_logging
from .simulation import Projectile, Environment, tick, simulate, plot_trajectory, run_simulation
