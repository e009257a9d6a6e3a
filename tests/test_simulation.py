"""Tests for the projectile simulation and the command-line demo."""

import logging

from raytracer_core.canvas import Canvas
from raytracer_core.color import Color
from raytracer_core.config import SimulationConfig
from raytracer_core.logging_config import setup_logging
from raytracer_core.math_utils import Tuple4
from raytracer_core.simulation import (
    Environment, Projectile, plot_trajectory, run_simulation, simulate, tick,
)

import projectile_demo


def make_env():
    return Environment(gravity=Tuple4.vector(0, -0.1, 0),
                       wind=Tuple4.vector(-0.01, 0, 0))


class TestTick:
    def test_position_and_velocity_update(self):
        p = Projectile(Tuple4.point(0, 1, 0), Tuple4.vector(1, 1, 0))
        nxt = tick(make_env(), p)
        assert nxt.position == Tuple4.point(1, 2, 0)
        assert nxt.velocity == Tuple4.vector(0.99, 0.9, 0)
        assert nxt.position.is_point()
        assert nxt.velocity.is_vector()


class TestSimulate:
    def test_stops_once_on_the_ground(self):
        p = Projectile(Tuple4.point(0, 1, 0), Tuple4.vector(1, 1, 0).normalize())
        states = list(simulate(make_env(), p))
        assert states[0] is p
        assert states[-1].position.y <= 0
        assert all(s.position.y > 0 for s in states[:-1])

    def test_max_ticks_bounds_the_run(self):
        p = Projectile(Tuple4.point(0, 1, 0), Tuple4.vector(0, 1, 0))
        no_gravity = Environment(Tuple4.vector(0, 0, 0), Tuple4.vector(0, 0, 0))
        assert len(list(simulate(no_gravity, p, max_ticks=5))) == 6


class TestPlot:
    def test_flips_y_and_skips_outside(self):
        canvas = Canvas(10, 10)
        red = Color(1, 0, 0)
        positions = [Tuple4.point(2, 3, 0), Tuple4.point(20, 3, 0), Tuple4.point(1, 0, 0)]
        assert plot_trajectory(canvas, positions, red) == 1
        assert canvas.read_pixel(2, 7) == red

    def test_run_simulation_draws_something(self):
        config = SimulationConfig(width=90, height=55, speed=2.0, max_ticks=500)
        canvas = run_simulation(config)
        assert any(c == config.color for c in canvas.pixels)


class TestLogging:
    def test_setup_is_idempotent(self):
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.INFO)
        assert logger.name == "raytracer_core"
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(logging.DEBUG, str(log_file))
        logging.getLogger("raytracer_core.canvas").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding='utf-8')
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


class TestDemo:
    def test_writes_ppm(self, tmp_path):
        out = tmp_path / "arc.ppm"
        code = projectile_demo.main([str(out), "--width", "60", "--height", "40",
                                     "--speed", "2"])
        assert code == 0
        assert out.read_text(encoding='ascii').startswith("P3\n60 40\n255\n")

    def test_bad_color_exit_code(self, tmp_path):
        assert projectile_demo.main([str(tmp_path / "a.ppm"), "--color", "nope"]) == 2

    def test_unwritable_output_exit_code(self, tmp_path):
        out = tmp_path / "missing" / "arc.ppm"
        assert projectile_demo.main([str(out), "--width", "10", "--height", "10"]) == 1
