"""Tests for the incremental linear programs."""

import math

import pytest

from crowd_rvo import linear_program
from crowd_rvo.orca import OrcaLine
from crowd_rvo.vector import Vector2, det

# Permitted: y >= 1.
ABOVE_ONE = OrcaLine(Vector2(0.0, 1.0), Vector2(1.0, 0.0))
# Permitted: y <= -1.
BELOW_MINUS_ONE = OrcaLine(Vector2(0.0, -1.0), Vector2(-1.0, 0.0))
# Permitted: x <= 0.5.
LEFT_OF_HALF = OrcaLine(Vector2(0.5, 0.0), Vector2(0.0, 1.0))


class TestLinearProgram1:
    def test_projects_preferred_velocity_onto_line(self):
        success, result = linear_program.linear_program1(
            [ABOVE_ONE], 0, 2.0, Vector2(0.5, 5.0), False, Vector2.zero()
        )
        assert success
        assert result == Vector2(0.5, 1.0)

    def test_projection_is_clipped_to_speed_disk(self):
        success, result = linear_program.linear_program1(
            [ABOVE_ONE], 0, 2.0, Vector2(3.0, 5.0), False, Vector2.zero()
        )
        assert success
        assert result.x == pytest.approx(math.sqrt(3.0))
        assert result.y == pytest.approx(1.0)
        assert result.mag() == pytest.approx(2.0)

    def test_direction_mode_picks_interval_end(self):
        success, result = linear_program.linear_program1(
            [ABOVE_ONE], 0, 2.0, Vector2(-1.0, 0.0), True, Vector2.zero()
        )
        assert success
        assert result.x == pytest.approx(-math.sqrt(3.0))

    def test_line_outside_speed_disk_fails(self):
        line = OrcaLine(Vector2(0.0, 3.0), Vector2(1.0, 0.0))
        previous = Vector2(0.1, 0.2)
        success, result = linear_program.linear_program1(
            [line], 0, 2.0, Vector2.zero(), False, previous
        )
        assert not success
        assert result == previous

    def test_earlier_lines_clip_the_interval(self):
        success, result = linear_program.linear_program1(
            [LEFT_OF_HALF, ABOVE_ONE], 1, 2.0, Vector2(1.5, 0.0), False, Vector2.zero()
        )
        assert success
        assert result.x == pytest.approx(0.5)
        assert result.y == pytest.approx(1.0)

    def test_parallel_opposing_lines_fail(self):
        success, _ = linear_program.linear_program1(
            [ABOVE_ONE, BELOW_MINUS_ONE], 1, 2.0, Vector2.zero(), False, Vector2.zero()
        )
        assert not success


class TestLinearProgram2:
    def test_no_lines_clamps_to_speed(self):
        line_fail, result = linear_program.linear_program2([], 1.0, Vector2(3.0, 4.0))
        assert line_fail == 0
        assert result.x == pytest.approx(0.6)
        assert result.y == pytest.approx(0.8)

    def test_untouched_when_already_permitted(self):
        line_fail, result = linear_program.linear_program2(
            [ABOVE_ONE], 2.0, Vector2(0.0, 1.5)
        )
        assert line_fail == 1
        assert result == Vector2(0.0, 1.5)

    def test_moves_onto_violated_line(self):
        line_fail, result = linear_program.linear_program2(
            [ABOVE_ONE, LEFT_OF_HALF], 2.0, Vector2(1.0, 0.0)
        )
        assert line_fail == 2
        assert result.x == pytest.approx(0.5)
        assert result.y == pytest.approx(1.0)

    def test_reports_first_failing_line(self):
        line_fail, result = linear_program.linear_program2(
            [ABOVE_ONE, BELOW_MINUS_ONE], 2.0, Vector2.zero()
        )
        assert line_fail == 1
        assert result == Vector2(0.0, 1.0)


class TestSolveVelocity:
    def test_infeasible_lines_split_the_violation(self):
        lines = [ABOVE_ONE, BELOW_MINUS_ONE]
        result = linear_program.solve_velocity(lines, 2.0, Vector2.zero())

        assert result.mag() <= 2.0 + 1e-9
        violations = [det(line.direction, line.point - result) for line in lines]
        assert violations[0] == pytest.approx(violations[1])
        assert result.y == pytest.approx(0.0)

    def test_feasible_lines_keep_preferred_velocity(self):
        result = linear_program.solve_velocity([ABOVE_ONE], 2.0, Vector2(0.3, 1.2))
        assert result == Vector2(0.3, 1.2)

    def test_result_never_exceeds_max_speed(self):
        lines = [
            OrcaLine(Vector2(0.0, 1.0), Vector2(1.0, 0.0)),
            OrcaLine(Vector2(0.0, 1.9), Vector2(1.0, 0.0)),
            OrcaLine(Vector2(1.5, 0.0), Vector2(0.0, 1.0)),
        ]
        result = linear_program.solve_velocity(lines, 2.0, Vector2(5.0, 5.0))
        assert result.mag() <= 2.0 + 1e-9
