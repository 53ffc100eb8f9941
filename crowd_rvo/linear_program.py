"""Incremental 2D linear programs over ORCA half-planes.

The lines are added one at a time. Whenever the current answer breaks a new
line the optimum is moved onto that line, clipped by every earlier line and by
the max speed disk. If no velocity satisfies every line, `linear_program3`
finds the velocity that breaks the lines the least.

All of this is total: nothing in here raises for degenerate geometry."""

import logging
from typing import List, Sequence, Tuple

from crowd_rvo.orca import EPSILON, OrcaLine
from crowd_rvo.vector import Vector2, det, perp

logger = logging.getLogger(__name__)


def linear_program1(
    lines: Sequence[OrcaLine],
    line_no: int,
    radius: float,
    opt_velocity: Vector2,
    direction_opt: bool,
    result: Vector2,
) -> Tuple[bool, Vector2]:
    """Optimize on the line `lines[line_no]` subject to the lines before it and the
    speed disk. Returns (success, result); `result` is unchanged on failure."""
    line = lines[line_no]
    dot_product = line.point.dot(line.direction)
    discriminant = dot_product * dot_product + radius * radius - line.point.abs_sq()

    if discriminant < 0:
        # The max speed circle fully invalidates this line.
        return False, result

    sqrt_discriminant = discriminant ** 0.5
    t_left = -dot_product - sqrt_discriminant
    t_right = -dot_product + sqrt_discriminant

    for i in range(line_no):
        denominator = det(line.direction, lines[i].direction)
        numerator = det(lines[i].direction, line.point - lines[i].point)

        if abs(denominator) <= EPSILON:
            # Parallel lines.
            if numerator < 0:
                return False, result
            continue

        t = numerator / denominator
        if denominator >= 0:
            t_right = min(t_right, t)
        else:
            t_left = max(t_left, t)

        if t_left > t_right:
            return False, result

    if direction_opt:
        if opt_velocity.dot(line.direction) > 0:
            return True, line.point + line.direction * t_right
        return True, line.point + line.direction * t_left

    t = line.direction.dot(opt_velocity - line.point)
    if t < t_left:
        return True, line.point + line.direction * t_left
    if t > t_right:
        return True, line.point + line.direction * t_right
    return True, line.point + line.direction * t


def linear_program2(
    lines: Sequence[OrcaLine],
    radius: float,
    opt_velocity: Vector2,
    direction_opt: bool = False,
) -> Tuple[int, Vector2]:
    """Solve the full program. Returns (line_fail, result) where `line_fail` is the
    index of the first line that could not be satisfied, or `len(lines)`."""
    if direction_opt:
        # `opt_velocity` is a unit direction here.
        result = opt_velocity * radius
    elif opt_velocity.abs_sq() > radius * radius:
        result = opt_velocity.normalize() * radius
    else:
        result = opt_velocity

    for i, line in enumerate(lines):
        if det(line.direction, line.point - result) > 0:
            # The result breaks constraint i.
            previous_result = result
            success, result = linear_program1(
                lines, i, radius, opt_velocity, direction_opt, result
            )
            if not success:
                return i, previous_result

    return len(lines), result


def linear_program3(
    lines: Sequence[OrcaLine],
    num_obstacle_lines: int,
    begin_line: int,
    radius: float,
    result: Vector2,
) -> Vector2:
    """Find the velocity that minimizes the largest violation of the lines from
    `begin_line` onward. The first `num_obstacle_lines` lines are kept hard."""
    distance = 0.0

    for i in range(begin_line, len(lines)):
        line = lines[i]
        if det(line.direction, line.point - result) <= distance:
            continue

        # The result breaks this line by more than the current worst violation.
        projected_lines: List[OrcaLine] = list(lines[:num_obstacle_lines])

        for j in range(num_obstacle_lines, i):
            other = lines[j]
            determinant = det(line.direction, other.direction)

            if abs(determinant) <= EPSILON:
                if line.direction.dot(other.direction) > 0:
                    # Same direction, the earlier line adds nothing.
                    continue
                point = (line.point + other.point) * 0.5
            else:
                point = line.point + line.direction * (
                    det(other.direction, line.point - other.point) / determinant
                )

            direction = (other.direction - line.direction).normalize()
            projected_lines.append(OrcaLine(point, direction))

        previous_result = result
        line_fail, result = linear_program2(
            projected_lines, radius, perp(line.direction), direction_opt=True
        )
        if line_fail < len(projected_lines):
            # In principle this cannot happen. Only round off gets here, keep the
            # previous result.
            result = previous_result

        distance = det(line.direction, line.point - result)

    return result


def solve_velocity(
    lines: Sequence[OrcaLine], max_speed: float, preferred_velocity: Vector2
) -> Vector2:
    """The permitted velocity closest to `preferred_velocity`, or the least bad one
    when the lines leave no permitted velocity."""
    line_fail, result = linear_program2(lines, max_speed, preferred_velocity)
    if line_fail < len(lines):
        logger.debug(
            "Infeasible at line %d of %d, falling back to least violation.",
            line_fail,
            len(lines),
        )
        result = linear_program3(lines, 0, line_fail, max_speed, result)

    return result.limit(max_speed)
