"""Build the ORCA half-plane constraints for an agent.

Each neighbor contributes one line in velocity space. Velocities to the left of
the directed line are permitted. The agent takes half of the avoidance effort
and trusts the neighbor to take the other half."""

from typing import List, NamedTuple, Sequence, Tuple

from crowd_rvo import agents
from crowd_rvo import neighbors
from crowd_rvo.vector import Vector2, det, perp

# Threshold for treating vectors as zero length or lines as parallel. This is a
# tuning value for float round off, not an error condition.
EPSILON = 1e-5

_FALLBACK_DIRECTION = Vector2(1.0, 0.0)


class OrcaLine(NamedTuple):
    point: Vector2
    direction: Vector2


def ensure_direction(direction: Vector2) -> Vector2:
    """Normalize `direction`, falling back to the x axis for degenerate input."""
    if direction.abs_sq() <= EPSILON:
        return _FALLBACK_DIRECTION
    return direction.normalize()


def _cutoff_projection(
    relative_position: Vector2,
    w: Vector2,
    combined_radius: float,
    inv_time: float,
) -> Tuple[Vector2, Vector2]:
    """Project onto the circular cut-off of the truncated velocity obstacle.
    Returns the line direction and the velocity change u."""
    w_length = w.mag()
    if w_length > EPSILON:
        unit_w = w * (1 / w_length)
    else:
        unit_w = relative_position.normalize()

    # Clockwise of w so the permitted side is the one facing away from the cut-off.
    direction = -perp(unit_w)
    u = unit_w * (combined_radius * inv_time - w_length)
    return direction, u


def compute_agent_constraint(
    agent: agents.Agent,
    other: agents.Agent,
    inv_time_horizon: float,
    time_step: float,
) -> OrcaLine:
    """The ORCA line `agent` has to respect to stay clear of `other`."""
    relative_position = other.position - agent.position
    relative_velocity = agent.velocity - other.velocity
    dist_sq = relative_position.abs_sq()
    combined_radius = agent.radius + other.radius
    combined_radius_sq = combined_radius * combined_radius

    if dist_sq > combined_radius_sq:
        # No collision yet.
        w = relative_velocity - relative_position * inv_time_horizon
        w_length_sq = w.abs_sq()
        dot_product = w.dot(relative_position)

        if dot_product < 0 and dot_product * dot_product > combined_radius_sq * w_length_sq:
            direction, u = _cutoff_projection(
                relative_position, w, combined_radius, inv_time_horizon
            )
        else:
            leg = max(0.0, dist_sq - combined_radius_sq) ** 0.5
            if det(relative_position, w) > 0:
                # Left leg.
                direction = Vector2(
                    relative_position.x * leg - relative_position.y * combined_radius,
                    relative_position.x * combined_radius + relative_position.y * leg,
                ) * (1 / dist_sq)
            else:
                # Right leg.
                direction = Vector2(
                    -relative_position.x * leg - relative_position.y * combined_radius,
                    relative_position.x * combined_radius - relative_position.y * leg,
                ) * (1 / dist_sq)
            direction = direction.normalize()
            u = direction * relative_velocity.dot(direction) - relative_velocity
    else:
        # Already overlapping, resolve within this time step.
        inv_time_step = 1 / time_step if time_step > 0 else 0.0
        w = relative_velocity - relative_position * inv_time_step
        direction, u = _cutoff_projection(
            relative_position, w, combined_radius, inv_time_step
        )

    return OrcaLine(agent.velocity + u * 0.5, ensure_direction(direction))


def build_constraints(
    agent: agents.Agent,
    crowd_agents: Sequence[agents.Agent],
    neighbor_list: Sequence[neighbors.NeighborRef],
    inv_time_horizon: float,
    time_step: float,
) -> List[OrcaLine]:
    """One ORCA line per neighbor, nearest neighbor first."""
    return [
        compute_agent_constraint(
            agent, crowd_agents[neighbor.index], inv_time_horizon, time_step
        )
        for neighbor in neighbor_list
    ]
