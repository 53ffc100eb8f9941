"""Scenarios that seed the RVO crowd.

Each scenario takes the arena size, the number of agents and a seeded random
generator and returns a fresh list of agents. Every agent walks between two
anchors, so the crowd keeps moving for as long as the simulation runs."""

import random
from typing import Callable, Dict, List

import numpy as np

from crowd_rvo import agents
from crowd_rvo.configs import crowd
from crowd_rvo.vector import Vector2


def _make_agent(
    index: int,
    anchor_a: Vector2,
    anchor_b: Vector2,
    rng: random.Random,
    prefix: str = "rvo",
    position: Vector2 = None,
) -> agents.Agent:
    """Place an agent at `anchor_a`, or at `position` if given, heading for
    `anchor_b`."""
    preferred_speed = (
        crowd.MIN_PREFERRED_SPEED + rng.random() * crowd.PREFERRED_SPEED_SPREAD
    ) * crowd.PIXELS_PER_METER

    return agents.Agent(
        agent_id=f"{prefix}-{index}",
        position=anchor_a if position is None else position,
        radius=crowd.AGENT_RADIUS_METERS * crowd.PIXELS_PER_METER,
        preferred_speed=preferred_speed,
        max_speed=preferred_speed * crowd.MAX_SPEED_FACTOR,
        anchors=(anchor_a, anchor_b),
        heading_index=1,
        color=f"hsl({180 + index * 5}, 70%, 60%)",
    )


def circle_scenario(
    width: float, height: float, agent_count: int, rng: random.Random
) -> List[agents.Agent]:
    """Agents evenly spaced on a circle, each walking to the opposite point.

    The anchors sit exactly on the circle. Start positions are jittered by up to
    `crowd.CIRCLE_START_JITTER` pixels so the crowd can get past the centre."""
    if width == 0 or height == 0:
        return []

    center = Vector2(width / 2, height / 2)
    radius = min(width, height) * crowd.CIRCLE_SCENARIO_FRACTION
    jitter = crowd.CIRCLE_START_JITTER

    crowd_agents = []
    angles = np.linspace(0, 2 * np.pi, agent_count, endpoint=False)
    for idx, angle in enumerate(angles):
        direction = Vector2(float(np.cos(angle)), float(np.sin(angle)))
        anchor_a = center + direction * radius
        anchor_b = center - direction * radius
        offset = Vector2(rng.uniform(-jitter, jitter), rng.uniform(-jitter, jitter))
        crowd_agents.append(
            _make_agent(idx, anchor_a, anchor_b, rng, position=anchor_a + offset)
        )

    return crowd_agents


def opposing_groups_scenario(
    width: float, height: float, agent_count: int, rng: random.Random
) -> List[agents.Agent]:
    """Two blocks of agents on the left and right edges swap sides.

    The right block is shifted down half a row so the agents do not meet exactly
    head on."""
    if width == 0 or height == 0:
        return []

    agent_radius = crowd.AGENT_RADIUS_METERS * crowd.PIXELS_PER_METER
    spacing = agent_radius * 4.5
    margin = spacing
    rows = max(1, int((height - 2 * margin) // spacing))

    crowd_agents = []
    for idx in range(agent_count):
        group, member = idx % 2, idx // 2
        column, row = member // rows, member % rows

        x = margin + column * spacing
        y = margin + row * spacing
        if group == 0:
            anchor_a = Vector2(x, y)
            anchor_b = Vector2(width - x, y)
        else:
            y += spacing / 2
            anchor_a = Vector2(width - x, y)
            anchor_b = Vector2(x, y)
        crowd_agents.append(_make_agent(idx, anchor_a, anchor_b, rng))

    return crowd_agents


def head_on_scenario(
    width: float, height: float, agent_count: int, rng: random.Random
) -> List[agents.Agent]:
    """Two agents walking at each other. Their paths cross in the middle of the
    arena; the second path is tilted slightly, perfectly collinear agents only
    creep towards each other. `agent_count` is ignored."""
    if width == 0 or height == 0:
        return []

    tilt = height * 0.05
    return [
        _make_agent(
            0, Vector2(width * 0.25, height / 2), Vector2(width * 0.75, height / 2), rng
        ),
        _make_agent(
            1,
            Vector2(width * 0.75, height / 2 + tilt),
            Vector2(width * 0.25, height / 2 - tilt),
            rng,
        ),
    ]


SCENARIOS: Dict[str, Callable[..., List[agents.Agent]]] = {
    "circle": circle_scenario,
    "opposing_groups": opposing_groups_scenario,
    "head_on": head_on_scenario,
}


def get_scenario(scenario_key: str) -> Callable[..., List[agents.Agent]]:
    if scenario_key not in SCENARIOS:
        raise KeyError(
            f"Unknown scenario '{scenario_key}', expected one of {sorted(SCENARIOS)}."
        )
    return SCENARIOS[scenario_key]
