"""Pytest fixtures shared by the crowd_rvo tests."""

import pytest

from crowd_rvo import agents
from crowd_rvo.rvo_simulation import RVOSimulation
from crowd_rvo.vector import Vector2


@pytest.fixture
def make_agent():
    """Build an agent with sensible defaults, anything can be overridden."""

    def _make_agent(
        position=(0.0, 0.0),
        velocity=(0.0, 0.0),
        radius=1.0,
        preferred_speed=1.0,
        max_speed=2.0,
        goal=(100.0, 0.0),
        agent_id="agent",
    ):
        position = Vector2(*position)
        return agents.Agent(
            agent_id=agent_id,
            position=position,
            radius=radius,
            preferred_speed=preferred_speed,
            max_speed=max_speed,
            anchors=(position, Vector2(*goal)),
            heading_index=1,
            velocity=Vector2(*velocity),
        )

    return _make_agent


@pytest.fixture
def circle_simulation():
    """The default 32 agent circle scenario in an 800x600 arena."""
    simulation = RVOSimulation(seed=0)
    simulation.resize(800, 600)
    return simulation


@pytest.fixture
def pairwise_gap():
    """Smallest distance between agent centers minus their combined radius."""

    def _pairwise_gap(crowd_agents):
        gap = float("inf")
        for i in range(len(crowd_agents)):
            for j in range(i + 1, len(crowd_agents)):
                a, b = crowd_agents[i], crowd_agents[j]
                gap = min(gap, a.position.dist(b.position) - (a.radius + b.radius))
        return gap

    return _pairwise_gap
