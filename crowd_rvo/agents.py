"""Agent class meant to simplify and standardize state checking (getting
position, velocity, etc) for the RVO crowd."""

from typing import NamedTuple, Tuple

import torch

from crowd_rvo.configs import crowd
from crowd_rvo.vector import Vector2


class AgentState(NamedTuple):
    """What the renderer is allowed to see of an agent."""

    position: Vector2
    velocity: Vector2
    radius: float
    color: str


class Agent:
    """A single disc shaped agent that walks back and forth between two anchors."""

    def __init__(
        self,
        agent_id: str,
        position: Vector2,
        radius: float,
        preferred_speed: float,
        max_speed: float,
        anchors: Tuple[Vector2, Vector2],
        heading_index: int = 1,
        velocity: Vector2 = None,
        color: str = "",
    ) -> None:
        if radius <= 0:
            raise ValueError(f"Agent radius must be positive, got {radius}.")
        if preferred_speed <= 0:
            raise ValueError(
                f"Agent preferred speed must be positive, got {preferred_speed}."
            )
        if max_speed < preferred_speed:
            raise ValueError(
                f"Agent max speed {max_speed} is below preferred speed {preferred_speed}."
            )
        if heading_index not in (0, 1):
            raise ValueError(f"Heading index must be 0 or 1, got {heading_index}.")

        self.agent_id = agent_id
        self.position = position
        self.velocity = Vector2.zero() if velocity is None else velocity
        self.preferred_velocity = Vector2.zero()
        self.radius = radius
        self.preferred_speed = preferred_speed
        self.max_speed = max_speed
        self.anchors = tuple(anchors)
        self.heading_index = heading_index
        self.color = color

    def __repr__(self) -> str:
        return (
            f"Agent({self.agent_id!r}, position={tuple(self.position)}, "
            f"velocity={tuple(self.velocity)}, heading={self.heading_index})"
        )

    def get_position(self) -> Vector2:
        return self.position

    def get_goal_position(self) -> Vector2:
        """The anchor the agent is currently walking towards."""
        return self.anchors[self.heading_index]

    def get_state(self) -> AgentState:
        return AgentState(self.position, self.velocity, self.radius, self.color)

    def get_observable_state(self) -> torch.Tensor:
        """Return what is observable to other agents and the renderer:
        pos_x, pos_y, vel_x, vel_y, radius"""
        return torch.Tensor(
            [
                self.position.x,
                self.position.y,
                self.velocity.x,
                self.velocity.y,
                self.radius,
            ]
        )

    def swap_goal_if_needed(self) -> bool:
        """Flip to the other anchor once the active one is close enough.
        Returns True if the goal changed."""
        swap_distance = max(
            self.radius * crowd.GOAL_SWAP_RADIUS_FACTOR, crowd.MIN_GOAL_SWAP_DISTANCE
        )
        if self.position.dist(self.get_goal_position()) < swap_distance:
            self.heading_index = 1 - self.heading_index
            return True
        return False

    def compute_preferred_velocity(self) -> Vector2:
        """Head straight at the active anchor with the preferred speed. Right on top
        of the goal the preferred velocity is zero."""
        to_goal = self.get_goal_position() - self.position
        distance = to_goal.mag()
        if distance < crowd.GOAL_ARRIVAL_DISTANCE:
            return Vector2.zero()

        return (to_goal * (self.preferred_speed / distance)).limit(self.max_speed)

    def step(self, velocity: Vector2, time_step: float) -> None:
        """Step the agent's position using the supplied velocity vector."""
        self.velocity = velocity
        self.position = self.position + velocity * time_step
