"""Reciprocal velocity obstacle (ORCA) crowd model.

Every tick each agent builds one ORCA line per neighbor and solves a small
linear program for the permitted velocity closest to the one it would like to
take. All new velocities are computed before any agent moves, so the outcome
does not depend on the order of the agents.

Please refer to `crowd_rvo/configs/crowd.py` for the constants that control
this model.
"""

import logging
import random
from typing import Iterator, List, Mapping

import torch

from crowd_rvo import agents
from crowd_rvo import linear_program
from crowd_rvo import neighbors
from crowd_rvo import orca
from crowd_rvo import scenarios
from crowd_rvo import simulation_model
from crowd_rvo.configs import crowd
from crowd_rvo.vector import Vector2
from crowd_rvo.visualization import viz

logger = logging.getLogger(__name__)


class RVOSimulation(simulation_model.SimulationModel):
    """Crowd simulation where agents avoid each other with ORCA."""

    def __init__(
        self,
        params: Mapping[str, float] = None,
        scenario: str = "circle",
        rng: random.Random = None,
        seed: int = None,
    ) -> None:
        """Movement simulation for the crowd. `params` is merged over the defaults
        in `crowd.RVO_CFG`. Pass either a random generator or a seed; the global
        random module is never used."""
        super().__init__(crowd.RVO_CFG)
        if params:
            self.configure(params)

        self.scenario = scenario
        self._build_scenario = scenarios.get_scenario(scenario)
        self.rng = rng if rng is not None else random.Random(seed)
        self.seed = seed
        self.agents: List[agents.Agent] = []

    def __str__(self) -> str:
        """Print a verbal description of the simulation. Can be helpful for
        debugging."""
        self_str = f"scenario: {self.scenario}\n"
        self_str += f"arena: {self.width}x{self.height}\n"
        self_str += f"number of agents: {len(self.agents)}\n"
        for key, value in self.params.items():
            self_str += f"{key}: {value}\n"

        return self_str

    def reset(self) -> None:
        """Re-seed the scenario. When built from a seed the generator is re-seeded
        too, so the same agents come back every time."""
        if self.seed is not None:
            self.rng.seed(self.seed)

        self.agents = self._build_scenario(
            self.width, self.height, int(self.params["agent-count"]), self.rng
        )
        logger.info(
            "Seeded %d agents for scenario '%s' in a %sx%s arena.",
            len(self.agents),
            self.scenario,
            self.width,
            self.height,
        )

    def on_resize(self, width: float, height: float) -> None:
        self.reset()

    def update(self, elapsed_seconds: float) -> None:
        """Advance every agent by one tick of at most `crowd.MAX_TIME_STEP`."""
        if elapsed_seconds <= 0 or not self.agents:
            return

        time_step = min(elapsed_seconds, crowd.MAX_TIME_STEP)
        neighbor_radius = self.params["neighbor-radius"] * crowd.PIXELS_PER_METER
        time_horizon = max(self.params["time-horizon"], crowd.MIN_TIME_HORIZON)
        inv_time_horizon = 1 / time_horizon

        for agent in self.agents:
            agent.swap_goal_if_needed()

        neighbor_table = neighbors.build_neighbor_table(
            self.agents,
            neighbor_radius * neighbor_radius,
            int(self.params["max-neighbors"]),
        )

        # Compute everything first, nobody moves until all velocities are known.
        new_velocities = [
            self._compute_velocity(agent, neighbor_list, inv_time_horizon, time_step)
            for agent, neighbor_list in zip(self.agents, neighbor_table)
        ]

        for agent, velocity in zip(self.agents, new_velocities):
            agent.step(velocity, time_step)

    def _compute_velocity(
        self,
        agent: agents.Agent,
        neighbor_list: List[neighbors.NeighborRef],
        inv_time_horizon: float,
        time_step: float,
    ) -> Vector2:
        agent.preferred_velocity = agent.compute_preferred_velocity()
        lines = orca.build_constraints(
            agent, self.agents, neighbor_list, inv_time_horizon, time_step
        )
        return linear_program.solve_velocity(
            lines, agent.max_speed, agent.preferred_velocity
        )

    def agent_states(self) -> Iterator[agents.AgentState]:
        """What the renderer gets to see: position, velocity, radius and color."""
        for agent in self.agents:
            yield agent.get_state()

    def collate_observation(self) -> torch.Tensor:
        """Stack the observable state of every agent into an (N, 5) tensor."""
        if not self.agents:
            return torch.zeros((0, 5))
        return torch.stack([agent.get_observable_state() for agent in self.agents])

    def draw(self, ax) -> None:
        viz.draw_agents(ax, list(self.agent_states()), self.width, self.height)
