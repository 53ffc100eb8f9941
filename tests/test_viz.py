"""Tests for the gif renderer."""

import pytest

from crowd_rvo.rvo_simulation import RVOSimulation
from crowd_rvo.visualization import viz


class TestViz:
    def test_to_rgb(self):
        assert viz.to_rgb("hsl(200, 70%, 100%)") == pytest.approx((1.0, 1.0, 1.0))
        assert viz.to_rgb("red") == (1.0, 0.0, 0.0)
        assert viz.to_rgb("") == pytest.approx(viz.to_rgb("tab:cyan"))

    def test_plot_state(self, circle_simulation):
        image = viz.plot_state(
            list(circle_simulation.agent_states()),
            circle_simulation.width,
            circle_simulation.height,
        )
        assert image.ndim == 3
        assert image.shape[2] == 3

    def test_plot_history(self, tmp_path):
        simulation = RVOSimulation({"agent-count": 4}, seed=0)
        simulation.resize(200, 150)
        history = [list(simulation.agent_states())]
        simulation.update(0.05)
        history.append(list(simulation.agent_states()))

        save_path = tmp_path / "gifs" / "crowd.gif"
        viz.plot_history(history, simulation.width, simulation.height, save_path)

        assert save_path.exists()
        assert save_path.stat().st_size > 0

    def test_simulation_draws_every_agent(self, circle_simulation):
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots()
        circle_simulation.draw(ax)
        assert len(ax.patches) == len(circle_simulation.agents)
        plt.close(fig)
