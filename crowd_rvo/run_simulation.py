#!/usr/bin/env python3
"""Run a crowd simulation headless and save the result as a gif."""

import argparse
import logging
import pathlib

from crowd_rvo import config
from crowd_rvo import simulation_factory
from crowd_rvo.visualization import viz

_DEFAULT_CONFIG = pathlib.Path(__file__).parent / "config.yaml"


def run(cfg: dict, steps: int = None):
    """Build the simulation described by `cfg` and step it. Returns the simulation
    and the agent states recorded after every step."""
    sim_cfg = cfg.get("simulation")
    simulation = simulation_factory.make_simulation(
        sim_cfg.get("model"),
        cfg.get("rvo"),
        scenario=sim_cfg.get("scenario"),
        seed=sim_cfg.get("seed"),
    )
    simulation.resize(sim_cfg.get("world-width"), sim_cfg.get("world-height"))
    print(simulation)

    steps = sim_cfg.get("steps") if steps is None else steps
    history = [list(simulation.agent_states())]
    for step in range(steps):
        simulation.update(sim_cfg.get("time-step"))
        history.append(list(simulation.agent_states()))
        if (step + 1) % 100 == 0:
            print(f">> Step {step + 1}/{steps}.")

    return simulation, history


if __name__ == "__main__":
    parser = argparse.ArgumentParser(__doc__)
    parser.add_argument("--config_path", type=pathlib.Path, default=_DEFAULT_CONFIG)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument(
        "--save_path", type=pathlib.Path, default=pathlib.Path("gifs/crowd.gif")
    )
    parser.add_argument("--log_level", type=str, default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run_cfg = config.load_config(args.config_path)
    simulation, history = run(run_cfg, args.steps)

    print(f"Writing {len(history)} frames to {args.save_path}.")
    viz.plot_history(history, simulation.width, simulation.height, args.save_path)
