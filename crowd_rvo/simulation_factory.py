"""A file to collate all the available crowd models and provide an
interface for using them."""

from typing import Any, Mapping

from crowd_rvo import rvo_simulation
from crowd_rvo import simulation_model

simulations = {
    "rvo": rvo_simulation.RVOSimulation,
}


def get_simulation(simulation_key: str) -> Any:
    if simulation_key not in simulations:
        raise KeyError(
            f"Unknown simulation '{simulation_key}', expected one of {sorted(simulations)}."
        )
    return simulations[simulation_key]


def make_simulation(
    simulation_key: str, params: Mapping[str, float] = None, **kwargs
) -> simulation_model.SimulationModel:
    simulation = get_simulation(simulation_key)
    return simulation(params, **kwargs)
