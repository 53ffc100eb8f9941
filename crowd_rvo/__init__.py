"""Expose the RVO crowd simulation."""

from crowd_rvo.rvo_simulation import RVOSimulation
from crowd_rvo.simulation_factory import make_simulation
