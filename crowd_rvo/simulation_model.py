"""This is a template that defines the required functions to add for any new crowd
model. The host loop only talks to a model through these functions, which keeps
the models swappable."""

import abc
from typing import Dict, Mapping

from crowd_rvo import config


class SimulationModel(abc.ABC):
    """A basic crowd model class. Holds the arena size and the parameter map, which
    are the only state shared with the host."""

    def __init__(self, params: Mapping[str, float] = None) -> None:
        self.width = 0
        self.height = 0
        self.params: Dict[str, float] = dict(params or {})

    def resize(self, width: float, height: float) -> None:
        """Set the arena size and re-seed the scenario."""
        if width < 0 or height < 0:
            raise ValueError(f"Arena size must not be negative, got {width}x{height}.")
        self.width = width
        self.height = height
        self.on_resize(width, height)

    def configure(self, overrides: Mapping[str, float]) -> None:
        """Merge parameter overrides into the current parameters."""
        self.params = config.merge_parameters(self.params, overrides)
        self.on_params_update()

    @abc.abstractmethod
    def update(self, elapsed_seconds: float) -> None:
        """Advance the model by one tick."""

        return NotImplementedError

    @abc.abstractmethod
    def draw(self, ax) -> None:
        """Draw the current state on a matplotlib axes."""

        return NotImplementedError

    @abc.abstractmethod
    def reset(self) -> None:
        """Rebuild the scenario from scratch."""

        return NotImplementedError

    def on_params_update(self) -> None:
        """Optional hook for subclasses."""

    def on_resize(self, width: float, height: float) -> None:
        """Optional hook for subclasses."""
