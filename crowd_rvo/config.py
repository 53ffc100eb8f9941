"""Load run configurations and merge parameter overrides for the simulations.

A run configuration is a yaml file with two sections:

    simulation:
        model: rvo
        scenario: circle
        ...
    rvo:
        neighbor-radius: 4.0
        time-horizon: 2.5

Anything missing from the file falls back to `DEFAULT_CFG`.
"""

import copy
import logging
import numbers
import pathlib
from typing import Any, Dict, Mapping

import yaml

from crowd_rvo.configs import crowd

logger = logging.getLogger(__name__)

DEFAULT_CFG = {
    "simulation": {
        "model": "rvo",
        "scenario": "circle",
        "seed": 0,
        "world-width": crowd.WORLD_WIDTH,
        "world-height": crowd.WORLD_HEIGHT,
        "time-step": crowd.MAX_TIME_STEP,
        "steps": 400,
    },
    "rvo": dict(crowd.RVO_CFG),
}


def load_config(config_path: pathlib.Path = None) -> Dict[str, Any]:
    """Read a yaml run configuration and fill in the defaults.

    If no path is given the defaults are returned as is."""
    cfg = copy.deepcopy(DEFAULT_CFG)
    if config_path is None:
        return cfg

    config_path = pathlib.Path(config_path).expanduser()
    logger.info("Loading config from %s", config_path)
    file_cfg = yaml.safe_load(config_path.read_text()) or {}

    for section, values in file_cfg.items():
        if section not in cfg:
            raise ValueError(f"Unknown config section '{section}' in {config_path}.")
        if section == "rvo":
            cfg["rvo"] = merge_parameters(cfg["rvo"], values or {})
        else:
            cfg[section].update(values or {})

    return cfg


def merge_parameters(
    current: Mapping[str, float], overrides: Mapping[str, float]
) -> Dict[str, float]:
    """Return a copy of `current` with `overrides` applied on top.

    Only keys already known in `current` may be overridden and every value has
    to be a real number. The camelCase names in `crowd.PARAMETER_ALIASES` are
    accepted for the hyphenated keys.

    Usage:
        >>> merge_parameters({"time-horizon": 2.5}, {"time-horizon": 4})
        {'time-horizon': 4}
        >>> merge_parameters({"time-horizon": 2.5}, {"timeHorizon": 3.0})
        {'time-horizon': 3.0}
    """
    merged = dict(current)
    for key, value in overrides.items():
        key = crowd.PARAMETER_ALIASES.get(key, key)
        if key not in merged:
            raise ValueError(f"Unknown parameter '{key}'.")
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise ValueError(f"Parameter '{key}' must be numeric, got {value!r}.")
        merged[key] = value

    return merged
