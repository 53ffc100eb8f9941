"""A library of functions for taking in a crowd history and plotting
the results to a gif. Only the public agent states are read here."""

import colorsys
import pathlib
import re
from typing import List, Sequence

import imageio
import matplotlib

matplotlib.use("Agg")
import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import numpy as np
from matplotlib import patches

from crowd_rvo import agents

_HSL_PATTERN = re.compile(r"hsl\(\s*([\d.]+)\s*,\s*([\d.]+)%\s*,\s*([\d.]+)%\s*\)")
_DEFAULT_COLOR = "tab:cyan"
_BACKGROUND = "#030712"


def to_rgb(color: str):
    """Turn an agent color into something matplotlib understands. Agents carry
    css style `hsl(h, s%, l%)` strings.

    Usage:
        >>> to_rgb("hsl(0, 100%, 50%)")
        (1.0, 0.0, 0.0)
    """
    match = _HSL_PATTERN.fullmatch(color.strip()) if color else None
    if match is None:
        return mcolors.to_rgb(color or _DEFAULT_COLOR)

    hue, saturation, lightness = (float(value) for value in match.groups())
    return colorsys.hls_to_rgb((hue % 360) / 360, lightness / 100, saturation / 100)


def draw_agents(
    ax, agent_states: Sequence[agents.AgentState], width: float, height: float
) -> None:
    ax.set_facecolor(_BACKGROUND)
    for state in agent_states:
        ax.add_patch(
            patches.Circle(
                (state.position.x, state.position.y),
                state.radius,
                color=to_rgb(state.color),
            )
        )
        if state.velocity.abs_sq() > 1:
            ax.plot(
                [state.position.x, state.position.x + state.velocity.x * 0.12],
                [state.position.y, state.position.y + state.velocity.y * 0.12],
                color="white",
                linewidth=1.0,
            )
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.set_aspect("equal")


def plot_state(
    agent_states: Sequence[agents.AgentState], width: float, height: float
) -> np.ndarray:
    fig, ax = plt.subplots(figsize=(8, 6))
    draw_agents(ax, agent_states, width, height)
    fig.canvas.draw()
    image = np.asarray(fig.canvas.buffer_rgba())[..., :3].copy()
    plt.close(fig)

    return image


def plot_history(
    crowd_history: List[Sequence[agents.AgentState]],
    width: float,
    height: float,
    save_path: pathlib.Path,
    fps: int = 30,
) -> None:
    save_path = pathlib.Path(save_path)
    save_path.parent.mkdir(exist_ok=True, parents=True)

    imageio.mimsave(
        str(save_path),
        [plot_state(states, width, height) for states in crowd_history],
        duration=1000 / fps,
    )
