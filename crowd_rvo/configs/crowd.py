"""Constants that control how the RVO crowd is built and stepped.

Distances inside the simulation are in pixels so they can be handed straight to
the renderer. The metric parameters below are scaled with `PIXELS_PER_METER`.

1. arena size and agent count
2. agent body and speed ranges
3. the neighbor search and time horizon defaults
"""

PIXELS_PER_METER = 55

WORLD_WIDTH = 800
WORLD_HEIGHT = 600

AGENT_COUNT = 32
AGENT_RADIUS_METERS = 0.28

# Preferred walking speed is drawn from [MIN, MIN + SPREAD) meters per second.
MIN_PREFERRED_SPEED = 1.2
PREFERRED_SPEED_SPREAD = 0.6
MAX_SPEED_FACTOR = 1.25

# Fraction of the shorter arena side used as the radius of the circle scenario.
CIRCLE_SCENARIO_FRACTION = 0.35
# Start positions on the ring are moved by up to this many pixels in x and y.
# A perfectly symmetric ring locks up in the middle.
CIRCLE_START_JITTER = 0.5

MAX_NEIGHBORS = 10

# Explicit integration is only stable for small steps.
MAX_TIME_STEP = 0.05
MIN_TIME_HORIZON = 0.2

GOAL_SWAP_RADIUS_FACTOR = 0.8
MIN_GOAL_SWAP_DISTANCE = 6.0
GOAL_ARRIVAL_DISTANCE = 1.0

RVO_CFG = {
    "neighbor-radius": 4.0,
    "time-horizon": 2.5,
    "max-neighbors": MAX_NEIGHBORS,
    "agent-count": AGENT_COUNT,
}

# camelCase names accepted by `configure` for the keys above.
PARAMETER_ALIASES = {
    "neighborRadius": "neighbor-radius",
    "timeHorizon": "time-horizon",
    "maxNeighbors": "max-neighbors",
    "agentCount": "agent-count",
}
