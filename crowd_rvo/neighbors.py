"""Find the nearest neighbors of every agent.

A brute force pairwise search is plenty for a few dozen agents."""

from typing import List, NamedTuple, Sequence

from crowd_rvo import agents


class NeighborRef(NamedTuple):
    index: int
    dist_sq: float


def insert_neighbor(
    neighbor_list: List[NeighborRef], neighbor: NeighborRef, max_neighbors: int
) -> None:
    """Insert `neighbor` keeping the list sorted by distance, then drop the farthest
    entry if the list grew past `max_neighbors`."""
    position = len(neighbor_list)
    while position > 0 and neighbor_list[position - 1].dist_sq > neighbor.dist_sq:
        position -= 1
    neighbor_list.insert(position, neighbor)

    if len(neighbor_list) > max_neighbors:
        neighbor_list.pop()


def build_neighbor_table(
    crowd_agents: Sequence[agents.Agent], radius_sq: float, max_neighbors: int
) -> List[List[NeighborRef]]:
    """For every agent, collect up to `max_neighbors` other agents whose squared
    distance is within `radius_sq`, nearest first."""
    table = [[] for _ in crowd_agents]
    if max_neighbors <= 0:
        return table

    for i in range(len(crowd_agents)):
        position = crowd_agents[i].get_position()
        for j in range(i + 1, len(crowd_agents)):
            dist_sq = (position - crowd_agents[j].get_position()).abs_sq()
            if dist_sq > radius_sq:
                continue
            insert_neighbor(table[i], NeighborRef(j, dist_sq), max_neighbors)
            insert_neighbor(table[j], NeighborRef(i, dist_sq), max_neighbors)

    return table
